"""Fake QuestionBankObserver for use in tests — records events without mocking."""


class FakeQuestionBankObserver:
    def __init__(self) -> None:
        self.started: list[str] = []
        self.loaded: list[str] = []
        self.completed: list[dict[str, object]] = []
        self.failed: list[dict[str, str]] = []

    def question_bank_loading_started(self, path: str) -> None:
        self.started.append(path)

    def question_bank_question_loaded(self, question_id: str) -> None:
        self.loaded.append(question_id)

    def question_bank_loading_completed(self, path: str, total_questions: int) -> None:
        self.completed.append({"path": path, "total_questions": total_questions})

    def question_bank_loading_failed(self, path: str, reason: str) -> None:
        self.failed.append({"path": path, "reason": reason})
