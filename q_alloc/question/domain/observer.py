"""Observer port for the question bank domain — defines events in domain language."""

from typing import Protocol


class QuestionBankObserver(Protocol):
    def question_bank_loading_started(self, path: str) -> None: ...

    def question_bank_question_loaded(self, question_id: str) -> None: ...

    def question_bank_loading_completed(self, path: str, total_questions: int) -> None: ...

    def question_bank_loading_failed(self, path: str, reason: str) -> None: ...
