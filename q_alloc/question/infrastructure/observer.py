"""Structlog implementation of the QuestionBankObserver port."""

import structlog


class StructlogQuestionBankObserver:
    """Delegates question bank events to structlog.

    Satisfies the QuestionBankObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def question_bank_loading_started(self, path: str) -> None:
        self._log.info("question_bank.loading_started", path=path)

    def question_bank_question_loaded(self, question_id: str) -> None:
        self._log.debug("question_bank.question_loaded", question_id=question_id)

    def question_bank_loading_completed(self, path: str, total_questions: int) -> None:
        self._log.info(
            "question_bank.loading_completed",
            path=path,
            total_questions=total_questions,
        )

    def question_bank_loading_failed(self, path: str, reason: str) -> None:
        self._log.error("question_bank.loading_failed", path=path, reason=reason)
