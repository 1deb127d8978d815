"""JSONL question bank loader — reads a question bank file into Question objects."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from q_alloc.question.domain.observer import QuestionBankObserver
from q_alloc.question.domain.question import Question
from q_alloc.question.infrastructure.errors import QuestionBankLoadError

# Question banks exported from the web application use camelCase keys.
_KEY_ALIASES: dict[str, str] = {
    "_id": "id",
    "teacherId": "teacher_id",
    "questionName": "name",
    "inputFormat": "input_format",
    "outputFormat": "output_format",
    "sampleInputs": "sample_inputs",
    "sampleOutputs": "sample_outputs",
}


class JsonlQuestionBankLoader:
    """Loads a JSONL question bank and returns a list of Question value objects."""

    def __init__(self, observer: QuestionBankObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> list[Question]:
        """
        Load every question from the JSONL file at path.

        Collects ALL per-line errors before raising a single QuestionBankLoadError.

        Raises:
            QuestionBankLoadError: if the file is not found, any line is invalid
                JSON, fails validation, or repeats an earlier question id.
        """
        path_str = str(path)
        self._observer.question_bank_loading_started(path=path_str)

        try:
            with open(path, encoding="utf-8") as fh:
                lines = [line for line in fh if line.strip()]
        except FileNotFoundError:
            reason = f"file not found: {path_str}"
            self._observer.question_bank_loading_failed(path=path_str, reason=reason)
            raise QuestionBankLoadError(reason=reason)

        questions: list[Question] = []
        errors: list[str] = []
        seen: set[str] = set()

        for index, line in enumerate(lines):
            result = self._parse_line(line=line, index=index)
            if isinstance(result, str):
                errors.append(result)
                continue
            if result.id in seen:
                errors.append(f"line {index}: duplicate question id '{result.id}'")
                continue
            seen.add(result.id)
            questions.append(result)
            self._observer.question_bank_question_loaded(question_id=result.id)

        if errors:
            reason = "; ".join(errors)
            self._observer.question_bank_loading_failed(path=path_str, reason=reason)
            raise QuestionBankLoadError(reason=reason)

        self._observer.question_bank_loading_completed(
            path=path_str, total_questions=len(questions)
        )
        return questions

    def _parse_line(self, line: str, index: int) -> Question | str:
        """Return a Question on success, or an error string describing the problem."""
        try:
            data: Any = json.loads(line)
        except json.JSONDecodeError as exc:
            return f"line {index}: invalid JSON: {exc}"

        if not isinstance(data, dict):
            return f"line {index}: expected a JSON object"

        normalized = {_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        try:
            return Question.model_validate(normalized)
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) for err in exc.errors()
            )
            return f"line {index}: invalid question ({fields})"
