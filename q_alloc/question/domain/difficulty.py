"""Difficulty — the closed set of question difficulty levels."""

from enum import StrEnum


class Difficulty(StrEnum):
    """Difficulty bucket of a question.

    Iteration order (easy, medium, hard) is also the order in which selected
    questions are concatenated into an allocation.
    """

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
