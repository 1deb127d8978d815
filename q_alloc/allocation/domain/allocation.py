"""Allocation value object — one student's persisted question selection."""

from pydantic import BaseModel, Field


class Allocation(BaseModel, frozen=True):
    """Immutable record of the question ids selected for one (assignment, student) pair.

    ``question_ids`` keeps selection order: easy questions first, then medium,
    then hard. ``seed`` is the base seed the per-level shuffles were derived from.
    """

    question_ids: tuple[str, ...]
    seed: str = Field(min_length=1)
