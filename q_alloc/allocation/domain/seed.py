"""Seed derivation — reproducible seed strings for per-student, per-level shuffles."""

from q_alloc.question.domain.difficulty import Difficulty


def derive_base_seed(base: int, student_id: str) -> str:
    """Return the seed recorded on a student's Allocation, e.g. ``"1717171717000-s1"``."""
    return f"{base}-{student_id}"


def derive_seed(base: int, student_id: str, level: Difficulty) -> str:
    """Return the seed used to shuffle one difficulty bucket for one student.

    ``base`` is a coarse timestamp taken once per allocation call; the result is
    a pure function of its three inputs.
    """
    return f"{derive_base_seed(base=base, student_id=student_id)}-{level.value}"


def level_seed(base_seed: str, level: Difficulty) -> str:
    """Extend an already-derived base seed with a difficulty tag."""
    return f"{base_seed}-{level.value}"
