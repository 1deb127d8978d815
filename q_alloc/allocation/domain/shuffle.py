"""Deterministic Fisher-Yates shuffle keyed by a seed string."""

import hashlib
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def seeded_index(seed: str, i: int) -> int:
    """Return a pseudo-random integer in ``[0, i]`` derived from (seed, i).

    The full seed string is hashed with SHA-256 together with the step index,
    so every character of the seed contributes and each step draws a fresh
    value. The first 8 digest bytes are read big-endian.
    """
    digest = hashlib.sha256(f"{seed}:{i}".encode("utf-8")).digest()
    return int.from_bytes(digest[:8], "big") % (i + 1)


def deterministic_shuffle(items: Sequence[T], seed: str) -> list[T]:
    """Return a permutation of items that depends only on (items, seed).

    The input sequence is never mutated. An empty sequence yields an empty list.
    """
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = seeded_index(seed=seed, i=i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
