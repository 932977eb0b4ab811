from __future__ import annotations
from typing import Sequence

from .normalize import text_units


def _distance_units(a: Sequence[str], b: Sequence[str]) -> int:
    # keep the rolling row over the shorter sequence
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        cur = [i] + [0] * len(b)
        for j, cb in enumerate(b, start=1):
            cost = 0 if ca == cb else 1
            cur[j] = min(
                prev[j] + 1,         # deletion
                cur[j - 1] + 1,      # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev = cur
    return prev[-1]


def distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings, counted in text units.

    Insertions, deletions and substitutions each cost 1.
    distance("", s) == number of text units in s.
    """
    return _distance_units(text_units(a), text_units(b))
