# src/fuzzratio/models.py
"""
Data models for the scoring engine.

- CommonSubstring: one occurrence found by the substring scan, with its ranges.
- MatchBlock: a run of identical text units shared by two sequences.
- ScoredItem: one element of a collection together with its score.

These are plain containers; they carry no scoring logic and are never
persisted. Offsets are always counted in text units (see normalize.text_units).
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class MatchBlock:
    """
    A run of identical text units.

    Attributes
    ----------
    a : int
        Offset of the run in the first sequence.
    b : int
        Offset of the run in the second sequence.
    size : int
        Length of the run (always > 0).
    """
    a: int
    b: int
    size: int


@dataclass(frozen=True, slots=True)
class CommonSubstring:
    """
    One common-substring occurrence ending at a matching cell of the DP matrix.

    Attributes
    ----------
    a_range : range
        Text-unit offsets covered in the first sequence.
    b_range : range
        Text-unit offsets covered in the second sequence.
    size : int
        Length of the substring; equals len(a_range) == len(b_range).
    """
    a_range: range
    b_range: range
    size: int

    def as_block(self) -> MatchBlock:
        return MatchBlock(self.a_range.start, self.b_range.start, self.size)


@dataclass(frozen=True, slots=True)
class ScoredItem(Generic[T]):
    """An element of a scored collection and its score in [0, 100]."""
    element: T
    score: int

    def __iter__(self) -> Iterator[Any]:
        # allows `for element, score in fuzzy_map(...)`
        yield self.element
        yield self.score
