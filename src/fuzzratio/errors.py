from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_FLOOR = "invalid_floor"   # floor outside [0, 100]
    EMPTY_QUERY = "empty_query"       # query string is empty


class FuzzySortError(ValueError):
    """Raised by the collection helpers for bad arguments, before any scoring."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        super().__init__(message or kind.value)

    @classmethod
    def invalid_floor(cls, floor: int) -> "FuzzySortError":
        return cls(ErrorKind.INVALID_FLOOR, f"floor must be within [0, 100], got {floor}")

    @classmethod
    def empty_query(cls) -> "FuzzySortError":
        return cls(ErrorKind.EMPTY_QUERY, "query must not be empty")
