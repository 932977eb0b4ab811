"""
Collection helpers on top of the ratio scorers.

fuzzy_map() scores every element of a collection against a query string,
drops elements under a floor and optionally sorts by score. fuzzy_sort() is
the sorted, elements-only variant. The *_match variants take the query as an
element of the collection and project it through the same stringify.

Example:
    >>> fuzzy_sort(["apple", "banana", "grape"], "app")
    ['apple', 'grape', 'banana']
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional, TypeVar

from . import config as CFG
from . import fuzz
from .errors import FuzzySortError
from .models import ScoredItem

log = logging.getLogger(__name__)

T = TypeVar("T")


class ScoreOption(str, Enum):
    STANDARD = "standard"
    PARTIAL = "partial"
    TOKEN_SORT = "token_sort"
    TOKEN_SET = "token_set"
    PARTIAL_TOKEN_SET = "partial_token_set"
    PARTIAL_TOKEN_SORT = "partial_token_sort"

    @classmethod
    def from_name(cls, name: str) -> "ScoreOption":
        """Parse a scorer name as used on the CLI and in query strings."""
        try:
            return cls(name.strip().lower().replace("-", "_"))
        except ValueError:
            choices = ", ".join(o.value for o in cls)
            raise ValueError(f"unknown scorer {name!r} (choose from: {choices})") from None


def calculate_score(
    query: str,
    target: str,
    *,
    full_process: bool = CFG.FULL_PROCESS,
    score_option: ScoreOption = ScoreOption.STANDARD,
) -> int:
    """Score target against query with the selected algorithm."""
    score_option = ScoreOption(score_option)
    if score_option is ScoreOption.STANDARD:
        return fuzz.ratio(query, target)
    if score_option is ScoreOption.PARTIAL:
        return fuzz.partial_ratio(query, target)
    if score_option is ScoreOption.TOKEN_SORT:
        return fuzz.token_sort_ratio(query, target, full_process=full_process)
    if score_option is ScoreOption.TOKEN_SET:
        return fuzz.token_set_ratio(query, target, full_process=full_process)
    if score_option is ScoreOption.PARTIAL_TOKEN_SET:
        return fuzz.partial_token_set_ratio(query, target, full_process=full_process)
    return fuzz.partial_token_sort_ratio(query, target, full_process=full_process)


def fuzzy_map(
    items: Iterable[T],
    query: str,
    *,
    floor: int = CFG.DEFAULT_FLOOR,
    sort: bool = False,
    case_sensitive: bool = CFG.CASE_SENSITIVE,
    stringify: Optional[Callable[[T], str]] = None,
    full_process: bool = CFG.FULL_PROCESS,
    score_option: ScoreOption = ScoreOption.STANDARD,
) -> List[ScoredItem[T]]:
    """
    Score each element against query.

    Parameters
    ----------
    items : iterable
        Elements to score.
    query : str
        Query string; must not be empty.
    floor : int
        Minimum score (0..100) for an element to be kept.
    sort : bool
        Sort the result by descending score. Equal scores keep input order.
    case_sensitive : bool
        When False both sides are lower-cased before scoring.
    stringify : callable, optional
        Element -> str projection. None means str(element).
    full_process : bool
        Passed to the token-based scorers.
    score_option : ScoreOption
        Scoring algorithm.

    Raises
    ------
    FuzzySortError
        kind INVALID_FLOOR if floor is outside [0, 100];
        kind EMPTY_QUERY if query is empty.
    """
    if not 0 <= floor <= 100:
        raise FuzzySortError.invalid_floor(floor)
    if not query:
        raise FuzzySortError.empty_query()
    score_option = ScoreOption(score_option)

    to_str = stringify if stringify is not None else str
    q = query if case_sensitive else query.lower()

    out: List[ScoredItem[T]] = []
    seen = 0
    for item in items:
        seen += 1
        text = to_str(item)
        if not case_sensitive:
            text = text.lower()
        score = calculate_score(q, text, full_process=full_process, score_option=score_option)
        if score >= floor:
            out.append(ScoredItem(item, score))

    if sort:
        out.sort(key=lambda r: r.score, reverse=True)
    log.debug("fuzzy_map(%r, scorer=%s, floor=%d): kept %d of %d",
              query, score_option.value, floor, len(out), seen)
    return out


def fuzzy_sort(
    items: Iterable[T],
    query: str,
    *,
    floor: int = CFG.DEFAULT_FLOOR,
    case_sensitive: bool = CFG.CASE_SENSITIVE,
    stringify: Optional[Callable[[T], str]] = None,
    full_process: bool = CFG.FULL_PROCESS,
    score_option: ScoreOption = ScoreOption.STANDARD,
) -> List[T]:
    """Elements with score >= floor, best first. See fuzzy_map()."""
    rows = fuzzy_map(
        items, query,
        floor=floor, sort=True, case_sensitive=case_sensitive,
        stringify=stringify, full_process=full_process, score_option=score_option,
    )
    return [r.element for r in rows]


# /* ~~~ query given as an element: projected through the same stringify ~~~ */

def fuzzy_map_match(
    items: Iterable[T],
    match: T,
    *,
    stringify: Optional[Callable[[T], str]] = None,
    **kwargs,
) -> List[ScoredItem[T]]:
    to_str = stringify if stringify is not None else str
    return fuzzy_map(items, to_str(match), stringify=stringify, **kwargs)


def fuzzy_sort_match(
    items: Iterable[T],
    match: T,
    *,
    stringify: Optional[Callable[[T], str]] = None,
    **kwargs,
) -> List[T]:
    to_str = stringify if stringify is not None else str
    return fuzzy_sort(items, to_str(match), stringify=stringify, **kwargs)
