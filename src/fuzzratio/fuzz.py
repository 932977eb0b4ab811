"""
Ratio scorers.

Every scorer takes two strings and returns an int in [0, 100]. Strings are
compared as sequences of text units (grapheme clusters), the same units the
edit distance and the block matcher use.

    >>> ratio("this is a test", "this is a test!")
    97
    >>> partial_ratio("bcd", "XXXbcdeEEE")
    100
    >>> token_sort_ratio("fuzzy wuzzy was a bear", "wuzzy fuzzy was a bear")
    100
"""
from __future__ import annotations
from typing import Callable, List, Sequence

from . import matcher
from .levenshtein import distance as edit_distance
from .normalize import sorted_tokens, text_units, tokenize

__all__ = [
    "edit_distance",
    "ratio",
    "partial_ratio",
    "token_sort_ratio",
    "partial_token_sort_ratio",
    "token_set_ratio",
    "partial_token_set_ratio",
]


def _percent(matched: int, total: int) -> int:
    """round(100 * 2 * matched / total), half away from zero, in exact integers."""
    if total == 0:
        return 100
    return (400 * matched + total) // (2 * total)


def _ratio_units(ua: Sequence[str], ub: Sequence[str]) -> int:
    return _percent(matcher.matched_length(ua, ub), len(ua) + len(ub))


def ratio(a: str, b: str) -> int:
    """Simple ratio: 2 * matched units / total units, as a percentage."""
    return _ratio_units(text_units(a), text_units(b))


def partial_ratio(a: str, b: str) -> int:
    """
    Best ratio of the shorter string against a same-length window of the longer.

    Candidate windows are anchored on the matching blocks between the two
    strings rather than on every offset. Empty input on either side scores 0.
    """
    ua = text_units(a)
    ub = text_units(b)
    if not ua or not ub:
        return 0

    short, long_ = (ua, ub) if len(ua) <= len(ub) else (ub, ua)
    n = len(short)

    best = 0
    for blk in matcher.matching_blocks(short, long_):
        start = max(0, blk.b - blk.a)
        end = start + n
        if end > len(long_):
            end = len(long_)
            start = end - n
        score = _ratio_units(short, long_[start:end])
        if score == 100:
            return 100
        best = max(best, score)
    return best


def token_sort_ratio(a: str, b: str, full_process: bool = True) -> int:
    """Ratio of the two token lists after sorting them alphabetically."""
    sa = sorted_tokens(a, full_process)
    sb = sorted_tokens(b, full_process)
    return ratio(sa, sb)


def partial_token_sort_ratio(a: str, b: str, full_process: bool = True) -> int:
    """Partial ratio of the two token lists after sorting them alphabetically."""
    sa = sorted_tokens(a, full_process)
    sb = sorted_tokens(b, full_process)
    return partial_ratio(sa, sb)


def _token_set_strings(a: str, b: str, full_process: bool) -> List[str] | None:
    """
    Build [intersection, intersection+diff_a, intersection+diff_b].

    Returns None when either side has no tokens.
    """
    set_a = set(tokenize(a, full_process))
    set_b = set(tokenize(b, full_process))
    if not set_a or not set_b:
        return None

    inter = set_a & set_b
    sorted_inter = " ".join(sorted(inter))
    diff_a = " ".join(sorted(set_a - inter))
    diff_b = " ".join(sorted(set_b - inter))

    combined_a = f"{sorted_inter} {diff_a}" if sorted_inter and diff_a else sorted_inter or diff_a
    combined_b = f"{sorted_inter} {diff_b}" if sorted_inter and diff_b else sorted_inter or diff_b
    return [sorted_inter, combined_a, combined_b]


def _token_set_with(a: str, b: str, full_process: bool, scorer: Callable[[str, str], int]) -> int:
    strings = _token_set_strings(a, b, full_process)
    if strings is None:
        # nothing to intersect: compare whatever tokens exist directly
        return scorer(
            " ".join(sorted(set(tokenize(a, full_process)))),
            " ".join(sorted(set(tokenize(b, full_process)))),
        )
    inter, combined_a, combined_b = strings
    return max(
        scorer(inter, combined_a),
        scorer(inter, combined_b),
        scorer(combined_a, combined_b),
    )


def token_set_ratio(a: str, b: str, full_process: bool = True) -> int:
    """
    Token-set ratio: rewards shared tokens regardless of order or duplicates.

    The shared tokens are compared against each side's shared+remaining
    tokens, and both sides against each other; the best ratio wins.
    """
    return _token_set_with(a, b, full_process, ratio)


def partial_token_set_ratio(a: str, b: str, full_process: bool = True) -> int:
    """Same construction as token_set_ratio, scored with partial_ratio."""
    return _token_set_with(a, b, full_process, partial_ratio)
