"""
Fuzzy String Ratio Module

This module scores how similar two pieces of text are and returns an integer
between 0 and 100, usable for ranking, de-duplication or fuzzy search.

The module is split into small leaf-first pieces:
- Text units and normalization (normalize)
- Levenshtein edit distance (levenshtein)
- Common-substring scan and block matching (substrings, matcher)
- Ratio scorers (fuzz)
- Collection search/sort helpers (process)

Main Functions:
    ratio(a, b): simple ratio
    partial_ratio(a, b): best window of the longer string
    token_sort_ratio(a, b): ratio after sorting tokens
    token_set_ratio(a, b): ratio over shared / remaining token sets
    partial_token_set_ratio(a, b): token set construction with partial_ratio
    fuzzy_sort(items, query): rank a collection against a query

Example Usage:
    from fuzzratio import ratio, fuzzy_sort

    ratio("fuzzy wuzzy", "wuzzy fuzzy")
    fuzzy_sort(["apple", "banana", "grape"], "app")

Version: 1.0.0
"""

# src/fuzzratio/__init__.py
from .errors import ErrorKind, FuzzySortError
from .fuzz import (
    edit_distance,
    partial_ratio,
    partial_token_set_ratio,
    partial_token_sort_ratio,
    ratio,
    token_set_ratio,
    token_sort_ratio,
)
from .models import MatchBlock, ScoredItem
from .process import (
    ScoreOption,
    calculate_score,
    fuzzy_map,
    fuzzy_map_match,
    fuzzy_sort,
    fuzzy_sort_match,
)

__version__ = "1.0.0"
__all__ = [
    "edit_distance",
    "ratio",
    "partial_ratio",
    "token_sort_ratio",
    "partial_token_sort_ratio",
    "token_set_ratio",
    "partial_token_set_ratio",
    "ScoreOption",
    "calculate_score",
    "fuzzy_map",
    "fuzzy_map_match",
    "fuzzy_sort",
    "fuzzy_sort_match",
    "ErrorKind",
    "FuzzySortError",
    "MatchBlock",
    "ScoredItem",
]
