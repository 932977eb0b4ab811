from __future__ import annotations
from typing import List

import regex

# One text unit == one extended grapheme cluster. Every algorithm that indexes
# into a string (edit distance, substring scan, block matching, windowing)
# goes through text_units() so offsets always agree.
_GRAPHEME = regex.compile(r"\X")


def text_units(text: str) -> List[str]:
    """Split text into extended grapheme clusters."""
    if not text:
        return []
    return _GRAPHEME.findall(text)


def _is_word_unit(unit: str) -> bool:
    """A cluster is kept when its base character is a letter or digit."""
    return unit[0].isalnum()


def normalize(text: str) -> str:
    """
    Normalize text for token-based scoring:
      * casefold
      * every unit that is neither alphanumeric nor whitespace becomes a space
      * runs of whitespace collapse to one space
      * leading/trailing whitespace trimmed
    """
    out: list[str] = []
    pending_space = False

    for unit in text_units(text):
        if _is_word_unit(unit):
            if pending_space and out:
                out.append(" ")
            pending_space = False
            out.append(unit.casefold())
        else:
            # whitespace and punctuation/symbols both act as separators
            pending_space = True

    return "".join(out)


def tokenize(text: str, full_process: bool = True) -> List[str]:
    """
    Split text into tokens.

    With full_process the text is normalized first. Without it the raw input
    is split on whitespace only: case and punctuation are left untouched.
    """
    if full_process:
        text = normalize(text)
    return text.split()


def sorted_tokens(text: str, full_process: bool = True) -> str:
    """Tokens sorted lexicographically and joined with single spaces."""
    return " ".join(sorted(tokenize(text, full_process)))
