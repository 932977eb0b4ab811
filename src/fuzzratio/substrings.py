from __future__ import annotations
from typing import List, Sequence, Union

from .models import CommonSubstring
from .normalize import text_units


def _as_units(s: Union[str, Sequence[str]]) -> Sequence[str]:
    return text_units(s) if isinstance(s, str) else s


def pairs(a: Union[str, Sequence[str]], b: Union[str, Sequence[str]]) -> List[CommonSubstring]:
    """
    Enumerate every common-substring occurrence of a and b.

    M[i][j] holds the length of the common run ending at a[i-1] / b[j-1]
    (0 when those units differ). Every matching cell emits one entry, so a run
    of length n contributes entries of length 1..n. Callers pick the block they
    need. Entries come out row-major: by end offset in a, then in b.

    Strings are split into text units; already-split sequences are used as is.
    """
    ua = _as_units(a)
    ub = _as_units(b)
    if not ua or not ub:
        return []

    out: List[CommonSubstring] = []
    prev = [0] * (len(ub) + 1)
    for i in range(1, len(ua) + 1):
        cur = [0] * (len(ub) + 1)
        ca = ua[i - 1]
        for j in range(1, len(ub) + 1):
            if ca == ub[j - 1]:
                n = prev[j - 1] + 1
                cur[j] = n
                out.append(CommonSubstring(
                    a_range=range(i - n, i),
                    b_range=range(j - n, j),
                    size=n,
                ))
        prev = cur
    return out
