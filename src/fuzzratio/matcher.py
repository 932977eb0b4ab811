from __future__ import annotations
from typing import List, Optional, Sequence, Union

from .models import MatchBlock
from .normalize import text_units

Units = Union[str, Sequence[str]]


def _as_units(s: Units) -> Sequence[str]:
    return text_units(s) if isinstance(s, str) else s


def _best_in(ua: Sequence[str], ub: Sequence[str]) -> Optional[MatchBlock]:
    """
    Longest common block; ties go to the earliest start in a, then in b.

    Same DP as substrings.pairs(), but only two rows and the best cell are
    kept, so memory stays O(len(b)).
    """
    best_size = 0
    best_a = best_b = 0
    prev = [0] * (len(ub) + 1)
    for i in range(1, len(ua) + 1):
        cur = [0] * (len(ub) + 1)
        ca = ua[i - 1]
        for j in range(1, len(ub) + 1):
            if ca == ub[j - 1]:
                n = prev[j - 1] + 1
                cur[j] = n
                if (n > best_size
                        or (n == best_size and (i - n, j - n) < (best_a, best_b))):
                    best_size, best_a, best_b = n, i - n, j - n
        prev = cur
    if best_size == 0:
        return None
    return MatchBlock(best_a, best_b, best_size)


def best_block(a: Units, b: Units) -> Optional[MatchBlock]:
    """Return the longest common block of a and b, or None if they share nothing."""
    return _best_in(_as_units(a), _as_units(b))


def matching_blocks(a: Units, b: Units) -> List[MatchBlock]:
    """
    Divide-and-conquer alignment.

    Take the best block, then repeat on the regions strictly before it and
    strictly after it. Returned blocks are sorted by their position in a
    (and therefore in b, since regions never cross).
    """
    ua = _as_units(a)
    ub = _as_units(b)

    found: List[MatchBlock] = []
    # work queue of (a_lo, a_hi, b_lo, b_hi) regions still to align
    queue = [(0, len(ua), 0, len(ub))]
    while queue:
        alo, ahi, blo, bhi = queue.pop()
        if alo >= ahi or blo >= bhi:
            continue
        blk = _best_in(ua[alo:ahi], ub[blo:bhi])
        if blk is None:
            continue
        i, j, k = alo + blk.a, blo + blk.b, blk.size
        found.append(MatchBlock(i, j, k))
        queue.append((alo, i, blo, j))
        queue.append((i + k, ahi, j + k, bhi))

    found.sort(key=lambda m: (m.a, m.b))
    return found


def matched_length(a: Units, b: Units) -> int:
    """Total number of text units matched by the divide-and-conquer alignment."""
    return sum(m.size for m in matching_blocks(a, b))


def ratio(a: Units, b: Units) -> float:
    """
    Similarity in [0, 1]: 2 * matched / (len(a) + len(b)).

    Two empty inputs are a full match (1.0).
    """
    ua = _as_units(a)
    ub = _as_units(b)
    total = len(ua) + len(ub)
    if total == 0:
        return 1.0
    return 2.0 * matched_length(ua, ub) / total
