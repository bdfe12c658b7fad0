"""Pair up an old and a new sorted list of frequencies."""

import heapq
from dataclasses import dataclass
from enum import Enum
from itertools import pairwise
from operator import attrgetter
from typing import List, NamedTuple, Optional, Sequence, Union

# Two frequencies aren't considered for matching unless they're closer than this.
MAX_CLOSE = 120.0


@dataclass(frozen=True)
class DropOld:
    """The old value at ``index`` has no partner."""

    index: int


@dataclass(frozen=True)
class AddNew:
    """The new value at ``index`` has no partner."""

    index: int


@dataclass(frozen=True)
class Match:
    """The old value at ``old`` and the new value at ``new`` go together."""

    old: int
    new: int


MatchResult = Union[DropOld, AddNew, Match]


class _Side(Enum):
    OLD = "old"
    NEW = "new"


class _Entry(NamedTuple):
    value: float
    side: _Side
    index: int


def _interleave(old: Sequence[float], nu: Sequence[float]) -> List[_Entry]:
    # New values come first among equals.
    return list(
        heapq.merge(
            (_Entry(v, _Side.NEW, i) for i, v in enumerate(nu)),
            (_Entry(v, _Side.OLD, i) for i, v in enumerate(old)),
            key=attrgetter("value"),
        )
    )


def _favourite(prev: Optional[_Entry], cur: _Entry, nxt: Optional[_Entry]) -> Optional[int]:
    candidates = []
    if prev is not None and prev.side != cur.side:
        candidates.append((cur.value - prev.value, prev.index))
    if nxt is not None and nxt.side != cur.side:
        candidates.append((nxt.value - cur.value, nxt.index))
    if not candidates:
        return None
    if len(candidates) == 1 or candidates[0][0] < candidates[1][0]:
        dist, index = candidates[0]
    else:
        dist, index = candidates[1]
    return index if dist < MAX_CLOSE else None


def match_values(old: Sequence[float], nu: Sequence[float]) -> List[MatchResult]:
    """Match each old frequency to a new one where both prefer each other.

    Both lists must be sorted ascending. Each value's favourite is its closest
    neighbour of the other list in the merged order, if nearer than
    ``MAX_CLOSE``. Results list every old index (as a match or a drop) in
    order, then every unmatched new index.
    """
    merged = _interleave(old, nu)
    for a, b in pairwise(merged):
        if not a.value <= b.value:
            raise ValueError("frequencies must be sorted in ascending order")

    faves = {
        _Side.OLD: [None] * len(old),
        _Side.NEW: [None] * len(nu),
    }
    if len(merged) >= 2:
        before = [None, *merged[:-1]]
        after = [*merged[1:], None]
        for prev, cur, nxt in zip(before, merged, after):
            faves[cur.side][cur.index] = _favourite(prev, cur, nxt)

    old_faves = faves[_Side.OLD]
    nu_faves = faves[_Side.NEW]
    results: List[MatchResult] = []
    for i, fave in enumerate(old_faves):
        if fave is not None and nu_faves[fave] == i:
            results.append(Match(i, fave))
        else:
            results.append(DropOld(i))
    for i, fave in enumerate(nu_faves):
        if fave is None or old_faves[fave] != i:
            results.append(AddNew(i))
    return results