"""Ballot box allocation: minimise the largest number of ballots per box."""

from __future__ import annotations

import itertools
from typing import Iterable

_UPPER_BOUND = 5_000_010


def min_max_ballots(populations: Iterable[int], boxes: int) -> int:
    """Smallest per-box load so that all cities fit in ``boxes`` boxes."""
    cities = list(populations)

    def fits(load: int) -> bool:
        if load <= 0:
            return not cities and boxes >= 0
        return sum(-(-p // load) for p in cities) <= boxes

    lo, hi = 0, _UPPER_BOUND
    while lo < hi:
        mid = (lo + hi) >> 1
        if fits(mid):
            hi = mid
        else:
            lo = mid + 1
    return hi


def solve_ballotboxes(text: str) -> str:
    """Answer cases ``n m`` plus ``n`` populations until ``-1 -1`` or end of input."""
    tokens = iter(text.split())
    out = []
    while True:
        header = list(itertools.islice(tokens, 2))
        if len(header) < 2:
            break
        n, boxes = int(header[0]), int(header[1])
        if n == -1 and boxes == -1:
            break
        populations = [int(v) for v in itertools.islice(tokens, n)]
        if len(populations) < n:
            raise ValueError("input ends in the middle of a case")
        out.append(f"{min_max_ballots(populations, boxes)}\n")
    return "".join(out)