"""Binary-search-on-the-answer problems: cables, stalls and drying."""

from __future__ import annotations

import itertools
import math
from typing import Iterable, Iterator


def _take(tokens: Iterator[str], count: int) -> list[str]:
    taken = list(itertools.islice(tokens, count))
    if len(taken) < count:
        raise ValueError("input ends in the middle of a case")
    return taken


def max_cable_length(lengths: Iterable[float], k: int) -> float:
    """Longest piece length, truncated to hundredths, that yields ``k`` pieces."""
    pieces = [float(v) for v in lengths]
    if not pieces:
        raise ValueError("at least one cable is needed")

    def enough(size: float) -> bool:
        if size <= 0:
            return True
        return sum(math.floor(p / size) for p in pieces) >= k

    lo, hi = 0.0, max(pieces)
    for _ in range(100):
        mid = (lo + hi) / 2
        if enough(mid):
            lo = mid
        else:
            hi = mid
    return math.floor(lo * 100) / 100


def solve_1064(text: str) -> str:
    """Read ``n k`` and ``n`` lengths; print the answer with two decimals."""
    tokens = iter(text.split())
    n, k = (int(v) for v in _take(tokens, 2))
    lengths = [float(v) for v in _take(tokens, n)]
    return f"{max_cable_length(lengths, k):.2f}\n"


def max_min_distance(positions: Iterable[int], cows: int) -> int:
    """Largest minimum gap when placing ``cows`` cows in the given stalls."""
    stalls = sorted(positions)
    if not stalls:
        raise ValueError("at least one stall is needed")

    def fits(gap: int) -> bool:
        remaining = cows
        last = -gap
        for stall in stalls:
            if stall - last >= gap:
                last = stall
                remaining -= 1
        return remaining <= 0

    lo, hi = 0, stalls[-1]
    while lo < hi:
        mid = (lo + hi + 1) >> 1
        if fits(mid):
            lo = mid
        else:
            hi = mid - 1
    return lo


def solve_2456(text: str) -> str:
    """Read ``n c`` and ``n`` stall positions; print the answer."""
    tokens = iter(text.split())
    n, cows = (int(v) for v in _take(tokens, 2))
    positions = [int(v) for v in _take(tokens, n)]
    return f"{max_min_distance(positions, cows)}\n"


def min_drying_time(amounts: Iterable[int], k: int) -> int:
    """Least minutes to dry everything when the radiator removes ``k`` per minute."""
    clothes = sorted(amounts)
    if not clothes:
        raise ValueError("at least one item is needed")
    if k == 1:
        return clothes[-1]
    if k < 1:
        raise ValueError("k must be at least 1")
    extra = k - 1

    def dries(limit: int) -> bool:
        spent = 0
        for water in clothes:
            if water < limit:
                continue
            spent += -(-(water - limit) // extra)
            if spent > limit:
                return False
        return True

    lo, hi = 0, clothes[-1]
    while lo < hi:
        mid = (lo + hi) >> 1
        if dries(mid):
            hi = mid
        else:
            lo = mid + 1
    return hi


def solve_3104(text: str) -> str:
    """Read ``n``, ``n`` water amounts and ``k``; print the answer."""
    tokens = iter(text.split())
    (n,) = (int(v) for v in _take(tokens, 1))
    amounts = [int(v) for v in _take(tokens, n)]
    (k,) = (int(v) for v in _take(tokens, 1))
    return f"{min_drying_time(amounts, k)}\n"