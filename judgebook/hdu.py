"""Majority selection, distinct word counting and ring overlap problems."""

from __future__ import annotations

import io
import itertools
import math
from dataclasses import dataclass
from typing import Iterable, Iterator


def quick_select(values: Iterable[int], k: int) -> int:
    """Return the element at 0-based index ``k`` of the sorted values.

    An index past the end yields the largest value and a negative one the
    smallest, as the partitioning narrows towards that side.
    """
    items = list(values)
    if not items:
        raise ValueError("quick_select() needs at least one value")
    lo, hi = 0, len(items) - 1
    while lo < hi:
        pivot = items[(lo + hi) >> 1]
        i, j = lo - 1, hi + 1
        while i < j:
            i += 1
            while items[i] < pivot:
                i += 1
            j -= 1
            while items[j] > pivot:
                j -= 1
            if i < j:
                items[i], items[j] = items[j], items[i]
        if k <= j:
            hi = j
        else:
            lo = j + 1
    return items[lo]


def _take(tokens: Iterator[str], count: int) -> list[str]:
    taken = list(itertools.islice(tokens, count))
    if len(taken) < count:
        raise ValueError("input ends in the middle of a case")
    return taken


def solve_1029(text: str) -> str:
    """Answer every case of ``n`` followed by ``n`` integers, one line each."""
    tokens = iter(text.split())
    answers = []
    for token in tokens:
        n = int(token)
        values = [int(v) for v in _take(tokens, n)]
        answers.append(quick_select(values, n // 2 + 1))
    return "".join(f"{answer}\n" for answer in answers)


def count_distinct_words(line: str) -> int:
    """Count the different whitespace-separated words on a line."""
    return len(set(line.split()))


def solve_2072(text: str) -> str:
    """Count distinct words per line until a line that is exactly ``#``."""
    out = []
    for raw in io.StringIO(text):
        line = raw[:-1] if raw.endswith("\n") else raw
        if line == "#":
            break
        out.append(f"{count_distinct_words(line)}\n")
    return "".join(out)


@dataclass(frozen=True)
class Circle:
    """A circle given by its centre and radius."""

    x: float
    y: float
    r: float


def _clamped_acos(value: float) -> float:
    return math.acos(max(-1.0, min(1.0, value)))


def intersection_area(a: Circle, b: Circle) -> float:
    """Area of the region covered by both circles."""
    big, small = (b, a) if a.r < b.r else (a, b)
    dis = math.hypot(small.x - big.x, small.y - big.y)

    if dis >= big.r + small.r:
        return 0.0
    if dis <= big.r - small.r:
        return math.pi * small.r * small.r

    theta1 = 2 * _clamped_acos(
        (big.r * big.r + dis * dis - small.r * small.r) / (2 * big.r * dis)
    )
    theta2 = 2 * _clamped_acos(
        (small.r * small.r + dis * dis - big.r * big.r) / (2 * small.r * dis)
    )
    sector_big = theta1 * big.r * big.r / 2
    sector_small = theta2 * small.r * small.r / 2
    kite = big.r * dis * math.sin(theta1 / 2)
    return sector_big + sector_small - kite


def ring_intersection_area(
    r: float, big_r: float, x1: float, y1: float, x2: float, y2: float
) -> float:
    """Overlap of two equal rings (inner radius ``r``, outer ``big_r``)."""
    outer1, inner1 = Circle(x1, y1, big_r), Circle(x1, y1, r)
    outer2, inner2 = Circle(x2, y2, big_r), Circle(x2, y2, r)
    return (
        intersection_area(outer1, outer2)
        - intersection_area(outer1, inner2)
        - intersection_area(inner1, outer2)
        + intersection_area(inner1, inner2)
    )


def solve_5120(text: str) -> str:
    """Answer ``T`` ring overlap cases as ``Case #i: area`` lines."""
    tokens = iter(text.split())
    count = int(next(tokens, "0"))
    out = []
    for case in range(1, count + 1):
        r, big_r, x1, y1, x2, y2 = (float(v) for v in _take(tokens, 6))
        area = ring_intersection_area(r, big_r, x1, y1, x2, y2)
        out.append(f"Case #{case}: {area:.6f}\n")
    return "".join(out)