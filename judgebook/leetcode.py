"""Combinatorial search and counting problems over small boards and arrays."""

from __future__ import annotations

import itertools
from typing import Iterable, Iterator, Sequence

_BOARD = 8
_DX = (0, 1, 0, -1, 0, 1, -1, 1, -1, 0)
_DY = (0, 0, 1, 0, -1, 1, -1, -1, 1, 0)
_STAY = frozenset({0, 9})

_MOD = 1_000_000_007
_MAX_VALUE = 50


def _directions(piece: str) -> range:
    if piece == "rook":
        return range(0, 5)
    if piece == "queen":
        return range(0, 9)
    if piece == "bishop":
        return range(5, 10)
    return range(0, 10)


def _moves(piece: str, x: int, y: int) -> Iterator[tuple[int, int]]:
    """Yield ``(direction, distance)`` for every legal destination of a piece."""
    for d in _directions(piece):
        for t in range(1, _BOARD + 1):
            nx, ny = x + _DX[d] * t, y + _DY[d] * t
            if not (1 <= nx <= _BOARD and 1 <= ny <= _BOARD):
                break
            yield d, t
            if d in _STAY:
                break


def _no_collision(
    positions: Sequence[tuple[int, int]], plan: Sequence[tuple[int, int]]
) -> bool:
    for t in range(1, _BOARD):
        occupied: set[tuple[int, int]] = set()
        for (x, y), (d, steps) in zip(positions, plan):
            s = min(t, steps)
            cell = (x + s * _DX[d], y + s * _DY[d])
            if cell in occupied:
                return False
            occupied.add(cell)
    return True


def count_combinations(
    pieces: Iterable[str], positions: Iterable[Sequence[int]]
) -> int:
    """Count move combinations in which no two pieces ever share a square."""
    names = list(pieces)
    starts = [(int(p[0]), int(p[1])) for p in positions]
    if len(names) != len(starts):
        raise ValueError("every piece needs exactly one position")
    options = [list(_moves(name, x, y)) for name, (x, y) in zip(names, starts)]
    return sum(
        1 for plan in itertools.product(*options) if _no_collision(starts, plan)
    )


def count_alternating_triples(colors: Sequence[int]) -> int:
    """Count tiles in a circle whose colour differs from both neighbours."""
    n = len(colors)
    return sum(
        1
        for i, colour in enumerate(colors)
        if colour != colors[i - 1] and colour != colors[(i + 1) % n]
    )


def count_alternating_groups(colors: Sequence[int], k: int) -> int:
    """Count runs of ``k`` consecutive alternating tiles in a circle."""
    n = len(colors)
    if n == 0:
        return 0
    run, found = 1, 0
    for i in range(2 - k, n):
        if colors[i % n] != colors[(i - 1) % n]:
            run += 1
        else:
            run = 1
        if run >= k:
            found += 1
    return found


def can_alice_win(nums: Iterable[int]) -> bool:
    """True when the single-digit and multi-digit sums differ."""
    single = multi = 0
    for v in nums:
        if v < 10:
            single += v
        else:
            multi += v
    return single != multi


def _validated(nums: Iterable[int]) -> list[int]:
    values = list(nums)
    if not values:
        raise ValueError("at least one number is needed")
    if any(v < 0 or v > _MAX_VALUE for v in values):
        raise ValueError(f"numbers must lie between 0 and {_MAX_VALUE}")
    return values


def _limit(prev_value: int, value: int, v: int) -> int:
    return min(prev_value, v, prev_value - value + v)


def count_monotonic_pairs_memo(nums: Iterable[int]) -> int:
    """Count monotonic pairs with memoised search, modulo 1e9+7."""
    values = _validated(nums)
    memo: dict[tuple[int, int], int] = {}

    def ways(i: int, v: int) -> int:
        if i == 0:
            return 1
        key = (i, v)
        if key not in memo:
            top = _limit(values[i - 1], values[i], v)
            memo[key] = sum(ways(i - 1, k) for k in range(top + 1)) % _MOD
        return memo[key]

    # Filling rows in order keeps the recursion two levels deep.
    for i in range(1, len(values)):
        for v in range(values[i] + 1):
            ways(i, v)
    last = len(values) - 1
    return sum(ways(last, v) for v in range(values[-1] + 1)) % _MOD


def count_monotonic_pairs_table(nums: Iterable[int]) -> int:
    """Count monotonic pairs with a plain dynamic-programming table."""
    values = _validated(nums)
    prev = [1 if v <= values[0] else 0 for v in range(_MAX_VALUE + 1)]
    for prev_value, value in itertools.pairwise(values):
        cur = [0] * (_MAX_VALUE + 1)
        for v in range(value + 1):
            top = _limit(prev_value, value, v)
            cur[v] = sum(prev[: top + 1]) % _MOD if top >= 0 else 0
        prev = cur
    return sum(prev[: values[-1] + 1]) % _MOD


def count_monotonic_pairs(nums: Iterable[int]) -> int:
    """Count monotonic pairs using prefix sums over the previous row."""
    values = _validated(nums)
    prev = [1 if v <= values[0] else 0 for v in range(_MAX_VALUE + 1)]
    for prev_value, value in itertools.pairwise(values):
        prefix = list(itertools.accumulate(prev, lambda a, b: (a + b) % _MOD))
        cur = [0] * (_MAX_VALUE + 1)
        for v in range(value + 1):
            top = _limit(prev_value, value, v)
            if top >= 0:
                cur[v] = prefix[top]
        prev = cur
    return sum(prev[: values[-1] + 1]) % _MOD


def same_square_color(coordinate1: str, coordinate2: str) -> bool:
    """True when two chessboard squares such as ``a1`` share a colour."""

    def colour(coordinate: str) -> int:
        if len(coordinate) < 2:
            raise ValueError(f"bad square: {coordinate!r}")
        column = ord(coordinate[0]) - ord("a")
        row = ord(coordinate[1]) - ord("0")
        return (column ^ row) & 1

    return colour(coordinate1) == colour(coordinate2)


def _queen_columns(n: int) -> Iterator[tuple[int, ...]]:
    """Yield each placement as the queen's column in every row, in order."""
    placed: list[int] = []

    def place(step: int, cols: int, left: int, right: int) -> Iterator[tuple[int, ...]]:
        if step == n:
            yield tuple(placed)
            return
        for i in range(n):
            lo, ro = step - i + n - 1, step + i
            if ((cols >> i) | (left >> lo) | (right >> ro)) & 1:
                continue
            placed.append(i)
            yield from place(step + 1, cols | 1 << i, left | 1 << lo, right | 1 << ro)
            placed.pop()

    yield from place(0, 0, 0, 0)


def solve_n_queens(n: int) -> list[list[str]]:
    """Every placement of ``n`` non-attacking queens, as rows of ``.`` and ``Q``."""
    return [
        ["." * c + "Q" + "." * (n - c - 1) for c in columns]
        for columns in _queen_columns(n)
    ]


def total_n_queens(n: int) -> int:
    """Number of placements of ``n`` non-attacking queens."""
    return sum(1 for _ in _queen_columns(n))