import math
import random

import pytest

from judgebook.hdu import (
    Circle,
    count_distinct_words,
    intersection_area,
    quick_select,
    ring_intersection_area,
    solve_1029,
    solve_2072,
    solve_5120,
)


@pytest.mark.parametrize("seed", range(8))
def test_quick_select_matches_sorted(seed):
    rng = random.Random(seed)
    values = [rng.randint(-20, 20) for _ in range(rng.randint(1, 40))]
    ordered = sorted(values)
    for k in range(len(values)):
        assert quick_select(values, k) == ordered[k]


def test_quick_select_does_not_modify_input():
    values = [5, 1, 4, 2, 3]
    quick_select(values, 2)
    assert values == [5, 1, 4, 2, 3]


def test_quick_select_index_past_end_gives_maximum():
    values = [7, 3, 9, 1]
    assert quick_select(values, 10) == max(values)
    assert quick_select([42], 1) == 42


def test_quick_select_empty_raises():
    with pytest.raises(ValueError):
        quick_select([], 0)


def test_solve_1029_sample():
    text = "5\n1 3 2 3 3\n11\n1 1 1 1 1 5 5 5 5 5 5\n7\n1 1 1 1 1 1 1\n"
    assert solve_1029(text) == "3\n5\n1\n"


def test_solve_1029_truncated_raises():
    with pytest.raises(ValueError):
        solve_1029("5\n1 2 3\n")


def test_count_distinct_words_sample():
    assert count_distinct_words("you are my friend") == 4


def test_count_distinct_words_ignores_repeats_and_spacing():
    line = "alpha beta gamma"
    assert count_distinct_words(line) == count_distinct_words(
        "  alpha   beta gamma alpha beta  gamma "
    )


def test_solve_2072_sample():
    assert solve_2072("you are my friend\n#\n") == "4\n"


def test_solve_2072_stops_at_hash():
    assert solve_2072("x y\n#\nz w v\n") == solve_2072("x y\n")


def test_solve_2072_one_line_per_input_line():
    text = "a b\nc c c\nd e f g\n"
    lines = solve_2072(text).splitlines()
    assert [int(v) for v in lines] == [
        count_distinct_words(line) for line in text.splitlines()
    ]


def test_intersection_disjoint_is_zero():
    assert intersection_area(Circle(0, 0, 1), Circle(5, 0, 2)) == 0.0


def test_intersection_contained_is_small_circle():
    small = Circle(0.5, 0, 2)
    assert intersection_area(Circle(0, 0, 5), small) == pytest.approx(math.pi * 4)
    assert intersection_area(small, Circle(0, 0, 5)) == pytest.approx(math.pi * 4)


def test_intersection_symmetric_and_bounded():
    a, b = Circle(0, 0, 3), Circle(2, 1, 2)
    area = intersection_area(a, b)
    assert area == pytest.approx(intersection_area(b, a))
    assert 0 < area < math.pi * 4


def test_intersection_shrinks_with_distance():
    areas = [
        intersection_area(Circle(0, 0, 2), Circle(d, 0, 2))
        for d in (0.5, 1.0, 2.0, 3.0, 3.9)
    ]
    assert areas == sorted(areas, reverse=True)


def test_ring_concentric_is_ring_area():
    area = ring_intersection_area(2, 3, 0, 0, 0, 0)
    assert area == pytest.approx(math.pi * (9 - 4))


def test_ring_far_apart_is_zero():
    assert ring_intersection_area(1, 2, 0, 0, 10, 10) == pytest.approx(0.0)


def test_solve_5120_sample():
    text = "2\n2 3\n0 0\n0 0\n2 3\n0 0\n5 0\n"
    lines = solve_5120(text).splitlines()
    assert lines[0] == f"Case #1: {5 * math.pi:.6f}"
    assert lines[1].startswith("Case #2: ")
    assert float(lines[1].split(": ")[1]) == pytest.approx(2.250778, abs=1e-5)