import random

import pytest

from judgebook.kattis import min_max_ballots, solve_ballotboxes

SAMPLE = "2 7\n200000\n500000\n4 6\n120\n2680\n3400\n200\n-1 -1\n"


def test_sample():
    assert solve_ballotboxes(SAMPLE) == "100000\n1700\n"


def test_stops_at_sentinel():
    text = "1 1\n5\n-1 -1\n1 1\n7\n"
    assert solve_ballotboxes(text) == "5\n"


def test_end_of_input_without_sentinel():
    assert solve_ballotboxes(SAMPLE.replace("-1 -1\n", "")) == solve_ballotboxes(
        SAMPLE
    )


def test_truncated_case_raises():
    with pytest.raises(ValueError):
        solve_ballotboxes("3 5\n10\n20\n")


def test_one_box_per_city_gives_largest_city():
    populations = [120, 2680, 3400, 200]
    assert min_max_ballots(populations, len(populations)) == max(populations)


def _boxes_needed(populations, load):
    return sum(-(-p // load) for p in populations)


@pytest.mark.parametrize("seed", range(6))
def test_answer_is_smallest_feasible_load(seed):
    rng = random.Random(seed)
    populations = [rng.randint(1, 5000) for _ in range(rng.randint(1, 8))]
    boxes = len(populations) + rng.randint(0, 30)
    load = min_max_ballots(populations, boxes)
    assert _boxes_needed(populations, load) <= boxes
    assert load == 1 or _boxes_needed(populations, load - 1) > boxes


def test_order_does_not_matter():
    populations = [300, 17, 4500, 999, 62]
    shuffled = populations[:]
    random.Random(9).shuffle(shuffled)
    assert min_max_ballots(populations, 12) == min_max_ballots(shuffled, 12)