# judgebook

Worked solutions to a set of online-judge problems. They come as plain Python
functions, with a small command-line front end that reads a problem's input
and prints the output the judge expects.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `judgebook.hdu`
  - `quick_select(values, k)` returns the value at 0-based position `k` of the sorted values.
  - `solve_1029(text)` answers cases of the form `n` followed by `n` integers.
  - `count_distinct_words(line)` and `solve_2072(text)` count distinct words per line. Reading stops at a line that is exactly `#`.
  - `Circle`, `intersection_area(a, b)`, `ring_intersection_area(r, big_r, x1, y1, x2, y2)` and `solve_5120(text)` compute the overlap of two equal rings. `solve_5120` prints `Case #i: area` lines with six decimals.
- `judgebook.poj` solves three binary-search-on-the-answer problems:
  - cutting cables: `max_cable_length(lengths, k)` and `solve_1064(text)`, whose result is truncated to hundredths;
  - spacing cows in stalls: `max_min_distance(positions, cows)` and `solve_2456(text)`;
  - drying clothes with a radiator: `min_drying_time(amounts, k)` and `solve_3104(text)`.
- `judgebook.kattis`
  - `min_max_ballots(populations, boxes)` and `solve_ballotboxes(text)` distribute ballot boxes among cities.
  - `solve_ballotboxes` reads cases until `-1 -1` or the end of the input.
- `judgebook.leetcode`
  - `count_combinations(pieces, positions)`: chess-move combinations.
  - `count_alternating_triples(colors)` and `count_alternating_groups(colors, k)`: alternating colour groups in a circle.
  - `can_alice_win(nums)`: the digit game.
  - `count_monotonic_pairs_memo(nums)`, `count_monotonic_pairs_table(nums)` and `count_monotonic_pairs(nums)`: three ways of counting monotonic array pairs modulo 1e9+7. Each accepts values from 0 to 50.
  - `same_square_color(coordinate1, coordinate2)`: chessboard square colours.
  - `solve_n_queens(n)` and `total_n_queens(n)`: N-Queens.

Malformed or truncated input raises `ValueError`.

## Library use

```python
from judgebook.leetcode import total_n_queens, same_square_color, can_alice_win
from judgebook.hdu import count_distinct_words

total_n_queens(8)                    # 92
same_square_color("a1", "c3")        # True
can_alice_win([1, 2, 3, 4, 10])      # False: single digits and the rest both sum to 10
count_distinct_words("you are my friend")  # 4
```

The `solve_*` functions take the whole judge input as a string. They return
the text the judge expects, so a file's contents can be passed to them directly.

## Command line

Installing the package provides a `judgebook` command:

```
judgebook PROBLEM [INPUT]
```

`PROBLEM` is one of the following:

- `hdu1029`
- `hdu2072`
- `hdu5120`
- `kattis-ballotboxes`
- `poj1064`
- `poj2456`
- `poj3104`

The command reads the named input file, or standard input when no file is
given, and writes the answer to standard output.

It exits with status 1 and a message on standard error in two cases:

- the file cannot be read;
- the input is malformed.

```
judgebook --help
```

## Limits

The command covers only the problems listed above. The functions in
`judgebook.leetcode` have no command-line form and are used from Python only.