"""Command line entry: run one problem's solver over a whole input."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from judgebook import hdu, kattis, poj

_SOLVERS: dict[str, Callable[[str], str]] = {
    "hdu1029": hdu.solve_1029,
    "hdu2072": hdu.solve_2072,
    "hdu5120": hdu.solve_5120,
    "kattis-ballotboxes": kattis.solve_ballotboxes,
    "poj1064": poj.solve_1064,
    "poj2456": poj.solve_2456,
    "poj3104": poj.solve_3104,
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="judgebook",
        description="Solve a judge problem, reading its input and printing its output.",
    )
    parser.add_argument("problem", choices=sorted(_SOLVERS), help="problem to solve")
    parser.add_argument(
        "input", nargs="?", help="input file; standard input when omitted"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen solver and return the exit status."""
    args = _parser().parse_args(argv)
    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
    except OSError as exc:
        print(f"judgebook: {exc}", file=sys.stderr)
        return 1
    try:
        output = _SOLVERS[args.problem](text)
    except ValueError as exc:
        print(f"judgebook: {exc}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())