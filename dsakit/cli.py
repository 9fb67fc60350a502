"""Command line front end for the sorting and searching routines."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from dsakit.counting_sort import counting_sort
from dsakit.quicksort import quicksort
from dsakit.search import binary_search, ternary_search


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit",
        description="Sort or search integers given as arguments or on standard input.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    count = commands.add_parser("count-sort", help="counting sort of values in 0..RANGE")
    count.add_argument("--range", dest="max_value", type=int, required=True)
    count.add_argument("values", nargs="*", type=int)

    quick = commands.add_parser("quicksort", help="quicksort the values")
    quick.add_argument("values", nargs="*", type=int)

    for name, help_text in (
        ("ternary-search", "ternary search in sorted values"),
        ("binary-search", "binary search in sorted values"),
    ):
        search = commands.add_parser(name, help=help_text)
        search.add_argument("element", type=int)
        search.add_argument("values", nargs="*", type=int)
    return parser


def _read_values(values: list[int]) -> list[int]:
    if values:
        return values
    return [int(token) for token in sys.stdin.read().split()]


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        values = _read_values(args.values)
        if args.command == "count-sort":
            print(" ".join(map(str, counting_sort(values, args.max_value))))
        elif args.command == "quicksort":
            print(" ".join(map(str, quicksort(values))))
        else:
            search = ternary_search if args.command == "ternary-search" else binary_search
            index = search(values, args.element)
            if index is None:
                print("element not found")
            else:
                print(f"position of element is {index + 1}")
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())