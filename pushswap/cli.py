"""Command line: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.parsing import (
    DuplicateArgumentError,
    InvalidArgumentError,
    assign_indices,
    parse_arguments,
)
from pushswap.printf import printf
from pushswap.sorting import check_moves
from pushswap.stacks import Stacks

INVALID_MESSAGE = "\033[;31mthe arguments are not valid\033[;31m \n"
DUPLICATE_MESSAGE = "\033[;31mthere are duplicates in the arguments\033[;31m \n"
SORTED_MESSAGE = "\033[;31mthe list sorted\033[;31m\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers in ``argv`` and write the moves that sort them."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    out = sys.stdout
    try:
        values = parse_arguments(args)
    except InvalidArgumentError:
        printf(INVALID_MESSAGE, stream=out)
        return 0
    except DuplicateArgumentError:
        printf(DUPLICATE_MESSAGE, stream=out)
        return 0
    if not values:
        return 0
    stacks = Stacks(assign_indices(values), out=out)
    if len(values) == 2 and stacks.a[0].index > stacks.a[1].index:
        stacks.sa()
    elif check_moves(stacks):
        printf(SORTED_MESSAGE, stream=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())