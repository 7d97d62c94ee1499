"""Command line entry point: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence

from pushswap.large import Sorter
from pushswap.parse import InputError, build_elements, parse_arguments
from pushswap.stacks import Operation, Stacks


def solve(values: Sequence[int]) -> list[Operation]:
    """The moves that sort ``values`` onto stack ``a`` in ascending order."""
    stacks = Stacks(build_elements(values))
    Sorter(stacks, len(values)).run()
    return list(stacks.operations)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        operations = solve(parse_arguments(args))
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    sys.stdout.write("".join(f"{operation}\n" for operation in operations))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())