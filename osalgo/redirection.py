"""Read two integers from one file and write their sum to another."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

__all__ = ["sum_from_file", "main"]


def sum_from_file(
    input_path: str | PathLike[str], output_path: str | PathLike[str]
) -> int:
    """Add the first two integers of ``input_path`` and write ``Sum = N``."""
    tokens = Path(input_path).read_text(encoding="utf-8").split()
    if len(tokens) < 2:
        raise ValueError(f"{input_path} must hold two integers")
    total = int(tokens[0]) + int(tokens[1])
    Path(output_path).write_text(f"Sum = {total}\n", encoding="utf-8")
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Sum the integers of an input file into an output file."""
    parser = argparse.ArgumentParser(prog="osalgo-redirect")
    parser.add_argument("input", nargs="?", default="input.txt")
    parser.add_argument("output", nargs="?", default="output.txt")
    options = parser.parse_args(argv)
    try:
        sum_from_file(options.input, options.output)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())