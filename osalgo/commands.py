"""Simple copies of the cp and grep commands, with an interactive menu."""

from __future__ import annotations

import argparse
import re
import shutil
import sys
from collections.abc import Sequence
from os import PathLike
from pathlib import Path

__all__ = ["copy_file", "grep_file", "main"]

_MENU = (
    "Command Simulator\n"
    "1. Simulate cp\n"
    "2. Simulate grep\n"
    "3. Exit\n"
    "Choose the command and enter its number: "
)


def copy_file(source: str | PathLike[str], destination: str | PathLike[str]) -> Path:
    """Copy ``source`` to ``destination`` (a file or a directory) like cp."""
    return Path(shutil.copy(source, destination))


def grep_file(pattern: str, path: str | PathLike[str]) -> list[str]:
    """Return the lines of ``path`` that match the regular expression ``pattern``."""
    regex = re.compile(pattern)
    with open(path, encoding="utf-8", errors="replace") as handle:
        return [line.rstrip("\r\n") for line in handle if regex.search(line)]


def _run_copy(source: str, destination: str) -> None:
    copy_file(source, destination)
    print(f"The {source} is copied to {destination}")


def _run_grep(pattern: str, path: str) -> None:
    for line in grep_file(pattern, path):
        print(line)
    print(f"The {pattern} is in file {path}")


def _menu() -> int:
    while True:
        try:
            choice = input(_MENU).strip()
            if choice == "1":
                source = input("Enter the source file: ").strip()
                destination = input("Enter the destination file: ").strip()
                action = lambda: _run_copy(source, destination)  # noqa: E731
            elif choice == "2":
                pattern = input("Enter the pattern: ").strip()
                path = input("Enter the file: ").strip()
                action = lambda: _run_grep(pattern, path)  # noqa: E731
            elif choice == "3":
                print("Exiting ...")
                return 0
            else:
                print("Invalid choice! Try again...")
                continue
        except EOFError:
            return 0
        try:
            action()
        except (OSError, re.error) as error:
            print(f"error: {error}", file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command from ``argv``, or the interactive menu when there is none."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _menu()
    parser = argparse.ArgumentParser(prog="osalgo-commands")
    sub = parser.add_subparsers(dest="command", required=True)
    cp = sub.add_parser("cp", help="copy a file")
    cp.add_argument("source")
    cp.add_argument("destination")
    grep = sub.add_parser("grep", help="print lines matching a pattern")
    grep.add_argument("pattern")
    grep.add_argument("file")
    options = parser.parse_args(args)
    try:
        if options.command == "cp":
            _run_copy(options.source, options.destination)
        else:
            _run_grep(options.pattern, options.file)
    except (OSError, re.error) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())