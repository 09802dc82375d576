"""Small helpers: averages, random picks, argument listing and file access."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")


def average(a: float, b: float) -> float:
    """Return the mean of ``a`` and ``b``."""
    return (a + b) / 2


def random_item(items: Sequence[T], rng: random.Random | None = None) -> T:
    """Return a random element of a non-empty sequence."""
    if not items:
        raise IndexError("cannot pick from an empty sequence")
    return (rng or random.Random()).choice(items)


def describe_arguments(argv: Sequence[str]) -> list[str]:
    """Describe command-line arguments, program name included.

    At least one argument after the program name is required.
    """
    if len(argv) < 2:
        program = argv[0] if argv else "program"
        raise ValueError(f"Usage: {program} <filename> [<more arguments>]")
    lines = [f"You have entered {len(argv)} command line arguments:"]
    lines.extend(f"argv[{i}]: {arg}" for i, arg in enumerate(argv))
    return lines


def read_lines(path: str | Path) -> Iterator[str]:
    """Yield the lines of a text file without their line endings."""
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def list_directory(path: str | Path = ".") -> list[Path]:
    """Return the entries of a directory, sorted by name."""
    return sorted(Path(path).iterdir())


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the small demonstrations."""
    parser = argparse.ArgumentParser(prog="dsbasics", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    args_cmd = sub.add_parser("args", help="list the given arguments")
    args_cmd.add_argument("values", nargs="*")

    read_cmd = sub.add_parser("read", help="print the lines of a file")
    read_cmd.add_argument("file", nargs="?", default="./test.txt")

    ls_cmd = sub.add_parser("ls", help="list a directory")
    ls_cmd.add_argument("path", nargs="?", default=".")

    avg_cmd = sub.add_parser("average", help="average two numbers")
    avg_cmd.add_argument("a", type=float)
    avg_cmd.add_argument("b", type=float)

    pick_cmd = sub.add_parser("pick", help="pick a random word")
    pick_cmd.add_argument(
        "words", nargs="*", default=["Hello", "World", "how", "are", "you"]
    )

    args = parser.parse_args(argv)

    if args.command == "args":
        try:
            lines = describe_arguments([parser.prog, *args.values])
        except ValueError as exc:
            print(exc)
            return 1
        print("\n".join(lines))
    elif args.command == "read":
        try:
            for line in read_lines(args.file):
                print(f"I read: {line}")
        except OSError:
            print("Unable to open file!", file=sys.stderr)
            return 1
    elif args.command == "ls":
        print("The current directory contains:")
        for entry in list_directory(args.path):
            print(entry)
    elif args.command == "average":
        print(f"a = {args.a:g}; b = {args.b:g}")
        print(f"average(a, b): {average(args.a, args.b):g}")
    else:
        print(f"Pick a random string: {random_item(args.words)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())