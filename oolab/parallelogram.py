"""A parallelogram described by its base, height, side and colour."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

UNDEFINED_COLOR = "undefined"
COLORS = ("Red", "Blue", "Green", "Yellow", "Black")
DEFAULT_DATA_FILE = "pData.txt"
_RULE = "-" * 23


def _fmt(value: float) -> str:
    return f"{value:g}"


@dataclass
class Parallelogram:
    """Side lengths, height and colour of a parallelogram."""

    base: float = 0.0
    height: float = 0.0
    side: float = 0.0
    color: str = UNDEFINED_COLOR

    def __post_init__(self) -> None:
        if not self.color:
            self.color = UNDEFINED_COLOR

    def area(self) -> float:
        """Base times height."""
        return self.base * self.height

    def perimeter(self) -> float:
        """Twice the sum of base and side."""
        return 2 * (self.base + self.side)

    def describe(self) -> str:
        """The framed block of dimensions and colour."""
        return "\n".join(
            [
                "-----Parallelogram-----",
                f"|Base length: {_fmt(self.base)}",
                f"|Height length: {_fmt(self.height)}",
                f"|Side length: {_fmt(self.side)}",
                f"|Color: {self.color}",
                _RULE,
            ]
        )


def _number(word: str) -> float:
    try:
        return float(word)
    except ValueError:
        raise ValueError(f"not a number: {word!r}") from None


def read_parallelogram(path: str | Path) -> Parallelogram:
    """Read base, height, side and colour, whitespace separated, from a file."""
    words = Path(path).read_text().split()
    if len(words) < 4:
        raise ValueError(f"{path}: expected base, height, side and colour")
    base, height, side = (_number(word) for word in words[:3])
    return Parallelogram(base, height, side, words[3])


def random_parallelogram(rng: random.Random | None = None) -> Parallelogram:
    """A parallelogram with random whole dimensions and a random colour."""
    if rng is None:
        rng = random.Random()
    base = rng.randint(1, 100)
    height = rng.randrange(100)
    side = rng.randrange(100)
    color = rng.choice(COLORS)
    return Parallelogram(float(base), float(height), float(side), color)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _read_choice(tokens: Iterator[str]) -> int:
    try:
        return int(_next(tokens))
    except (EOFError, ValueError):
        return 0


def _prompt_parallelogram(tokens: Iterator[str]) -> Parallelogram:
    print("Enter the length of base: ")
    base = _number(_next(tokens))
    print("Enter the length of side: ")
    side = _number(_next(tokens))
    print("Enter the height: ")
    height = _number(_next(tokens))
    print("Enter the color: ")
    color = _next(tokens)
    return Parallelogram(base, height, side, color)


def main(argv: list[str] | None = None) -> int:
    """Build a parallelogram from the chosen source and report its measures."""
    parser = argparse.ArgumentParser(
        prog="parallelogram", description="Report area and perimeter of a parallelogram."
    )
    parser.add_argument(
        "--data", default=DEFAULT_DATA_FILE, help="file read by the second input option"
    )
    args = parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    print("Choose how to insert data: ")
    print("1. By yourself")
    print("2. By reading a file")
    print("3. Randomize")
    print("---------------------------")
    choice = _read_choice(tokens)

    try:
        if choice == 1:
            shape = _prompt_parallelogram(tokens)
        elif choice == 2:
            try:
                shape = read_parallelogram(args.data)
            except OSError:
                print("Error: could not open the file!", file=sys.stderr)
                return 1
        elif choice == 3:
            shape = random_parallelogram()
        else:
            print("Invalid choice")
            return 1
    except (EOFError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(shape.describe())
    print(f"|Area: {_fmt(shape.area())}")
    print(_RULE)
    print(f"|Perimetr: {_fmt(shape.perimeter())}")
    print(_RULE)
    return 0