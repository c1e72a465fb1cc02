"""A regular icosahedron with side and colour, and a simple instance counter."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

MAX_SIDE = 1.0e100
MAX_COLOR = 10000


def _fmt(value: float) -> str:
    return f"{value:g}"


class Icosahedron:
    """An icosahedron of a given side length and a non-negative colour code."""

    def __init__(self, side: float = 1.0, color: int = 0) -> None:
        self._side = float(side)
        self._color = int(color) if color >= 0 else 0

    @property
    def side(self) -> float:
        return self._side

    @side.setter
    def side(self, value: float) -> None:
        if value < 0 or value > MAX_SIDE:
            raise ValueError(f"side out of range: {value!r}")
        self._side = float(value)

    @property
    def color(self) -> int:
        return self._color

    @color.setter
    def color(self, value: int) -> None:
        if value < 0 or value > MAX_COLOR:
            raise ValueError(f"colour out of range: {value!r}")
        self._color = int(value)

    def area(self) -> float:
        """Surface area."""
        return 5 * self._side * self._side * math.sqrt(3.0)

    def volume(self) -> float:
        """Volume."""
        return 5 * self._side**3 * (3 + math.sqrt(5.0)) / 12.0

    def inradius(self) -> float:
        """Radius of the inscribed sphere."""
        return self._side * (3 + math.sqrt(5.0)) / (4.0 * math.sqrt(3.0))

    def circumradius(self) -> float:
        """Radius of the circumscribed sphere, by the lab's formula."""
        inner = 2 * (5 + math.sqrt(5.0) * self._side)
        if inner < 0:
            return math.nan
        return math.sqrt(inner) / 4.0

    def describe(self) -> str:
        """One line with side, colour and the derived measures."""
        return (
            f" a= {_fmt(self._side)} color = {self._color}"
            f"  S= {_fmt(self.area())} V = {_fmt(self.volume())}"
            f"  r= {_fmt(self.inradius())} R = {_fmt(self.circumradius())}"
        )

    def __repr__(self) -> str:
        return f"Icosahedron(side={self._side!r}, color={self._color!r})"


class Counter:
    """Counts how many instances have been created, shared by all of them."""

    _total = 0

    def __init__(self) -> None:
        Counter.increment()

    @classmethod
    def increment(cls) -> int:
        """Raise the shared count by one and return it."""
        Counter._total += 1
        return Counter._total

    @property
    def count(self) -> int:
        return Counter._total


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def run_example(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Exercise constructors and validated setters, reading side and colour."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _tokens(stdin)

    def show(shape: Icosahedron) -> None:
        print("\n" + shape.describe(), file=stdout)

    def set_side(shape: Icosahedron, value: float) -> None:
        try:
            shape.side = value
        except ValueError:
            stdout.write(" Error set  a \n")
        show(shape)

    def set_color(shape: Icosahedron, value: int) -> None:
        try:
            shape.color = value
        except ValueError:
            stdout.write(" Error set  color \n")
        show(shape)

    shape = Icosahedron()
    show(shape)
    stdout.write(" Input side and color Icosahedron  ")
    side = float(_next(tokens))
    color = int(_next(tokens))
    for other in (Icosahedron(side), Icosahedron(color=color), Icosahedron(side, color)):
        show(other)

    set_side(shape, -5)
    set_side(shape, 5)
    set_side(shape, 2.0e100)
    set_color(shape, -10)
    set_color(shape, 10)
    set_color(shape, 10001)
    stdout.write(" End testing \n")