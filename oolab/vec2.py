"""A two-dimensional vector with a state code and a count of live instances."""

from __future__ import annotations

import copy
import sys
import weakref
from collections.abc import Iterable, Iterator
from enum import IntEnum
from itertools import islice
from typing import TextIO

_DIV_EPSILON = 1.0e-25


def _fmt(value: float) -> str:
    return f"{value:g}"


class State(IntEnum):
    OK = 0
    BAD_INIT = 1
    BAD_DIV = 2


class Vec2:
    """A vector (x, y); a single argument sets both components."""

    _live: weakref.WeakValueDictionary = weakref.WeakValueDictionary()

    def __init__(self, x: float = 0.0, y: float | None = None) -> None:
        self.x = float(x)
        self.y = float(x if y is None else y)
        self.state = State.OK
        Vec2._live[id(self)] = self

    @classmethod
    def from_sequence(cls, values: Iterable[float] | None) -> Vec2:
        """Take x and y from the first two values; None gives a BAD_INIT zero vector."""
        if values is None:
            vec = cls()
            vec.state = State.BAD_INIT
            return vec
        items = list(islice(values, 2))
        if len(items) < 2:
            raise ValueError("two values are needed for a Vec2")
        return cls(items[0], items[1])

    def __copy__(self) -> Vec2:
        return type(self)(self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return (self.x, self.y, self.state) == (other.x, other.y, other.state)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vec2({self.x!r}, {self.y!r})"

    def __str__(self) -> str:
        return f" x ={_fmt(self.x)} y = {_fmt(self.y)} state  {int(self.state)}"

    def add(self, other: Vec2) -> Vec2:
        return type(self)(self.x + other.x, self.y + other.y)

    def sub(self, other: Vec2) -> Vec2:
        return type(self)(self.x - other.x, self.y - other.y)

    def mul(self, factor: float) -> Vec2:
        return type(self)(self.x * factor, self.y * factor)

    def div(self, divisor: float) -> Vec2:
        """Divide both components; a divisor too close to zero raises ZeroDivisionError."""
        if abs(divisor) < _DIV_EPSILON:
            raise ZeroDivisionError("division of Vec2 by zero")
        return type(self)(self.x / divisor, self.y / divisor)

    def less_all(self, other: Vec2) -> bool:
        """True when both components are smaller than those of other."""
        return self.x < other.x and self.y < other.y

    @classmethod
    def live_count(cls) -> int:
        """How many vectors currently exist."""
        return len(Vec2._live)


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def run_example(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Exercise constructors and operations, reading one vector from input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _tokens(stdin)

    def out(text: object) -> None:
        print(text, file=stdout)

    out("Testing create class  ")
    out("Testing constructors  ")
    current = Vec2()
    out(current)
    single = Vec2(10.0)
    out(single)
    pair = Vec2(1.0, 2.0)
    out(pair)
    duplicate = copy.copy(pair)
    data = [1.2, 3.3]
    third = Vec2.from_sequence(data)
    if third.state != State.OK:
        out(" ObjP3  x= 0  y= 0  ")
    fourth = Vec2.from_sequence(data)
    if fourth.state != State.OK:
        out(" ObjP4 x= 0  y= 0  ")

    out("Testing input ")
    stdout.write(" Input  x y ")
    x = float(_next(tokens))
    y = float(_next(tokens))
    current = Vec2(x, y)

    out("Testing function ")
    current = current.add(pair)
    out(current)
    out(f" \n Counts create objects Vec2 before  Sub {Vec2.live_count()}")
    current = current.sub(pair)
    out(f" \n  Counts create objects Vec2 after Sub  {Vec2.live_count()}")
    out(current)
    current = current.mul(5)
    out(current)
    current = current.div(1.3)
    if current.state == State.BAD_DIV:
        out("BAD_DIV ")
    out(current)
    try:
        current = current.div(0.0)
    except ZeroDivisionError:
        out(" Error div ")
    out(current)
    out(f"ObjCopy state {int(duplicate.state)}")
    if duplicate.less_all(current):
        out("ObjCopy less ObjDef  ")
    out("Completion of testing  ")