"""A vector of complex numbers with a minimum size of one."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from itertools import islice
from typing import TextIO

DEFAULT_SIZE = 2


def _fmt(value: float) -> str:
    return f"{value:g}"


def format_complex(value: complex) -> str:
    """Render a complex number as (real,imag)."""
    return f"({_fmt(value.real)},{_fmt(value.imag)})"


class ComplexVector:
    """Complex values; a non-positive size falls back to the default of two."""

    def __init__(self, size: int = DEFAULT_SIZE, fill: complex = 0j) -> None:
        if size <= 0:
            size = DEFAULT_SIZE
        self._values = [complex(fill)] * size

    @classmethod
    def from_values(cls, size: int, values: Iterable[complex] | None) -> ComplexVector:
        """A vector of the given size taking its first elements from values; None gives zeros."""
        vec = cls(size)
        if values is not None:
            items = [complex(value) for value in islice(values, len(vec))]
            if len(items) < len(vec):
                raise ValueError(f"expected {len(vec)} values, got {len(items)}")
            vec._values = items
        return vec

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[complex]:
        return iter(self._values)

    def __getitem__(self, index: int) -> complex:
        return self._values[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexVector):
            return NotImplemented
        return self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __copy__(self) -> ComplexVector:
        return type(self).from_values(len(self), self._values)

    def __repr__(self) -> str:
        return f"ComplexVector({self._values!r})"

    def add(self, other: ComplexVector) -> ComplexVector:
        """Element-wise sum over the shorter length."""
        result = type(self)(min(len(self), len(other)))
        result._values = [a + b for a, b in zip(self._values, other._values)]
        return result

    def lines(self) -> list[str]:
        """One printed line per element."""
        return [
            f" v [ {index} ]   {format_complex(value)}\t"
            for index, value in enumerate(self._values)
        ]


def _tokens(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


def _next(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _read_complex(tokens: Iterator[str]) -> complex:
    real = float(_next(tokens))
    imag = float(_next(tokens))
    return complex(real, imag)


def _read_vector(tokens: Iterator[str], stdout: TextIO) -> ComplexVector:
    size = 0
    while size <= 0:
        print("Input size Vec", file=stdout)
        size = int(_next(tokens))
    values = []
    for index in range(size):
        stdout.write(f" v [ {index} ] real img  ")
        values.append(_read_complex(tokens))
    return ComplexVector.from_values(size, values)


def run_example(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Exercise complex numbers and vectors, reading values from input."""
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    tokens = _tokens(stdin)

    def out(text: str) -> None:
        print(text, file=stdout)

    def show(vec: ComplexVector) -> None:
        for line in vec.lines():
            out(line)

    a = complex(1.0, 2.0)
    out(format_complex(a))
    b = complex(21.3, 22.3)
    out(format_complex(b))
    out(format_complex(a + b))
    out(" Test  ")
    first, second = ComplexVector(), ComplexVector(10)
    out("VecObj ")
    show(first)
    out("VecObj1 ")
    show(second)
    out(" Input a ")
    a = _read_complex(tokens)
    out(format_complex(a))
    filled = ComplexVector(10, a)
    show(filled)

    first = _read_vector(tokens, stdout)
    out("")
    show(first)
    second = first.add(filled)
    show(second)