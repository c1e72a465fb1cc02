"""A vector of signed 16-bit integers with arithmetic and comparison."""

from __future__ import annotations

import argparse
import random as _random
import sys
import weakref
from collections.abc import Iterable, Iterator
from pathlib import Path

SHORT_MIN = -32768
SHORT_MAX = 32767
_SHORT_SPAN = 1 << 16


def _to_short(value: int) -> int:
    """Wrap an integer into the signed 16-bit range."""
    return (int(value) - SHORT_MIN) % _SHORT_SPAN + SHORT_MIN


def _parse_short(word: str) -> int:
    value = int(word)
    if not SHORT_MIN <= value <= SHORT_MAX:
        raise ValueError(f"value out of range for a short: {word}")
    return value


class ShortVector:
    """A sized vector of 16-bit signed integers; results wrap like the C type."""

    _live: weakref.WeakValueDictionary = weakref.WeakValueDictionary()

    def __init__(self, size: int = 1, fill: int = 0) -> None:
        if size < 0:
            raise ValueError("vector size must not be negative")
        self._values = [_to_short(fill)] * size
        ShortVector._live[id(self)] = self

    @classmethod
    def _from_values(cls, values: Iterable[int]) -> ShortVector:
        vec = cls(0)
        vec._values = [_to_short(value) for value in values]
        return vec

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def __getitem__(self, index: int) -> int:
        """The element at index, or 0 when index is out of range."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return 0

    def __setitem__(self, index: int, value: int) -> None:
        """Store a wrapped value; an out-of-range index is ignored."""
        if 0 <= index < len(self._values):
            self._values[index] = _to_short(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShortVector):
            return NotImplemented
        return self._values == other._values

    def __gt__(self, other: ShortVector) -> bool:
        if not isinstance(other, ShortVector):
            return NotImplemented
        return self.is_greater(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ShortVector({self._values!r})"

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._values)

    def add(self, other: ShortVector) -> ShortVector:
        """Element-wise sum over the shorter length."""
        return self._from_values(a + b for a, b in zip(self._values, other._values))

    def sub(self, other: ShortVector) -> ShortVector:
        """Element-wise difference over the shorter length."""
        return self._from_values(a - b for a, b in zip(self._values, other._values))

    def mul(self, multiplier: int) -> ShortVector:
        """Every element times an unsigned 8-bit multiplier."""
        factor = int(multiplier) % 256
        return self._from_values(value * factor for value in self._values)

    def is_greater(self, other: ShortVector) -> bool:
        """Lexicographic comparison; a longer vector wins on an equal prefix."""
        return self._values > other._values

    @classmethod
    def from_file(cls, path: str | Path) -> ShortVector:
        """Read a count followed by that many elements from a file."""
        words = Path(path).read_text().split()
        if not words:
            raise ValueError(f"{path}: missing element count")
        count = int(words[0])
        if count < 0:
            raise ValueError(f"{path}: negative element count")
        if len(words) - 1 < count:
            raise ValueError(f"{path}: expected {count} elements")
        return cls._from_values(_parse_short(word) for word in words[1 : count + 1])

    @classmethod
    def random(cls, size: int, rng: _random.Random | None = None) -> ShortVector:
        """A vector of the given size filled with values from 0 to 99."""
        if size < 0:
            raise ValueError("vector size must not be negative")
        if rng is None:
            rng = _random.Random()
        return cls._from_values(rng.randrange(100) for _ in range(size))

    @classmethod
    def live_count(cls) -> int:
        """How many vectors currently exist."""
        return len(ShortVector._live)


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


def _read_size(tokens: Iterator[str]) -> int:
    size = int(_next(tokens))
    if size < 0:
        raise ValueError("vector size must not be negative")
    return size


def _keyboard_vector(tokens: Iterator[str]) -> ShortVector:
    print("Enter vector size: ", end="")
    size = _read_size(tokens)
    print(f"Enter {size} elements: ", end="")
    return ShortVector._from_values(_parse_short(_next(tokens)) for _ in range(size))


def _input_vector(name: str, tokens: Iterator[str]) -> ShortVector:
    print(f"\nInput options for vector {name}:")
    print("1. Enter from keyboard")
    print("2. Read from file")
    print("3. Generate random values")
    print("Choice: ", end="")
    choice = _read_choice(tokens)
    if choice == 2:
        print("Enter filename: ", end="")
        filename = _next(tokens)
        try:
            return ShortVector.from_file(filename)
        except OSError:
            print("Error opening file!")
            return ShortVector()
    if choice == 3:
        print("Enter vector size: ", end="")
        return ShortVector.random(_read_size(tokens))
    if choice != 1:
        print("Invalid choice, using keyboard input")
    return _keyboard_vector(tokens)


def _print_vector(vec: ShortVector) -> None:
    print("".join(f"{value} " for value in vec))


def main(argv: list[str] | None = None) -> int:
    """Run one vector operation chosen from a menu on standard input."""
    parser = argparse.ArgumentParser(
        prog="short-vector", description="Arithmetic and comparison of short vectors."
    )
    parser.parse_args(argv)
    tokens = _tokens(sys.stdin)

    print("Choose operation:")
    print("1. Add")
    print("2. Subtract")
    print("3. Multiply")
    print("4. Compare (Equal)")
    print("5. Compare (Greater)")
    print("6. Compare (Not Equal)")
    print("Choice: ", end="")
    choice = _read_choice(tokens)

    try:
        v1, v2 = ShortVector(), ShortVector()
        if choice in (1, 2, 4, 5, 6):
            v1 = _input_vector("v1", tokens)
            v2 = _input_vector("v2", tokens)
        elif choice == 3:
            v1 = _input_vector("v1", tokens)

        print("\nResult:")
        if choice == 1:
            print("Sum: ", end="")
            _print_vector(v1.add(v2))
        elif choice == 2:
            print("Difference: ", end="")
            _print_vector(v1.sub(v2))
        elif choice == 3:
            print("Enter multiplier: ", end="")
            factor = int(_next(tokens))
            print("Product: ", end="")
            _print_vector(v1.mul(factor))
        elif choice == 4:
            print("Vectors are Equal" if v1 == v2 else "Vectors are Not Equal")
        elif choice == 5:
            print(
                "First vector is Greater"
                if v1.is_greater(v2)
                else "Second vector is Greater or Equal"
            )
        elif choice == 6:
            print("Vectors are Not Equal" if v1 != v2 else "Vectors are Equal")
        else:
            print("Invalid choice!")
    except (EOFError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"\nNumber of Vector objects: {ShortVector.live_count()}")
    return 0