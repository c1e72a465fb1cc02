# oolab

A set of small object-oriented exercises. Each is a class with a short
interactive program around it:

- `oolab.parallelogram`: `Parallelogram` (base, height, side, colour) with
  `area()`, `perimeter()` and `describe()`; `read_parallelogram(path)` and
  `random_parallelogram(rng)` build one from a file or from random values.
- `oolab.short_vector`: `ShortVector`, a vector of signed 16-bit integers whose
  results wrap like that type. It has `add`, `sub` (over the shorter length),
  `mul` (by a multiplier taken modulo 256), `is_greater` (lexicographic), `==`,
  and indexing that returns 0 for an out-of-range index and ignores
  out-of-range stores. `ShortVector.from_file(path)` reads a count followed by
  the elements, `ShortVector.random(size, rng)` fills with values 0 to 99, and
  `ShortVector.live_count()` reports how many vectors exist.
- `oolab.icosahedron`: `Icosahedron` with `area()`, `volume()`, `inradius()`,
  `circumradius()` and `describe()`. Its `side` and `color` setters raise
  `ValueError` for a side outside 0 to 1e100 or a colour outside 0 to 10000.
  `Counter` keeps one count shared by all its instances.
- `oolab.vec2`: `Vec2` with `add`, `sub`, `mul`, `div` and `less_all`, and a
  `state` from the `State` enum. `Vec2.from_sequence(None)` gives a zero vector
  in state `BAD_INIT`; `div` raises `ZeroDivisionError` for a divisor whose
  magnitude is below 1e-25. `Vec2.live_count()` reports how many vectors exist.
- `oolab.complex_vector`: `ComplexVector`, a vector of complex numbers whose
  size falls back to 2 when not positive, with `from_values`, `add` (over the
  shorter length) and `lines()` for printing.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
oolab-parallelogram [--data FILE]
```

Builds a parallelogram from values typed in, from a file (by default
`pData.txt` in the current directory; base, height, side and colour separated
by whitespace), or from random values. It then prints the parallelogram with
its area and perimeter. It exits with status 1 on an invalid choice, an
unreadable file or bad input.

```
oolab-vector
```

Asks for an operation (add, subtract, multiply, equal, greater, not equal).
Each vector is then typed in, read from a file that holds the count followed
by the elements, or filled with random values. The result is printed, followed
by the number of live vector objects.

```
oolab
```

Runs the walk-throughs for the icosahedron, 2D vector and complex vector in
turn, reading their input from standard input. Each module also offers
`run_example(stdin, stdout)` to run its walk-through on given streams.

## Library use

```python
from oolab.parallelogram import Parallelogram
from oolab.short_vector import ShortVector
from oolab.vec2 import Vec2

p = Parallelogram(4, 3, 5, "Red")
p.area()        # 12
p.perimeter()   # 18

a = ShortVector(3, 2)      # 2 2 2
b = ShortVector(2, 5)      # 5 5
str(a.add(b))              # "7 7": the shorter length wins
a.is_greater(b)            # False
str(ShortVector(1, 32767).add(ShortVector(1, 1)))  # "-32768"

Vec2(1.0, 2.0).add(Vec2(3.0))  # Vec2(4.0, 5.0)
```