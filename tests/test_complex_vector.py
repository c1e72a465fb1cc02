import copy
import io

import pytest

from oolab.complex_vector import ComplexVector, format_complex, run_example


def test_default_size_and_zero():
    vec = ComplexVector()
    assert len(vec) == 2
    assert list(vec) == [0j, 0j]


@pytest.mark.parametrize("size", [0, -3])
def test_non_positive_size_falls_back(size):
    assert len(ComplexVector(size)) == 2


def test_fill():
    vec = ComplexVector(4, 1 + 2j)
    assert list(vec) == [1 + 2j] * 4


def test_from_values_none_gives_zeros():
    vec = ComplexVector.from_values(3, None)
    assert list(vec) == [0j] * 3


def test_from_values_takes_prefix():
    vec = ComplexVector.from_values(2, [1j, 2j, 3j])
    assert list(vec) == [1j, 2j]


def test_from_values_too_short():
    with pytest.raises(ValueError):
        ComplexVector.from_values(3, [1j])


def test_add_uses_shorter_length():
    a = ComplexVector.from_values(3, [1, 2, 3])
    b = ComplexVector(2, 1j)
    total = a.add(b)
    assert list(total) == [1 + 1j, 2 + 1j]
    assert total == b.add(a)


def test_copy_is_independent_equal():
    a = ComplexVector.from_values(2, [1 + 1j, 2])
    dup = copy.copy(a)
    assert dup == a
    assert dup is not a


def test_lines_format():
    assert ComplexVector(1, 1 + 2j).lines() == [" v [ 0 ]   (1,2)\t"]


def test_format_complex():
    assert format_complex(complex(21.3, 22.3)) == "(21.3,22.3)"


def test_run_example_output():
    out = io.StringIO()
    run_example(io.StringIO("3 4\n0\n2\n1 1\n2 2\n"), out)
    text = out.getvalue()
    assert "(22.3,24.3)" in text
    assert text.count("Input size Vec") == 2
    assert " v [ 1 ]   (5,6)\t" in text


def test_run_example_missing_input():
    with pytest.raises(EOFError):
        run_example(io.StringIO("3 4\n"), io.StringIO())