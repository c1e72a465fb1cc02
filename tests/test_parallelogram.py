import io
import random
import sys

import pytest

from oolab.parallelogram import (
    COLORS,
    Parallelogram,
    main,
    random_parallelogram,
    read_parallelogram,
)


def _run(monkeypatch, text, argv=None):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main(argv if argv is not None else [])


def _fields(shape):
    return (shape.base, shape.height, shape.side, shape.color)


def test_default_parallelogram():
    shape = Parallelogram()
    assert (shape.base, shape.height, shape.side, shape.color) == (0, 0, 0, "undefined")
    assert shape.area() == 0
    assert shape.perimeter() == 0


def test_empty_color_becomes_undefined():
    assert Parallelogram(1, 2, 3, "").color == "undefined"


def test_area_and_perimeter():
    shape = Parallelogram(3, 4, 5, "Red")
    assert shape.area() == 12
    assert shape.perimeter() == 16


def test_describe_block():
    lines = Parallelogram(3.0, 4.0, 5.5, "Red").describe().splitlines()
    assert lines == [
        "-----Parallelogram-----",
        "|Base length: 3",
        "|Height length: 4",
        "|Side length: 5.5",
        "|Color: Red",
        "-----------------------",
    ]


def test_read_parallelogram_round_trip(tmp_path):
    path = tmp_path / "pData.txt"
    path.write_text("3 4\n5 Blue\n")
    assert read_parallelogram(path) == Parallelogram(3.0, 4.0, 5.0, "Blue")


def test_read_parallelogram_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_parallelogram(tmp_path / "absent.txt")


def test_read_parallelogram_incomplete(tmp_path):
    path = tmp_path / "pData.txt"
    path.write_text("3 4 5")
    with pytest.raises(ValueError):
        read_parallelogram(path)


def test_read_parallelogram_bad_number(tmp_path):
    path = tmp_path / "pData.txt"
    path.write_text("three 4 5 Red")
    with pytest.raises(ValueError):
        read_parallelogram(path)


@pytest.mark.parametrize("seed", range(20))
def test_random_parallelogram_ranges(seed):
    shape = random_parallelogram(random.Random(seed))
    assert 1 <= shape.base <= 100
    assert 0 <= shape.height < 100
    assert 0 <= shape.side < 100
    assert shape.color in COLORS


def test_random_parallelogram_is_reproducible():
    first = random_parallelogram(random.Random(7))
    second = random_parallelogram(random.Random(7))
    assert _fields(first) == _fields(second)
    assert first.color in COLORS
    assert 1 <= first.base <= 100
    distinct = {_fields(random_parallelogram(random.Random(seed))) for seed in range(20)}
    assert len(distinct) > 1


def test_main_keyboard_input(monkeypatch, capsys):
    assert _run(monkeypatch, "1\n3\n5\n4\nRed\n") == 0
    out = capsys.readouterr().out
    assert "|Height length: 4" in out
    assert "|Side length: 5" in out
    assert "|Area: 12" in out


def test_main_reads_file(monkeypatch, capsys, tmp_path):
    path = tmp_path / "data.txt"
    path.write_text("3 4 5 Blue")
    assert _run(monkeypatch, "2\n", ["--data", str(path)]) == 0
    out = capsys.readouterr().out
    assert "|Color: Blue" in out
    assert "|Area: 12" in out


def test_main_missing_file(monkeypatch, capsys, tmp_path):
    assert _run(monkeypatch, "2\n", ["--data", str(tmp_path / "none.txt")]) == 1
    assert "Error: could not open the file!" in capsys.readouterr().err


def test_main_random(monkeypatch, capsys):
    assert _run(monkeypatch, "3\n") == 0
    out = capsys.readouterr().out
    assert "-----Parallelogram-----" in out
    assert "|Perimetr: " in out


def test_main_invalid_choice(monkeypatch, capsys):
    assert _run(monkeypatch, "7\n") == 1
    assert "Invalid choice" in capsys.readouterr().out


def test_main_truncated_input(monkeypatch, capsys):
    assert _run(monkeypatch, "1\n3\n") == 1
    assert "Error" in capsys.readouterr().err