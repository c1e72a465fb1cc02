import io

from oolab.cli import main

_INPUT = "2 3\n4 5\n3 4\n2\n1 1\n2 2\n"


def test_main_runs_all_examples(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(_INPUT))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith(" Lab #3  !\n")
    assert " End testing " in out
    assert "Completion of testing" in out
    assert " v [ 1 ]   (5,6)\t" in out


def test_main_fails_on_missing_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "unexpected end of input" in capsys.readouterr().err


def test_main_fails_on_bad_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("two 3\n"))
    assert main([]) == 1
    assert capsys.readouterr().err.startswith("Error:")