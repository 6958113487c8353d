import io

import pytest

from calcabobe.cli import greet, main, run


def test_greet_text():
    assert greet("Ann") == "Hello, Ann! You've been greeted from Python!"


def test_run_writes_display_per_line():
    out = io.StringIO()
    calc = run(["12 + 3", "="], out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "3"
    assert lines[1] == str(calc.a)
    assert len(lines) == 2


def test_run_skips_blank_lines():
    out = io.StringIO()
    run(["", "  ", "7"], out)
    assert out.getvalue() == "7\n"


def test_run_clear():
    out = io.StringIO()
    calc = run(["789 * 456", "AC"], out)
    assert out.getvalue().splitlines()[-1] == "0"
    assert calc.a == 0 and calc.b == 0


def test_run_rejects_unknown_key():
    with pytest.raises(ValueError):
        run(["5 % 2"], io.StringIO())


def test_main_greet(capsys):
    assert main(["--greet", "Bob"]) == 0
    assert capsys.readouterr().out.strip() == greet("Bob")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("9 - 4\n=\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == ["4", "5"]


def test_main_division_by_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 / =\n"))
    assert main([]) == 1
    assert "error" in capsys.readouterr().err