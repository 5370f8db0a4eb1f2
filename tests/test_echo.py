import io

import pytest

from primer.echo import echo, main


@pytest.mark.parametrize(
    "newline, sep, args, want",
    [
        (True, "", [], "\n"),
        (False, "", [], ""),
        (True, "\t", ["one", "two", "three"], "one\ttwo\tthree\n"),
        (True, ",", ["a", "b", "c"], "a,b,c\n"),
        (False, ":", ["1", "2", "3"], "1:2:3"),
    ],
)
def test_echo(newline, sep, args, want):
    out = io.StringIO()
    echo(newline, sep, args, out)
    assert out.getvalue() == want


def test_main_default_separator(capsys):
    assert main(["hello", "world"]) == 0
    assert capsys.readouterr().out == "hello world\n"


def test_main_flags(capsys):
    assert main(["-n", "-s", ",", "a", "b"]) == 0
    assert capsys.readouterr().out == "a,b"


def test_main_bad_flag():
    with pytest.raises(SystemExit) as info:
        main(["-s"])
    assert info.value.code == 2