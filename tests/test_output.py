import io

import pytest

from pipex.libft.output import error, put_char, put_endl, put_nbr, put_str


def test_put_char():
    buf = io.StringIO()
    put_char("a", buf)
    assert buf.getvalue() == "a"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_and_none():
    buf = io.StringIO()
    put_str("hello", buf)
    put_str(None, buf)
    assert buf.getvalue() == "hello"


def test_put_endl_appends_newline():
    buf = io.StringIO()
    put_endl("line", buf)
    assert buf.getvalue() == "line\n"


def test_put_endl_none_writes_nothing():
    buf = io.StringIO()
    put_endl(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n", [0, 42, -7, 2147483647, -2147483648])
def test_put_nbr_round_trips(n):
    buf = io.StringIO()
    put_nbr(n, buf)
    assert int(buf.getvalue()) == n


def test_put_nbr_int_min_text():
    buf = io.StringIO()
    put_nbr(-2147483648, buf)
    assert buf.getvalue() == "-2147483648"


def test_put_nbr_rejects_non_int():
    with pytest.raises(TypeError):
        put_nbr("5", io.StringIO())


def test_put_str_defaults_to_stdout(capsys):
    put_str("out")
    assert capsys.readouterr().out == "out"


def test_error_prints_and_exits_zero(capsys):
    with pytest.raises(SystemExit) as info:
        error("Error")
    assert info.value.code == 0
    assert capsys.readouterr().out == "Error\n"