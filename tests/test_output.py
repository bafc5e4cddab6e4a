import io

import pytest

from pushswap.output import put_char, put_endl, put_nbr, put_str


def test_put_char_writes_character():
    out = io.StringIO()
    put_char("x", out)
    assert out.getvalue() == "x"


def test_put_char_accepts_code():
    out = io.StringIO()
    put_char(ord("A"), out)
    assert out.getvalue() == "A"


def test_put_char_rejects_longer_text():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("hello", out)
    assert out.getvalue() == "hello"


def test_put_str_none_writes_nothing():
    out = io.StringIO()
    put_str(None, out)
    assert out.getvalue() == ""


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("pa", out)
    assert out.getvalue() == "pa\n"


def test_put_endl_none_writes_nothing():
    out = io.StringIO()
    put_endl(None, out)
    assert out.getvalue() == ""


def test_put_nbr_smallest_int():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


@pytest.mark.parametrize("n", [0, 7, 42, -1, -99, 2147483647])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_negative_has_single_sign():
    out = io.StringIO()
    put_nbr(-5, out)
    assert out.getvalue().count("-") == 1
    assert out.getvalue().startswith("-")


def test_put_nbr_rejects_non_integer():
    with pytest.raises(TypeError):
        put_nbr("12", io.StringIO())


def test_writes_accumulate_in_order():
    out = io.StringIO()
    put_str("ra", out)
    put_char("\n", out)
    put_endl("rb", out)
    assert out.getvalue().splitlines() == ["ra", "rb"]


def test_default_stream_is_stdout(capsys):
    put_endl("sa")
    assert capsys.readouterr().out == "sa\n"