import pytest

from pushswap.conversions import (
    atoi,
    count_words,
    itoa,
    split,
    strdup,
    strjoin,
    strtrim,
    substr,
)


def test_atoi_plain_numbers():
    assert atoi("42") == 42
    assert atoi("-17") == -17
    assert atoi("+5") == 5


def test_atoi_skips_leading_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-17abc") == -17
    assert atoi("123 456") == 123


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("--5") == atoi("")


def test_atoi_beyond_int_range():
    assert atoi("2147483648") == 2147483648
    assert atoi("-2147483649") == -2147483649


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 10**12])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_extreme_value():
    assert itoa(-2147483648) == "-2147483648"


def test_split_drops_empty_runs():
    assert split("  a  bb c ", " ") == ["a", "bb", "c"]
    assert not split("   ", " ")
    assert not split("", " ")


def test_split_other_separator():
    assert split(",1,,2,3", ",") == ["1", "2", "3"]


@pytest.mark.parametrize("text", ["", "   ", "a", " a b  c ", "1 2 3 4 5"])
def test_count_words_matches_split(text):
    assert count_words(text, " ") == len(split(text, " "))


def test_split_words_contain_no_separator():
    words = split("x y  z   w", " ")
    assert all(" " not in w and w for w in words)
    assert " ".join(words) == "x y z w"


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("-+a+b-+", "+-") == "a+b"
    assert strtrim("abc", "") == "abc"
    assert not strtrim("aaa", "a")


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 3, 100) == "lo"
    assert not substr("hello", 10, 2)
    assert not substr("hello", 5, 2)


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)
    with pytest.raises(ValueError):
        substr("hello", 1, -2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"
    assert strjoin(None, "bar") == "bar"
    assert strjoin("foo", None) == "foo"
    assert strjoin(None, None) is None


def test_strdup():
    assert strdup("abc") == "abc"
    assert strdup(None) is None