import pytest

from pushswap.parsing import (
    DuplicateArgumentError,
    InvalidArgumentError,
    assign_indices,
    is_numeric,
    join_arguments,
    parse_arguments,
)


@pytest.mark.parametrize("token", ["0", "42", "-42", "+42", "-", "+", "007"])
def test_numeric_tokens(token):
    assert is_numeric(token) is True


@pytest.mark.parametrize("token", ["4a", "a4", "--4", "4-", "1.5", "+-1", "\t3"])
def test_non_numeric_tokens(token):
    assert is_numeric(token) is False


def test_join_arguments():
    assert join_arguments(["3", "1 2", "5"]) == "3 1 2 5"


def test_join_no_arguments():
    assert join_arguments([]) == ""


def test_parse_keeps_order_across_arguments():
    assert parse_arguments(["3 1", "2", "  -7  "]) == [3, 1, 2, -7]


def test_parse_signs():
    assert parse_arguments(["+5", "-0"]) == [5, 0]


def test_parse_blank_gives_nothing():
    assert parse_arguments(["   ", ""]) == []


def test_parse_invalid():
    with pytest.raises(InvalidArgumentError):
        parse_arguments(["1", "two", "3"])


def test_parse_duplicate():
    with pytest.raises(DuplicateArgumentError):
        parse_arguments(["1 2", "1"])


def test_parse_duplicate_through_sign():
    with pytest.raises(DuplicateArgumentError):
        parse_arguments(["+4", "4"])


def test_parse_limits_accepted():
    assert parse_arguments(["2147483647", "-2147483648"]) == [2147483647, -2147483648]


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "99999999999999999999"])
def test_parse_out_of_range(token):
    with pytest.raises(DuplicateArgumentError):
        parse_arguments([token])


def test_assign_indices_ranks():
    nodes = assign_indices([30, -5, 12, 0])
    assert [node.data for node in nodes] == [30, -5, 12, 0]
    assert [node.index for node in nodes] == [3, 0, 2, 1]


def test_assign_indices_is_permutation_and_monotonic():
    values = [17, -3, 250, 8, 0, 99, -40]
    nodes = assign_indices(values)
    assert sorted(node.index for node in nodes) == list(range(len(values)))
    for first in nodes:
        for second in nodes:
            assert (first.data < second.data) == (first.index < second.index)


def test_assign_indices_empty():
    assert assign_indices([]) == []