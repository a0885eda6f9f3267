from __future__ import annotations
import pytest
from star_pattern.services.pattern import TOKEN, count_tokens, iter_rows


def test_token_is_asterisk_space():
    assert TOKEN == "* "


def test_iter_rows_five():
    assert list(iter_rows(5)) == [
        "* ",
        "* * ",
        "* * * ",
        "* * * * ",
        "* * * * * ",
    ]


def test_iter_rows_one():
    assert list(iter_rows(1)) == ["* "]


@pytest.mark.parametrize("rows", [0, -1, -100])
def test_iter_rows_non_positive_is_empty(rows):
    assert list(iter_rows(rows)) == []


@pytest.mark.parametrize("rows", [2, 7, 30])
def test_row_i_has_i_tokens(rows):
    lines = list(iter_rows(rows))
    assert len(lines) == rows
    for i, line in enumerate(lines, start=1):
        assert line.count("*") == i
        assert line == TOKEN * i
        assert not line.startswith(" ")


@pytest.mark.parametrize("rows,expected", [(0, 0), (-3, 0), (1, 1), (5, 15), (10, 55)])
def test_count_tokens(rows, expected):
    assert count_tokens(rows) == expected
    assert count_tokens(rows) == sum(line.count("*") for line in iter_rows(rows))
