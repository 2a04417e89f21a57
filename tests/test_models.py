"""Tests for the bundled hiragana bigram table."""

from __future__ import annotations

import pytest

from jpcontext.models import (
    HIRAGANA_COUNT,
    JP2_CHAR_CONTEXT,
    NUM_OF_CATEGORY,
    get_category,
)


def test_table_is_83_by_83():
    assert len(JP2_CHAR_CONTEXT) == HIRAGANA_COUNT == 83
    for row in JP2_CHAR_CONTEXT:
        assert len(row) == HIRAGANA_COUNT


def test_table_values_are_categories():
    for row in JP2_CHAR_CONTEXT:
        for value in row:
            assert 0 <= value < NUM_OF_CATEGORY


def test_table_is_immutable():
    assert isinstance(JP2_CHAR_CONTEXT, tuple)
    assert all(isinstance(row, tuple) for row in JP2_CHAR_CONTEXT)


def test_table_uses_every_category():
    seen = {value for row in JP2_CHAR_CONTEXT for value in row}
    assert seen == set(range(NUM_OF_CATEGORY))


@pytest.mark.parametrize(
    ("prev_order", "order", "expected"),
    [
        (0, 0, 0),
        (0, 1, 0),
        (0, 3, 2),
        (1, 0, 2),
        (1, 1, 4),
        (1, 3, 4),
        (3, 1, 4),
        (18, 82, 5),
        (82, 42, 4),
        (42, 32, 4),
        (32, 46, 4),
    ],
)
def test_known_cells(prev_order, order, expected):
    assert get_category(prev_order, order) == expected
    assert JP2_CHAR_CONTEXT[prev_order][order] == expected


def test_table_is_not_symmetric():
    assert get_category(0, 1) != get_category(1, 0)


@pytest.mark.parametrize(("prev_order", "order"), [(-1, 0), (0, -1), (83, 0), (0, 83)])
def test_get_category_rejects_out_of_range_orders(prev_order, order):
    with pytest.raises(IndexError):
        get_category(prev_order, order)
