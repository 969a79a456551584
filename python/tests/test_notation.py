"""Text notation tests."""

from __future__ import annotations

import pytest

from slidegraph.models.board import Board, InvalidBoardError
from slidegraph.models.notation import parse_board, tile_label

SOLVED = Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])


@pytest.mark.parametrize(
    "text",
    [
        "1 2 3/4 5 6/7 8 _",
        "123/456/78_",
        "123/456/780",
        "1 2 3\n4 5 6\n7 8 .",
        "  1 2 3 / 4 5 6 / 7 8 _  ",
    ],
)
def test_parse_solved(text: str) -> None:
    assert parse_board(text) == SOLVED


def test_parse_decimal_tokens_above_nine() -> None:
    board = parse_board("1 2 3 4/5 6 7 8/9 10 11 _")
    assert board.columns == 4
    assert board.tiles[-2] == 11
    assert board.is_valid()


def test_parse_compact_base36() -> None:
    board = parse_board("1234/5678/9ab_")
    assert board.tiles[-2] == 11


def test_parse_ragged_rejected() -> None:
    with pytest.raises(InvalidBoardError):
        parse_board("1 2 3/4 5/6 7 _")


def test_parse_bad_token_rejected() -> None:
    with pytest.raises(InvalidBoardError):
        parse_board("1 2/x _")


def test_tile_label() -> None:
    assert tile_label(0) == " "
    assert tile_label(7) == "7"
    assert tile_label(11) == "B"
    assert tile_label(40) == "40"
    assert tile_label("x", blank=" ") == "x"
