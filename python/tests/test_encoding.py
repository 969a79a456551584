"""Compact integer encoding tests."""

from __future__ import annotations

import random

import pytest

from slidegraph.engine.boardgen import BoardGenerator
from slidegraph.models.board import Board, InvalidBoardError
from slidegraph.models.encoding import BoardCodec

ORDER_3x3 = [1, 2, 3, 4, 5, 6, 7, 8, 0]


def test_identity_encodes_to_zero() -> None:
    codec = BoardCodec(ORDER_3x3, 3, 3)
    assert codec.encode(BoardGenerator.solved(3, 3)) == 0


def test_reversed_encodes_to_last_code() -> None:
    codec = BoardCodec(ORDER_3x3, 3, 3)
    reversed_board = Board.from_flat(3, 3, list(reversed(ORDER_3x3)))
    assert codec.encode(reversed_board) == codec.capacity - 1


def test_known_code() -> None:
    codec = BoardCodec([0, 1, 2, 3], 2, 2)
    # [1, 0, 2, 3]: one smaller tile after the first position -> 1 * 3!
    assert codec.encode(Board.from_flat(2, 2, [1, 0, 2, 3])) == 6
    assert codec.decode(6) == Board.from_flat(2, 2, [1, 0, 2, 3])


def test_round_trip_random_boards() -> None:
    codec = BoardCodec(ORDER_3x3, 3, 3)
    rng = random.Random(7)
    for _ in range(50):
        board = BoardGenerator.scramble(BoardGenerator.solved(3, 3), 40, rng)
        assert codec.decode(codec.encode(board)) == board


def test_all_2x2_codes_distinct() -> None:
    codec = BoardCodec([1, 2, 3, 0], 2, 2)
    boards = {codec.decode(code) for code in range(codec.capacity)}
    assert len(boards) == 24
    assert all(b.is_valid() for b in boards)
    assert sorted(codec.encode(b) for b in boards) == list(range(24))


def test_string_tiles() -> None:
    codec = BoardCodec(["a", "b", "c", " "], 2, 2, blank=" ")
    board = Board.from_rows([["c", " "], ["a", "b"]], blank=" ")
    assert codec.decode(codec.encode(board)) == board


def test_decode_out_of_range() -> None:
    codec = BoardCodec(ORDER_3x3, 3, 3)
    with pytest.raises(ValueError):
        codec.decode(codec.capacity)
    with pytest.raises(ValueError):
        codec.decode(-1)


def test_encode_rejects_invalid_board() -> None:
    codec = BoardCodec(ORDER_3x3, 3, 3)
    with pytest.raises(InvalidBoardError):
        codec.encode(Board.from_flat(3, 3, [1, 1, 3, 4, 5, 6, 7, 8, 0]))


def test_encode_rejects_foreign_tile() -> None:
    codec = BoardCodec(ORDER_3x3, 3, 3)
    with pytest.raises(InvalidBoardError):
        codec.encode(Board.from_flat(3, 3, [9, 2, 3, 4, 5, 6, 7, 8, 0]))


def test_encode_rejects_other_shape() -> None:
    codec = BoardCodec([1, 2, 3, 4, 5, 0], 3, 2)
    with pytest.raises(InvalidBoardError):
        codec.encode(Board.from_flat(2, 3, [1, 2, 3, 4, 5, 0]))


def test_codec_rejects_bad_ordering() -> None:
    with pytest.raises(ValueError):
        BoardCodec([1, 1, 2, 0], 2, 2)
    with pytest.raises(ValueError):
        BoardCodec([1, 2, 3, 4], 2, 2)
    with pytest.raises(ValueError):
        BoardCodec([1, 2, 0], 2, 2)
