"""Factorial-base (Lehmer code) packing of a board into a single integer."""

from __future__ import annotations

from collections.abc import Sequence
from math import factorial

from slidegraph.models.board import Board, InvalidBoardError, Tile
from slidegraph.models.grid import GridShape


class BoardCodec:
    """Encodes boards of one shape relative to a fixed tile ordering.

    ``tiles`` lists every tile value exactly once; its order defines rank 0,
    rank 1, ... so the identity permutation (the tiles laid out in that order)
    encodes to ``0``.
    """

    def __init__(
        self,
        tiles: Sequence[Tile],
        columns: int,
        rows: int,
        blank: Tile = 0,
    ) -> None:
        self.shape = GridShape(columns, rows)
        if len(tiles) != self.shape.cell_count:
            raise ValueError(
                f"Expected {self.shape.cell_count} tiles for a {columns}×{rows} "
                f"board, got {len(tiles)}."
            )
        if len(set(tiles)) != len(tiles):
            raise ValueError("Tile ordering must not contain duplicates.")
        if blank not in tiles:
            raise ValueError(f"Tile ordering must contain the blank ({blank!r}).")
        self.tiles = tuple(tiles)
        self.blank = blank
        self._rank = {tile: i for i, tile in enumerate(self.tiles)}

    @property
    def capacity(self) -> int:
        """Number of distinct codes, i.e. ``n!`` for ``n`` cells."""
        return factorial(len(self.tiles))

    def encode(self, board: Board) -> int:
        if board.shape != self.shape:
            raise InvalidBoardError(
                f"Codec is for {self.shape.columns}×{self.shape.rows} boards, got "
                f"{board.columns}×{board.rows}."
            )
        if not board.is_valid():
            raise InvalidBoardError("Only valid boards can be encoded.")
        try:
            ranks = [self._rank[tile] for tile in board.tiles]
        except KeyError as exc:
            raise InvalidBoardError(f"Tile {exc.args[0]!r} is not in the codec.") from None

        n = len(ranks)
        code = 0
        for i, rank in enumerate(ranks):
            smaller_after = sum(1 for later in ranks[i + 1 :] if later < rank)
            code += smaller_after * factorial(n - 1 - i)
        return code

    def decode(self, code: int) -> Board:
        if not 0 <= code < self.capacity:
            raise ValueError(f"Code {code} is outside [0, {self.capacity}).")
        remaining = list(self.tiles)
        n = len(remaining)
        tiles: list[Tile] = []
        for i in range(n):
            digit, code = divmod(code, factorial(n - 1 - i))
            tiles.append(remaining.pop(digit))
        return Board(tuple(tiles), self.shape, self.blank)
