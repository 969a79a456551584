"""Compact text notation for boards, e.g. ``"1 2 3/4 5 6/7 8 _"`` or ``"123/456/78_"``."""

from __future__ import annotations

import re

from slidegraph.models.board import Board, InvalidBoardError, Tile
from slidegraph.models.grid import ShapeCache

BLANK_TOKENS = frozenset({"_", ".", "0"})
_ROW_SEP = re.compile(r"[/\n]")
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def parse_board(text: str, shapes: ShapeCache | None = None) -> Board:
    """Parse *text* into an integer board with ``0`` as the blank.

    Rows are separated by ``/`` or newlines. A row containing whitespace is
    split into decimal tokens; a compact row is read one base-36 character
    per tile.
    """
    rows: list[list[int]] = []
    for raw in _ROW_SEP.split(text.strip()):
        if not raw.strip():
            continue
        tokens = raw.split()
        compact = len(tokens) == 1
        if compact:
            tokens = list(tokens[0])
        rows.append([_parse_tile(tok, compact) for tok in tokens])
    return Board.from_rows(rows, blank=0, shapes=shapes)


def _parse_tile(token: str, compact: bool) -> int:
    if token in BLANK_TOKENS:
        return 0
    try:
        return int(token, 36 if compact else 10)
    except ValueError:
        raise InvalidBoardError(f"Unrecognised tile {token!r}.") from None


def tile_label(tile: Tile, blank: Tile = 0) -> str:
    """Return the label drawn for *tile* in a one-character cell."""
    if tile == blank:
        return " "
    if isinstance(tile, int) and 0 <= tile < len(_DIGITS):
        return _DIGITS[tile].upper()
    return str(tile)
