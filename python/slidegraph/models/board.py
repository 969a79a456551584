"""Board model for sliding-tile puzzles of any rectangular shape."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field

from slidegraph.models.grid import GridShape, Location, ShapeCache

Tile = Hashable


class InvalidBoardError(ValueError):
    """Raised for malformed boards: ragged grids, or a missing/duplicate blank."""


@dataclass(frozen=True, eq=False)
class Board:
    """An immutable assignment of tiles to the cells of a grid.

    Tiles are stored as a flat row-major tuple. ``blank`` names the tile value
    that marks the empty cell (``0`` unless told otherwise). Two boards are
    equal when they have the same shape and the same tile at every location.
    """

    tiles: tuple[Tile, ...]
    shape: GridShape
    blank: Tile = 0
    _hash: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if len(self.tiles) != self.shape.cell_count:
            raise InvalidBoardError(
                f"Expected {self.shape.cell_count} tiles for a "
                f"{self.shape.columns}×{self.shape.rows} board, got {len(self.tiles)}."
            )
        object.__setattr__(self, "_hash", hash(self.tiles))

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[Tile]],
        blank: Tile = 0,
        shapes: ShapeCache | None = None,
    ) -> Board:
        """Create a board from a list of rows.

        Example::

            Board.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
        """
        if not rows or not rows[0]:
            raise InvalidBoardError("A board needs at least one row and one column.")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidBoardError(
                    f"All rows must have {width} tiles; row {r} has {len(row)}."
                )
        flat = tuple(tile for row in rows for tile in row)
        return cls(flat, _shape(width, len(rows), shapes), blank)

    @classmethod
    def from_flat(
        cls,
        columns: int,
        rows: int,
        flat: Iterable[Tile],
        blank: Tile = 0,
        shapes: ShapeCache | None = None,
    ) -> Board:
        """Create a board from a flat row-major tile sequence."""
        try:
            shape = _shape(columns, rows, shapes)
        except ValueError as exc:
            raise InvalidBoardError(str(exc)) from exc
        return cls(tuple(flat), shape, blank)

    # -- queries --------------------------------------------------------------

    @property
    def columns(self) -> int:
        return self.shape.columns

    @property
    def rows(self) -> int:
        return self.shape.rows

    def tile_at(self, location: Location) -> Tile:
        return self.tiles[self.shape.index_of(location)]

    def as_rows(self) -> list[list[Tile]]:
        c = self.shape.columns
        return [list(self.tiles[r * c : (r + 1) * c]) for r in range(self.shape.rows)]

    @property
    def blank_location(self) -> Location:
        """Location of the single blank cell."""
        count = self.tiles.count(self.blank)
        if count != 1:
            raise InvalidBoardError(
                f"A board needs exactly one blank ({self.blank!r}); found {count}."
            )
        return self.shape.location_of(self.tiles.index(self.blank))

    def is_valid(self) -> bool:
        """Check that every tile is distinct and one of them is the blank.

        There are as many tile values as cells, so "every tile is unique" and
        "every tile is present" describe the same boards.
        """
        return len(set(self.tiles)) == len(self.tiles) and self.blank in self.tiles

    # -- moves ----------------------------------------------------------------

    def with_swap(self, a: Location, b: Location) -> Board:
        """Return a copy of this board with the tiles at *a* and *b* exchanged."""
        i = self.shape.index_of(a)
        j = self.shape.index_of(b)
        tiles = list(self.tiles)
        tiles[i], tiles[j] = tiles[j], tiles[i]
        return Board(tuple(tiles), self.shape, self.blank)

    def legal_successors(self) -> list[Board]:
        """Every board reachable from this one with a single slide."""
        blank_loc = self.blank_location
        return [
            self.with_swap(blank_loc, neighbor)
            for neighbor in self.shape.neighbors(blank_loc)
        ]

    # -- value semantics ------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.shape == other.shape and self.tiles == other.tiles

    def __hash__(self) -> int:
        return self._hash


def _shape(columns: int, rows: int, shapes: ShapeCache | None) -> GridShape:
    if shapes is None:
        return GridShape(columns, rows)
    return shapes.get(columns, rows)
