"""Grid geometry shared by every board of one shape."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import NamedTuple


class Location(NamedTuple):
    column: int
    row: int

    def is_adjacent(self, other: Location) -> bool:
        """True if *other* is one step away along exactly one axis."""
        return abs(self.column - other.column) + abs(self.row - other.row) == 1


@dataclass(frozen=True)
class GridShape:
    """Dimensions of a board plus its precomputed neighbor map.

    Instances are read-only once built and are meant to be shared by every
    board with the same dimensions.
    """

    columns: int
    rows: int

    def __post_init__(self) -> None:
        if self.columns < 1 or self.rows < 1:
            raise ValueError(
                f"A grid needs at least one column and one row, "
                f"got {self.columns}×{self.rows}."
            )

    # -- geometry -------------------------------------------------------------

    @property
    def cell_count(self) -> int:
        return self.columns * self.rows

    @cached_property
    def locations(self) -> tuple[Location, ...]:
        """Every location in row-major order."""
        return tuple(
            Location(c, r) for r in range(self.rows) for c in range(self.columns)
        )

    def contains(self, location: Location) -> bool:
        return 0 <= location.column < self.columns and 0 <= location.row < self.rows

    def index_of(self, location: Location) -> int:
        if not self.contains(location):
            raise IndexError(f"{location} is outside a {self.columns}×{self.rows} grid.")
        return location.row * self.columns + location.column

    def location_of(self, index: int) -> Location:
        row, column = divmod(index, self.columns)
        return Location(column, row)

    # -- adjacency ------------------------------------------------------------

    @cached_property
    def neighbor_map(self) -> dict[Location, tuple[Location, ...]]:
        neighbor_map: dict[Location, tuple[Location, ...]] = {}
        for loc in self.locations:
            candidates = (
                Location(loc.column - 1, loc.row),
                Location(loc.column + 1, loc.row),
                Location(loc.column, loc.row - 1),
                Location(loc.column, loc.row + 1),
            )
            neighbor_map[loc] = tuple(c for c in candidates if self.contains(c))
        return neighbor_map

    def neighbors(self, location: Location) -> tuple[Location, ...]:
        return self.neighbor_map[location]


@dataclass
class ShapeCache:
    """Hands out one shared ``GridShape`` per ``(columns, rows)`` pair."""

    _shapes: dict[tuple[int, int], GridShape] = field(default_factory=dict)

    def get(self, columns: int, rows: int) -> GridShape:
        key = (columns, rows)
        shape = self._shapes.get(key)
        if shape is None:
            shape = GridShape(columns, rows)
            self._shapes[key] = shape
        return shape

    def __len__(self) -> int:
        return len(self._shapes)
