"""Adjacency model tests."""

from __future__ import annotations

import pytest

from slidegraph.models.grid import GridShape, Location, ShapeCache


@pytest.mark.parametrize(
    "location, expected",
    [
        (Location(0, 0), 2),
        (Location(1, 0), 3),
        (Location(1, 1), 4),
        (Location(2, 2), 2),
        (Location(0, 1), 3),
    ],
)
def test_neighbor_counts_3x3(location: Location, expected: int) -> None:
    shape = GridShape(3, 3)
    assert len(shape.neighbors(location)) == expected


def test_neighbors_are_orthogonal_and_in_bounds() -> None:
    shape = GridShape(4, 2)
    for loc in shape.locations:
        for n in shape.neighbors(loc):
            assert shape.contains(n)
            assert loc.is_adjacent(n)
        assert set(shape.neighbors(loc)) == {
            other for other in shape.locations if loc.is_adjacent(other)
        }


def test_diagonal_is_not_adjacent() -> None:
    assert not Location(0, 0).is_adjacent(Location(1, 1))
    assert not Location(0, 0).is_adjacent(Location(2, 0))
    assert Location(0, 0).is_adjacent(Location(0, 1))


def test_single_cell_has_no_neighbors() -> None:
    shape = GridShape(1, 1)
    assert shape.neighbors(Location(0, 0)) == ()


def test_index_round_trip() -> None:
    shape = GridShape(3, 2)
    assert shape.locations[0] == Location(0, 0)
    assert shape.locations[3] == Location(0, 1)
    for i, loc in enumerate(shape.locations):
        assert shape.index_of(loc) == i
        assert shape.location_of(i) == loc


def test_index_outside_grid_raises() -> None:
    with pytest.raises(IndexError):
        GridShape(2, 2).index_of(Location(2, 0))


def test_empty_shape_rejected() -> None:
    with pytest.raises(ValueError):
        GridShape(0, 3)


def test_shape_cache_shares_instances() -> None:
    cache = ShapeCache()
    a = cache.get(3, 3)
    assert cache.get(3, 3) is a
    assert cache.get(3, 2) is not a
    assert len(cache) == 2


def test_separate_caches_do_not_interfere() -> None:
    assert ShapeCache().get(3, 3) is not ShapeCache().get(3, 3)
    assert ShapeCache().get(3, 3) == ShapeCache().get(3, 3)
