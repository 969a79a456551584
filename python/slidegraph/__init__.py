"""Shortest move sequences between sliding-tile puzzle boards."""

from slidegraph.engine import BoardGenerator, StateGraph, shortest_path
from slidegraph.models import (
    Board,
    BoardCodec,
    GridShape,
    InvalidBoardError,
    Location,
    ShapeCache,
    parse_board,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardCodec",
    "BoardGenerator",
    "GridShape",
    "InvalidBoardError",
    "Location",
    "ShapeCache",
    "StateGraph",
    "parse_board",
    "shortest_path",
]
