from slidegraph.models.board import Board, InvalidBoardError, Tile
from slidegraph.models.encoding import BoardCodec
from slidegraph.models.grid import GridShape, Location, ShapeCache
from slidegraph.models.notation import parse_board, tile_label

__all__ = [
    "Board",
    "BoardCodec",
    "GridShape",
    "InvalidBoardError",
    "Location",
    "ShapeCache",
    "Tile",
    "parse_board",
    "tile_label",
]
