"""Vanilla terminal frontend — no third-party dependencies.

Draws boards as boxed text grids with plain ``print``.
"""

from __future__ import annotations

from collections.abc import Sequence

from puzzleview.cli.timing import format_duration
from slidegraph.models.board import Board
from slidegraph.models.notation import tile_label


# -- board rendering ----------------------------------------------------------


def _labels(board: Board) -> tuple[list[list[str]], int]:
    rows = [[tile_label(t, board.blank) for t in row] for row in board.as_rows()]
    width = max(len(label) for row in rows for label in row)
    return rows, width


def render_ascii(board: Board) -> str:
    """Return a ``|---|`` boxed text representation of the board."""
    rows, width = _labels(board)
    sep = "|" + "|".join(["-" * (width + 2)] * board.columns) + "|"

    lines: list[str] = [sep]
    for row in rows:
        lines.append("|" + "|".join(f" {label:>{width}} " for label in row) + "|")
        lines.append(sep)
    return "\n".join(lines)


def render_unicode(board: Board) -> str:
    """Return a box-drawing representation of the board."""
    rows, width = _labels(board)
    bar = "─" * (width + 2)

    def rule(left: str, mid: str, right: str) -> str:
        return left + mid.join([bar] * board.columns) + right

    lines: list[str] = [rule("┌", "┬", "┐")]
    for r, row in enumerate(rows):
        if r:
            lines.append(rule("├", "┼", "┤"))
        lines.append("│" + "│".join(f" {label:>{width}} " for label in row) + "│")
    lines.append(rule("└", "┴", "┘"))
    return "\n".join(lines)


_RENDERERS = {
    "ascii": render_ascii,
    "unicode": render_unicode,
}


# -- public entry point -------------------------------------------------------


def show_path(
    path: Sequence[Board] | None,
    build_seconds: float,
    search_seconds: float,
    style: str = "unicode",
) -> None:
    """Print the timings followed by every state of *path*."""
    render = _RENDERERS[style]
    print(f"Built graph in {format_duration(build_seconds)}")

    if path is None:
        print("No path found")
        return

    print(f"Found shortest path in {format_duration(search_seconds)}")
    print(f"Moves: {len(path) - 1}")
    for i, board in enumerate(path):
        print(f"State {i}")
        print(render(board))
