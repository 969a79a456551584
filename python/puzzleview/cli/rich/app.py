"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output while sharing the timing
helpers with the vanilla CLI.
"""

from __future__ import annotations

from collections.abc import Sequence

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from puzzleview.cli.timing import format_duration
from slidegraph.models.board import Board
from slidegraph.models.notation import tile_label

console = Console()

_BOXES = {
    "ascii": rich.box.ASCII,
    "unicode": rich.box.HEAVY,
}


# -- board rendering ----------------------------------------------------------


def render_board(board: Board, style: str = "unicode", goal: Board | None = None) -> Table:
    """Return a Rich Table representing the puzzle grid.

    Tiles already sitting where *goal* has them are highlighted.
    """
    labels = [[tile_label(t, board.blank) for t in row] for row in board.as_rows()]
    width = max(len(label) for row in labels for label in row)
    table = Table(
        show_header=False,
        show_edge=True,
        show_lines=True,
        box=_BOXES[style],
        border_style="bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.columns):
        table.add_column(width=width, justify="center")

    for r, row in enumerate(labels):
        cells: list[str] = []
        for c, label in enumerate(row):
            tile = board.tiles[r * board.columns + c]
            if tile == board.blank:
                cells.append("[dim]·[/dim]")
            elif goal is not None and goal.tiles[r * board.columns + c] == tile:
                cells.append(f"[bold green]{label}[/bold green]")
            else:
                cells.append(f"[bold white]{label}[/bold white]")
        table.add_row(*cells)

    return table


# -- public entry point -------------------------------------------------------


def show_path(
    path: Sequence[Board] | None,
    build_seconds: float,
    search_seconds: float,
    style: str = "unicode",
) -> None:
    """Draw the timings followed by every state of *path*."""
    stats = Text()
    stats.append("Built graph in ", style="dim")
    stats.append(format_duration(build_seconds), style="bold yellow")
    console.print(stats)

    if path is None:
        console.print("[red]No path found[/red]")
        return

    stats = Text()
    stats.append("Found shortest path in ", style="dim")
    stats.append(format_duration(search_seconds), style="bold yellow")
    stats.append("    Moves: ", style="dim")
    stats.append(str(len(path) - 1), style="bold yellow")
    console.print(stats)

    goal = path[-1]
    for i, board in enumerate(path):
        panel = Panel(
            Group(Align.center(render_board(board, style, goal))),
            title=f"[bold cyan]State {i}[/bold cyan]",
            border_style="cyan",
            expand=False,
        )
        console.print(panel)
