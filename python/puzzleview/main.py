#!/usr/bin/env python3
"""Sliding puzzle shortest-path finder.

Usage::

    slidegraph                                   # solved 3×3 to a 31-move board
    slidegraph -d "1 2 3/4 5 _/7 8 6"            # explicit destination
    slidegraph -s "123/456/78_" --scramble 20    # random destination
    slidegraph -f rich --style ascii --full      # Rich output, full graph
"""

from __future__ import annotations

import importlib
import logging
import random
from enum import StrEnum
from typing import Optional

import typer
from rich.logging import RichHandler

from puzzleview.cli.timing import timed
from slidegraph.engine.boardgen import BoardGenerator
from slidegraph.engine.stategraph import StateGraph
from slidegraph.models.board import Board, InvalidBoardError
from slidegraph.models.grid import ShapeCache
from slidegraph.models.notation import parse_board

DEFAULT_SOURCE = "1 2 3/4 5 6/7 8 _"
# The two boards furthest from the solved 3×3 board are 31 moves away.
DEFAULT_DESTINATION = "8 6 7/2 5 4/3 _ 1"

logger = logging.getLogger("puzzleview")


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


class Style(StrEnum):
    unicode = "unicode"
    ascii = "ascii"


_RUNNERS = {
    Frontend.vanilla: "puzzleview.cli.vanilla.app",
    Frontend.rich: "puzzleview.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _parse(text: str, option: str, shapes: ShapeCache) -> Board:
    try:
        board = parse_board(text, shapes)
    except InvalidBoardError as exc:
        raise typer.BadParameter(str(exc), param_hint=option) from exc
    if not board.is_valid():
        raise typer.BadParameter(
            "every tile must appear exactly once, including one blank",
            param_hint=option,
        )
    return board


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    source: str = typer.Option(
        DEFAULT_SOURCE, "-s", "--source",
        help="Starting board, rows separated by '/'; '_' is the blank.",
    ),
    destination: Optional[str] = typer.Option(
        None, "-d", "--destination",
        help="Target board. Defaults to a 31-move 3×3 board, or a scramble.",
    ),
    scramble: Optional[int] = typer.Option(
        None, "--scramble",
        min=0,
        help="Use SCRAMBLE random moves from the source as the destination.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Random seed for --scramble.",
    ),
    bounded: bool = typer.Option(
        True, "--bounded/--full",
        help="Stop building once the destination is found, or build everything.",
    ),
    frontend: Frontend = typer.Option(
        Frontend.vanilla, "-f", "--frontend",
        help="Output frontend.",
    ),
    style: Style = typer.Option(
        Style.unicode, "--style",
        help="Board drawing style.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log graph construction and search details.",
    ),
) -> None:
    """Find the fewest slides that turn one board into another."""
    _configure_logging(verbose)
    shapes = ShapeCache()
    start = _parse(source, "--source", shapes)

    if destination is not None:
        goal = _parse(destination, "--destination", shapes)
    elif scramble is not None:
        goal = BoardGenerator.scramble(start, scramble, random.Random(seed))
    else:
        goal = _parse(DEFAULT_DESTINATION, "--destination", shapes)

    if goal.shape != start.shape:
        raise typer.BadParameter(
            f"expected a {start.columns}×{start.rows} board",
            param_hint="--destination",
        )

    if bounded:
        graph, build_seconds = timed(lambda: StateGraph.build_until(start, goal))
    else:
        graph, build_seconds = timed(lambda: StateGraph.build_all(start))
    logger.info("Graph holds %d boards", len(graph))

    path, search_seconds = timed(lambda: graph.least_moves(goal))

    mod = importlib.import_module(_RUNNERS[frontend])
    mod.show_path(path, build_seconds, search_seconds, style=style.value)

    if path is None:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
