"""Graph of board states reachable from a source board."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from time import perf_counter

from slidegraph.engine.pathsearch import shortest_path
from slidegraph.models.board import Board, InvalidBoardError

logger = logging.getLogger(__name__)


@dataclass
class Node:
    """One interned board. ``neighbors`` holds arena handles, not nodes."""

    board: Board
    neighbors: list[int] = field(default_factory=list)
    expanded: bool = False


class StateGraph:
    """Interns boards as nodes and discovers the states reachable from ``source``.

    Nodes live in an arena (a list) and refer to each other by index, so the
    cyclic move graph never holds reference cycles. The graph is built
    lazily: call :meth:`explore` (or use :meth:`build_all` /
    :meth:`build_until`) before querying.
    """

    def __init__(self, source: Board) -> None:
        if not source.is_valid():
            raise InvalidBoardError(
                "Source board must hold every tile exactly once, including the blank."
            )
        self.source = source
        self._nodes: list[Node] = []
        self._index: dict[Board, int] = {}
        self._pending: deque[Board] = deque([source])
        self.node(source)

    @classmethod
    def build_all(cls, source: Board) -> StateGraph:
        """Build the graph of every board reachable from *source*."""
        graph = cls(source)
        graph.explore()
        return graph

    @classmethod
    def build_until(cls, source: Board, destination: Board) -> StateGraph:
        """Build just enough of the graph to answer a query for *destination*."""
        graph = cls(source)
        graph.explore(until=destination)
        return graph

    # -- interning ------------------------------------------------------------

    def node(self, board: Board) -> int:
        """Return the handle for *board*, creating the node on first sight."""
        handle = self._index.get(board)
        if handle is None:
            handle = len(self._nodes)
            self._nodes.append(Node(board))
            self._index[board] = handle
        return handle

    def expand(self, board: Board) -> list[Board]:
        """Connect *board* to its one-move successors and return them.

        Returns ``[]`` without doing anything if the board was already expanded.
        """
        node = self._nodes[self.node(board)]
        if node.expanded:
            return []
        successors = board.legal_successors()
        node.neighbors = [self.node(s) for s in successors]
        node.expanded = True
        return successors

    # -- construction ---------------------------------------------------------

    def explore(self, until: Board | None = None) -> bool:
        """Expand pending boards until done.

        Without *until*, runs depth-first until every reachable board is
        interned and expanded. With *until*, runs breadth-first and stops as
        soon as that board has been interned; breadth-first order guarantees
        the partial graph already contains a shortest path to it.

        Returns True when the requested board (or the whole graph) is in
        place, False if the reachable set ran out first. Pending work is kept,
        so a later call picks up where this one stopped.
        """
        t0 = perf_counter()
        start_nodes = len(self._nodes)
        pop = self._pending.pop if until is None else self._pending.popleft

        found = until is None or until in self._index
        while self._pending and not (until is not None and found):
            board = pop()
            for successor in self.expand(board):
                self._pending.append(successor)
                if successor == until:
                    found = True

        logger.debug(
            "Explored %d new boards (%d total, %d pending) in %.3fs",
            len(self._nodes) - start_nodes,
            len(self._nodes),
            len(self._pending),
            perf_counter() - t0,
        )
        if until is None:
            return True
        return found

    @property
    def is_complete(self) -> bool:
        """True once every reachable board has been expanded."""
        return all(n.expanded for n in self._nodes)

    # -- queries --------------------------------------------------------------

    def least_moves(self, destination: Board) -> list[Board] | None:
        """Shortest sequence of boards from the source to *destination*.

        Both ends are included. Returns ``None`` if *destination* was never
        discovered from the source or no path to it exists in the graph.
        """
        dest = self._index.get(destination)
        if dest is None:
            logger.debug("Destination was never discovered from the source")
            return None

        path = shortest_path(
            lambda handle: self._nodes[handle].neighbors,
            self._index[self.source],
            dest,
        )
        if path is None:
            return None
        return [self._nodes[handle].board for handle in path.nodes()]

    def distance(self, destination: Board) -> int | None:
        """Minimum number of moves from the source to *destination*."""
        boards = self.least_moves(destination)
        return None if boards is None else len(boards) - 1

    def neighbors(self, board: Board) -> list[Board]:
        """Boards one move away from *board*, as far as the graph knows."""
        handle = self._index.get(board)
        if handle is None:
            raise KeyError(board)
        return [self._nodes[n].board for n in self._nodes[handle].neighbors]

    def boards(self) -> list[Board]:
        return [n.board for n in self._nodes]

    def __contains__(self, board: object) -> bool:
        return board in self._index

    def __len__(self) -> int:
        return len(self._nodes)
