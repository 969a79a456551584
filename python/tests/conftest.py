from __future__ import annotations

import pytest

from slidegraph.engine.boardgen import BoardGenerator
from slidegraph.engine.stategraph import StateGraph


@pytest.fixture(scope="session")
def full_3x3() -> StateGraph:
    """Every board reachable from the solved 3×3 board (9!/2 of them)."""
    return StateGraph.build_all(BoardGenerator.solved(3, 3))
