from slidegraph.engine.boardgen import BoardGenerator
from slidegraph.engine.pathsearch import Path, shortest_path
from slidegraph.engine.stategraph import StateGraph

__all__ = ["BoardGenerator", "Path", "StateGraph", "shortest_path"]
