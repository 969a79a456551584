from slidegraph.engine.pathsearch.search import Path, shortest_path

__all__ = ["Path", "shortest_path"]
