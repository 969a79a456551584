from slidegraph.engine.boardgen.generator import BoardGenerator

__all__ = ["BoardGenerator"]
