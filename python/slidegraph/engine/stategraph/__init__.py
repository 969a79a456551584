from slidegraph.engine.stategraph.graph import Node, StateGraph

__all__ = ["Node", "StateGraph"]
