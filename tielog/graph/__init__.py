"""Graph snapshot and analysis"""

from .snapshot import build_active_graph, graph_metrics

__all__ = ["build_active_graph", "graph_metrics"]
