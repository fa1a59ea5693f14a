# src/graph/exporters/edge_list_exporter.py — v1
"""Weighted edge list exporter.

One line per undirected edge: ``node_i node_j weight`` with ``i < j``,
sorted by ``(i, j)``. Integral weights are written without a decimal part.
"""

from __future__ import annotations

from pathlib import Path

from communitysat.graph.base_graph_exporter import BaseGraphExporter
from communitysat.graph.literal_graph import LiteralGraph


def _format_weight(weight: float) -> str:
    value = float(weight)
    return str(int(value)) if value.is_integer() else repr(value)


def format_edge_list(graph: LiteralGraph) -> str:
    """Render the graph's edges as edge list text (trailing newline included)."""
    lines = [
        f"{u} {v} {_format_weight(weight)}"
        for u, v, weight in sorted(graph.edges())
    ]
    return "\n".join(lines) + "\n" if lines else ""


class EdgeListExporter(BaseGraphExporter):
    """Export graph to a plain weighted edge list."""

    @property
    def format_name(self) -> str:
        return "edgelist"

    @property
    def file_extension(self) -> str:
        return ".txt"

    def export(self, graph: LiteralGraph, output_path: str) -> str:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(format_edge_list(graph), encoding="utf-8")
        return str(path)
