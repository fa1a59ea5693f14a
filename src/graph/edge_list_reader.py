# src/graph/edge_list_reader.py — v1
"""Edge list reader: parses ``node_i node_j weight`` text back into a graph.

Blank lines and lines starting with ``#`` are ignored. Node ids must be
positive integers; weights must be positive finite numbers.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from communitysat.core.errors import MalformedInputError
from communitysat.graph.builder import init_literal_nodes
from communitysat.graph.literal_graph import LiteralGraph

logger = logging.getLogger(__name__)


def _parse_weight(token: str) -> float:
    value = float(token)
    return int(value) if value.is_integer() else value


def read_edge_list(text: str) -> list[tuple[int, int, float]]:
    """Parse edge list text into ``(u, v, weight)`` triples with ``u < v``.

    Raises:
        MalformedInputError: Wrong field count, non-numeric field,
            non-finite weight, non-positive node id or weight, or a
            self-loop. ``line_number`` is 1-based.
    """
    edges: list[tuple[int, int, float]] = []
    for line_number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        fields = line.split()
        if len(fields) != 3:
            raise MalformedInputError(
                f"Line {line_number}: expected 'node node weight', got {raw!r}",
                line_number=line_number,
            )
        try:
            u, v = int(fields[0]), int(fields[1])
            weight = _parse_weight(fields[2])
        except ValueError as e:
            raise MalformedInputError(
                f"Line {line_number}: non-numeric field in {raw!r}",
                line_number=line_number,
            ) from e

        if not math.isfinite(weight):
            raise MalformedInputError(
                f"Line {line_number}: weight must be a finite number, got {fields[2]!r}",
                line_number=line_number,
            )
        if u < 1 or v < 1 or weight <= 0:
            raise MalformedInputError(
                f"Line {line_number}: node ids and weight must be positive",
                line_number=line_number,
            )
        if u == v:
            raise MalformedInputError(
                f"Line {line_number}: self-loop on node {u}",
                line_number=line_number,
            )
        edges.append((min(u, v), max(u, v), weight))

    logger.debug("Read %d edges from edge list", len(edges))
    return edges


def literal_graph_from_edge_list(text: str, variables: Sequence[str]) -> LiteralGraph:
    """Rebuild a LiteralGraph for ``variables`` from edge list text.

    Weights of repeated ``(u, v)`` lines are summed.

    Raises:
        MalformedInputError: Malformed line or node id outside ``1..2n``.
    """
    graph = init_literal_nodes(variables)
    for u, v, weight in read_edge_list(text):
        for node in (u, v):
            if node not in graph:
                raise MalformedInputError(
                    f"Node {node} is not a literal of the {len(variables)} declared variables",
                )
        if graph.has_edge(u, v):
            graph[u][v]["weight"] += weight
        else:
            graph.add_edge(u, v, weight=weight)
    return LiteralGraph(graph, variables)
