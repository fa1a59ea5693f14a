# src/graph/builder.py — v1
"""Literal graph builder: constructs the co-occurrence graph from a formula.

Creates one node per literal (positive and negative form of every
variable) and, for each clause, increments the weight of every unordered
pair of its literals by one. Pure function of the formula.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Sequence

import networkx as nx

from communitysat.core.models import ClauseLiteral, Formula
from communitysat.graph.literal_graph import LiteralGraph, literal_node_id

logger = logging.getLogger(__name__)


def init_literal_nodes(variables: Sequence[str]) -> nx.Graph:
    """Return an edgeless graph holding the ``2n`` literal nodes.

    Node attributes: ``literal`` (display form), ``variable`` and ``negated``.
    """
    graph = nx.Graph()
    for index, variable in enumerate(variables):
        for negated in (False, True):
            literal = ClauseLiteral(variable=variable, negated=negated)
            graph.add_node(
                literal_node_id(index, negated),
                literal=str(literal),
                variable=variable,
                negated=negated,
            )
    return graph


def build_literal_graph(formula: Formula) -> LiteralGraph:
    """Build the weighted literal co-occurrence graph of a formula.

    Args:
        formula: Validated formula.

    Returns:
        Frozen LiteralGraph with ``2n`` nodes; edge ``weight`` counts the
        clauses in which both literals appear.
    """
    graph = init_literal_nodes(formula.variables)
    node_index = {
        ClauseLiteral(variable=data["variable"], negated=data["negated"]): node
        for node, data in graph.nodes(data=True)
    }

    for clause_index, clause in enumerate(formula.clauses):
        for first, second in itertools.combinations(clause.literals, 2):
            u, v = node_index[first], node_index[second]
            if u == v:
                logger.debug(
                    "Skipping self-loop for repeated literal %s in clause %d",
                    first, clause_index,
                )
                continue
            if graph.has_edge(u, v):
                graph[u][v]["weight"] += 1
            else:
                graph.add_edge(u, v, weight=1)

    literal_graph = LiteralGraph(graph, formula.variables)
    logger.info(
        "Built literal graph: %d nodes, %d edges, total weight %.0f",
        literal_graph.number_of_nodes,
        literal_graph.number_of_edges,
        literal_graph.two_m / 2,
    )
    return literal_graph
