# src/graph/literal_graph.py — v1
"""LiteralGraph: frozen weighted literal co-occurrence graph.

Wraps an undirected NetworkX graph whose nodes are literal ids and whose
edge ``weight`` is the number of clauses in which both literals occur.
Node ids are interleaved in variable order: the i-th variable (0-based)
owns node ``2i + 1`` (positive) and ``2i + 2`` (negative).

Weighted degrees are precomputed once. Each undirected edge contributes
its weight exactly once to each endpoint's degree, and ``two_m`` is the sum
of all degrees. The scorer and detector rely on this single convention.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence

import networkx as nx

from communitysat.core.models import ClauseLiteral


def literal_node_id(variable_index: int, negated: bool) -> int:
    """Node id for the literal of the ``variable_index``-th variable (0-based)."""
    return 2 * variable_index + (2 if negated else 1)


class LiteralGraph:
    """Read-only view over a literal co-occurrence graph."""

    def __init__(self, graph: nx.Graph, variables: Sequence[str]) -> None:
        self._graph = nx.freeze(graph)
        self._variables = list(variables)

        self._literal_to_node: dict[ClauseLiteral, int] = {}
        self._node_to_literal: dict[int, ClauseLiteral] = {}
        for index, variable in enumerate(self._variables):
            for negated in (False, True):
                node = literal_node_id(index, negated)
                if node not in self._graph:
                    raise ValueError(f"Graph is missing literal node {node} for {variable!r}")
                literal = ClauseLiteral(variable=variable, negated=negated)
                self._literal_to_node[literal] = node
                self._node_to_literal[node] = literal

        self._degrees: dict[int, float] = {
            node: float(deg) for node, deg in self._graph.degree(weight="weight")
        }
        self._two_m = sum(self._degrees.values())

    def __repr__(self) -> str:
        return (
            f"LiteralGraph(variables={len(self._variables)}, "
            f"nodes={self.number_of_nodes}, edges={self.number_of_edges})"
        )

    # --- Structure ---

    @property
    def nx_graph(self) -> nx.Graph:
        """Underlying frozen NetworkX graph."""
        return self._graph

    @property
    def variables(self) -> list[str]:
        return list(self._variables)

    @property
    def nodes(self) -> list[int]:
        return sorted(self._graph.nodes)

    @property
    def number_of_nodes(self) -> int:
        return self._graph.number_of_nodes()

    @property
    def number_of_edges(self) -> int:
        return self._graph.number_of_edges()

    def edges(self) -> Iterator[tuple[int, int, float]]:
        """Yield each undirected edge once as ``(u, v, weight)`` with ``u < v``."""
        for u, v, weight in self._graph.edges(data="weight", default=0):
            yield (u, v, weight) if u < v else (v, u, weight)

    def neighbors(self, node: int) -> list[int]:
        """Neighbors in adjacency (insertion) order."""
        return list(self._graph.adj[node])

    def weight(self, u: int, v: int) -> float:
        """Edge weight, 0.0 when the literals never co-occur."""
        data = self._graph.adj[u].get(v)
        if data is None:
            return 0.0
        return float(data.get("weight", 0))

    def degree(self, node: int) -> float:
        return self._degrees[node]

    @property
    def two_m(self) -> float:
        return self._two_m

    def is_isolated(self, node: int) -> bool:
        return not self._graph.adj[node]

    # --- Literal mapping ---

    def node_for(self, literal: ClauseLiteral) -> int:
        return self._literal_to_node[literal]

    def literal_of(self, node: int) -> ClauseLiteral:
        return self._node_to_literal[node]

    def variable_of(self, node: int) -> str:
        return self._node_to_literal[node].variable

    def nodes_of_variable(self, variable: str) -> tuple[int, int]:
        """``(positive_node, negative_node)`` for a variable."""
        return (
            self._literal_to_node[ClauseLiteral(variable=variable, negated=False)],
            self._literal_to_node[ClauseLiteral(variable=variable, negated=True)],
        )
