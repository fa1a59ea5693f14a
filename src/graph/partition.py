# src/graph/partition.py — v1
"""Partition: immutable mapping from graph node to community label.

Labels are opaque; the detector starts from ``label = node id``. A
Partition is never mutated: relabeling returns a new instance.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType


class Partition:
    """Frozen node -> community label assignment."""

    __slots__ = ("_labels",)

    def __init__(self, labels: Mapping[int, int]) -> None:
        self._labels: Mapping[int, int] = MappingProxyType(dict(labels))

    @classmethod
    def singletons(cls, nodes: Iterable[int]) -> Partition:
        """Every node in its own community, labeled by its id."""
        return cls({node: node for node in nodes})

    @classmethod
    def from_communities(cls, communities: Iterable[Iterable[int]]) -> Partition:
        """Build from node groups; the label of each group is its position."""
        labels: dict[int, int] = {}
        for label, members in enumerate(communities):
            for node in members:
                if node in labels:
                    raise ValueError(f"Node {node} appears in more than one community")
                labels[node] = label
        return cls(labels)

    @property
    def labels(self) -> Mapping[int, int]:
        return self._labels

    def label_of(self, node: int) -> int:
        return self._labels[node]

    def with_label(self, node: int, label: int) -> Partition:
        """Copy of this partition with ``node`` moved to ``label``."""
        if node not in self._labels:
            raise KeyError(node)
        labels = dict(self._labels)
        labels[node] = label
        return Partition(labels)

    def communities(self) -> dict[int, list[int]]:
        """Label -> sorted members, labels in first-appearance order over sorted nodes."""
        groups: dict[int, list[int]] = {}
        for node in sorted(self._labels):
            groups.setdefault(self._labels[node], []).append(node)
        return groups

    @property
    def number_of_communities(self) -> int:
        return len(set(self._labels.values()))

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, node: object) -> bool:
        return node in self._labels

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Partition):
            return NotImplemented
        return dict(self._labels) == dict(other._labels)

    def __hash__(self) -> int:
        return hash(frozenset(self._labels.items()))

    def __repr__(self) -> str:
        return f"Partition(nodes={len(self)}, communities={self.number_of_communities})"
