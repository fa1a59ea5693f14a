# src/graph/base_graph_exporter.py — v1
"""Abstract literal graph export interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from communitysat.graph.literal_graph import LiteralGraph


class BaseGraphExporter(ABC):
    """Unified interface for literal graph export formats."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Export format identifier (e.g., 'edgelist')."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Output file extension (e.g., '.txt')."""

    @abstractmethod
    def export(self, graph: LiteralGraph, output_path: str) -> str:
        """Export graph to file, return path to exported file."""
