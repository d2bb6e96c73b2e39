"""Visitor pattern for traversing schema tree nodes.

This module provides the abstract visitor interface implemented by the
extraction engine to walk a document against a compiled schema.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from row_spreader.schema_tree.nodes import PathEnd, PathNode


class SchemaTreeVisitor(ABC):
    """Abstract base class for schema tree visitors."""

    @abstractmethod
    def visit_path_node(self, node: "PathNode") -> Any:
        """Visit a path node.

        Args:
            node: The path node to visit

        Returns:
            Processed result for the subtree rooted at ``node``
        """
        pass

    @abstractmethod
    def visit_path_end(self, node: "PathEnd") -> Any:
        """Visit a path end marker.

        Args:
            node: The path end marker to visit

        Returns:
            Processed result for the marker
        """
        pass
