"""Schema tree node definitions.

A compiled schema is a forest of path trees. Each ``PathNode`` is labeled by
a path element and owns its child trees; ``PathEnd`` marks the point where a
discovered path stops. The forest describes the shared shape of all input
documents and drives extraction.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from row_spreader.paths.base import Iterator, Key, Path, PathElement, render_path

if TYPE_CHECKING:
    from row_spreader.schema_tree.visitor import SchemaTreeVisitor


class SchemaTreeNode(ABC, BaseModel):
    """Base class for all schema tree nodes.

    Nodes are frozen: a schema is built once before any document is processed
    and only read afterwards.
    """

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def accept(self, visitor: "SchemaTreeVisitor") -> Any:
        """Accept a visitor for the visitor pattern.

        Args:
            visitor: The visitor to accept

        Returns:
            Result of the visitor's visit operation
        """
        pass


class PathEnd(SchemaTreeNode):
    """Terminal marker: a discovered path ends here."""

    def accept(self, visitor: "SchemaTreeVisitor") -> Any:
        """Accept a visitor for path end markers."""
        return visitor.visit_path_end(self)


class PathNode(SchemaTreeNode):
    """A path step with the subtrees reachable below it.

    Attributes:
        label: The path element this node stands for
        children: Subtrees below this step, newest first
    """

    label: Union[Key, Iterator] = Field(..., description="Path element labeling this node")
    children: Tuple["SchemaTree", ...] = Field(
        default=(), description="Child trees, PathEnd marks a path ending at this node"
    )

    def accept(self, visitor: "SchemaTreeVisitor") -> Any:
        """Accept a visitor for path nodes."""
        return visitor.visit_path_node(self)

    def has_same_root(self, path: Path) -> bool:
        """Check whether ``path`` starts with this node's label."""
        return bool(path) and path[0] == self.label

    def is_leaf(self) -> bool:
        """Check whether this node's only child is the path end marker."""
        return len(self.children) == 1 and isinstance(self.children[0], PathEnd)


SchemaTree = Union[PathNode, PathEnd]
Schema = List[SchemaTree]

PathNode.model_rebuild()

PATH_END = PathEnd()


def schema_paths(schema: Schema, prefix: Tuple[PathElement, ...] = ()) -> List[Path]:
    """List every complete path encoded in a schema forest, in forest order.

    Args:
        schema: The schema forest
        prefix: Path elements above the forest

    Returns:
        One path per ``PathEnd`` marker reachable from the forest
    """
    paths: List[Path] = []
    for tree in schema:
        if isinstance(tree, PathEnd):
            if prefix:
                paths.append(prefix)
            continue
        paths.extend(schema_paths(list(tree.children), prefix + (tree.label,)))
    return paths


def format_schema(schema: Schema, indent: int = 0) -> List[Tuple[str, str]]:
    """Format a schema forest for display.

    Args:
        schema: The schema forest
        indent: Current indentation level

    Returns:
        List of (indented label, kind) tuples, depth first
    """
    rows = []
    prefix = "  " * indent
    for tree in schema:
        if isinstance(tree, PathEnd):
            continue
        kind = "array" if isinstance(tree.label, Iterator) else "field"
        if any(isinstance(child, PathEnd) for child in tree.children):
            kind += " (value)"
        rows.append((f"{prefix}{render_path((tree.label,))}", kind))
        rows.extend(format_schema(list(tree.children), indent + 1))
    return rows
