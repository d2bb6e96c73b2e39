"""Builder for compiling header paths into a schema forest.

Paths are folded into the forest one at a time. A path whose first element
is not yet a root label becomes a new chain tree at the front of the forest;
otherwise its tail is merged into the matching tree, recursively, so that
every label occurs at most once among siblings.
"""

import logging
from typing import Iterable, List

from row_spreader.paths.base import Path
from row_spreader.schema_tree.nodes import PATH_END, PathNode, Schema, SchemaTree

logger = logging.getLogger(__name__)


class SchemaTreeBuilder:
    """Builds schema forests from header path lists."""

    @staticmethod
    def build(paths: Iterable[Path]) -> Schema:
        """Compile a list of paths into a schema forest.

        Duplicate paths are harmless: merging a path that is already present
        leaves the forest unchanged.

        Args:
            paths: Header paths, in header order

        Returns:
            The schema forest, newest distinguishing root first
        """
        schema: Schema = []
        count = 0
        for path in paths:
            schema = SchemaTreeBuilder.append_path(schema, path)
            count += 1

        logger.debug("Compiled %d paths into %d schema roots", count, len(schema))
        return schema

    @staticmethod
    def to_schema_tree(path: Path) -> SchemaTree:
        """Build a single chain tree from a path.

        Args:
            path: The path to convert

        Returns:
            Nested nodes, one per element, terminated by ``PathEnd``
        """
        if not path:
            return PATH_END
        return PathNode(label=path[0], children=(SchemaTreeBuilder.to_schema_tree(path[1:]),))

    @staticmethod
    def append_path(schema: Schema, path: Path) -> Schema:
        """Merge one path into a forest.

        Args:
            schema: The forest to extend
            path: The path to add

        Returns:
            A new forest containing ``path``
        """
        if any(SchemaTreeBuilder._has_same_root(tree, path) for tree in schema):
            return [SchemaTreeBuilder.add_path(tree, path) for tree in schema]

        return [SchemaTreeBuilder.to_schema_tree(path)] + list(schema)

    @staticmethod
    def add_path(tree: SchemaTree, path: Path) -> SchemaTree:
        """Merge a path into a single tree.

        Trees whose label differs from the path's first element are returned
        unchanged.

        Args:
            tree: The tree to extend
            path: The path to add, starting at the tree's own label

        Returns:
            The merged tree
        """
        if not path or not SchemaTreeBuilder._has_same_root(tree, path):
            return tree

        tail = path[1:]
        if not tree.children:
            return PathNode(label=tree.label, children=(SchemaTreeBuilder.to_schema_tree(tail),))

        merged = SchemaTreeBuilder.append_path(list(tree.children), tail)
        return PathNode(label=tree.label, children=tuple(_dedup(merged)))

    @staticmethod
    def _has_same_root(tree: SchemaTree, path: Path) -> bool:
        return isinstance(tree, PathNode) and tree.has_same_root(path)


def _dedup(trees: List[SchemaTree]) -> List[SchemaTree]:
    unique: List[SchemaTree] = []
    for tree in trees:
        if tree not in unique:
            unique.append(tree)
    return unique


def build_schema(paths: Iterable[Path]) -> Schema:
    """Convenience function to compile header paths into a schema forest.

    Args:
        paths: Header paths

    Returns:
        The schema forest
    """
    return SchemaTreeBuilder.build(paths)
