"""Schema tree module for representing the shared shape of JSON documents.

This module provides the schema forest nodes, the builder that compiles
header paths into a forest, and the visitor interface used to walk it.
"""

from row_spreader.schema_tree.builder import SchemaTreeBuilder, build_schema
from row_spreader.schema_tree.nodes import (
    PATH_END,
    PathEnd,
    PathNode,
    Schema,
    SchemaTree,
    SchemaTreeNode,
    format_schema,
    schema_paths,
)
from row_spreader.schema_tree.visitor import SchemaTreeVisitor

__all__ = [
    "SchemaTreeBuilder",
    "build_schema",
    "PATH_END",
    "PathEnd",
    "PathNode",
    "Schema",
    "SchemaTree",
    "SchemaTreeNode",
    "format_schema",
    "schema_paths",
    "SchemaTreeVisitor",
]
