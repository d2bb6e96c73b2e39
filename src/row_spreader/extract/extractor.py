"""Extraction of value trees from JSON documents.

The extraction visitor walks one schema tree against the current JSON value.
Missing keys and shape mismatches (an object expected where a scalar sits,
an array expected where an object sits, and so on) never raise: the
affected subtree simply yields nothing.
"""

from typing import Any, Iterable, List, Optional

from row_spreader.extract.values import SingleValue, TreeArray, ValueArray, ValueRoot, ValueTree
from row_spreader.paths.base import Key
from row_spreader.schema_tree.nodes import PathEnd, PathNode, Schema, SchemaTree
from row_spreader.schema_tree.visitor import SchemaTreeVisitor


class ExtractionVisitor(SchemaTreeVisitor):
    """Schema tree visitor that extracts the matching part of a JSON value.

    Each visit returns the extracted value tree, or None when the schema
    tree cannot be resolved against the value.
    """

    def __init__(self, value: Any):
        """Initialize the extraction visitor.

        Args:
            value: The JSON value the visited tree is resolved against
        """
        self.value = value

    def visit_path_end(self, node: PathEnd) -> Optional[ValueTree]:
        """Path end markers carry no data of their own."""
        return None

    def visit_path_node(self, node: PathNode) -> Optional[ValueTree]:
        """Visit a path node and extract the data below it.

        Args:
            node: The path node

        Returns:
            The extracted value tree, or None
        """
        if isinstance(node.label, Key):
            return self._extract_key(node)
        return self._extract_iterator(node)

    def _extract_key(self, node: PathNode) -> Optional[ValueTree]:
        name = node.label.name
        if not isinstance(self.value, dict) or name not in self.value:
            return None

        field_value = self.value[name]
        if node.is_leaf():
            return SingleValue(key=node.label, value=field_value)

        return ValueRoot(key=node.label, children=extract_children(node.children, field_value))

    def _extract_iterator(self, node: PathNode) -> Optional[ValueTree]:
        if not isinstance(self.value, list):
            return None

        if node.is_leaf():
            return ValueArray(elements=self.value)

        return TreeArray(elements=[extract_children(node.children, element) for element in self.value])


def extract_children(trees: Iterable[SchemaTree], value: Any) -> List[ValueTree]:
    """Extract every tree against the same value, keeping non-empty results.

    Args:
        trees: Sibling schema trees, in schema order
        value: The JSON value to resolve them against

    Returns:
        Extracted value trees, in schema order
    """
    extracted = []
    for tree in trees:
        result = extract_tree(tree, value)
        if result is not None:
            extracted.append(result)
    return extracted


def extract_tree(tree: SchemaTree, value: Any) -> Optional[ValueTree]:
    """Extract a single schema tree from a JSON value.

    Args:
        tree: The schema tree
        value: The JSON value

    Returns:
        The extracted value tree, or None when the tree does not resolve
    """
    return tree.accept(ExtractionVisitor(value))


def extract(schema: Schema, document: Any) -> List[ValueTree]:
    """Extract the value trees of a document under a compiled schema.

    Args:
        schema: The compiled schema forest
        document: One parsed JSON document

    Returns:
        One value tree per schema root that resolves against the document
    """
    return extract_children(schema, document)
