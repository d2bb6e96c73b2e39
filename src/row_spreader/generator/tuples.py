"""Tuple generation: flattening value trees into row fragments.

This module provides a value tree visitor that turns an extracted document
into flat fragments mapping column names to raw JSON values. Arrays multiply
rows: a scalar array of length n yields n fragments, and independent arrays
are combined by Cartesian join.
"""

import logging
from typing import Iterable, List, Tuple

from row_spreader.extract.values import SingleValue, TreeArray, ValueArray, ValueRoot, ValueTree
from row_spreader.extract.visitor import ValueTreeVisitor
from row_spreader.generator.cross import Fragment, cross_fold
from row_spreader.paths.base import ITERATOR, PathElement, render_path

logger = logging.getLogger(__name__)


class TupleGeneratorVisitor(ValueTreeVisitor):
    """Value tree visitor that generates row fragments for each node type.

    Attributes:
        flat: Leave ``Iterator`` steps out of column names
        prefix: Path elements accumulated above the visited node
    """

    def __init__(self, flat: bool = False, prefix: Tuple[PathElement, ...] = ()):
        """Initialize the tuple generator visitor.

        Args:
            flat: Leave ``Iterator`` steps out of column names
            prefix: Path elements accumulated above the visited node
        """
        self.flat = flat
        self.prefix = prefix

    def visit_single_value(self, node: SingleValue) -> List[Fragment]:
        """A single value yields exactly one fragment."""
        return [{render_path(self.prefix + (node.key,)): node.value}]

    def visit_value_array(self, node: ValueArray) -> List[Fragment]:
        """A scalar array yields one fragment per element, all under one column."""
        column = render_path(self._array_prefix())
        return [{column: element} for element in node.elements]

    def visit_value_root(self, node: ValueRoot) -> List[Fragment]:
        """Flatten every child under the extended prefix and join the results."""
        child_visitor = self._descend(self.prefix + (node.key,))
        return cross_fold(child.accept(child_visitor) for child in node.children)

    def visit_tree_array(self, node: TreeArray) -> List[Fragment]:
        """Join siblings within each element, then concatenate the elements.

        Args:
            node: The tree array

        Returns:
            Fragments of the first element, then the second, and so on
        """
        element_visitor = self._descend(self._array_prefix())
        fragments: List[Fragment] = []
        for element in node.elements:
            fragments.extend(cross_fold(child.accept(element_visitor) for child in element))
        return fragments

    def _array_prefix(self) -> Tuple[PathElement, ...]:
        if self.flat:
            return self.prefix
        return self.prefix + (ITERATOR,)

    def _descend(self, prefix: Tuple[PathElement, ...]) -> "TupleGeneratorVisitor":
        return TupleGeneratorVisitor(flat=self.flat, prefix=prefix)


def generate_tuples(trees: Iterable[ValueTree], flat: bool = False) -> List[Fragment]:
    """Generate the row fragments of one extracted document.

    Args:
        trees: The document's value trees, in schema order
        flat: Leave ``Iterator`` steps out of column names

    Returns:
        The document's fragments; empty when nothing was extracted
    """
    visitor = TupleGeneratorVisitor(flat=flat)
    fragments = cross_fold(tree.accept(visitor) for tree in trees)
    logger.debug("Generated %d fragments", len(fragments))
    return fragments
