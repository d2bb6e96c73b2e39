"""Visitor interface for value tree nodes."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from row_spreader.extract.values import SingleValue, TreeArray, ValueArray, ValueRoot


class ValueTreeVisitor(ABC):
    """Abstract base class for value tree visitors.

    The tuple generator implements this interface to flatten extracted
    documents into row fragments.
    """

    @abstractmethod
    def visit_value_root(self, node: "ValueRoot") -> Any:
        pass

    @abstractmethod
    def visit_single_value(self, node: "SingleValue") -> Any:
        pass

    @abstractmethod
    def visit_value_array(self, node: "ValueArray") -> Any:
        pass

    @abstractmethod
    def visit_tree_array(self, node: "TreeArray") -> Any:
        pass
