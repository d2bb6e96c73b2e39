"""Value tree node definitions.

A value tree is the per-document result of walking a JSON document against
the compiled schema. It mirrors the schema's shape but carries the actual
data, and is consumed right away by the tuple generator.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, List, Union

from pydantic import BaseModel, ConfigDict, Field

from row_spreader.paths.base import Iterator, Key

if TYPE_CHECKING:
    from row_spreader.extract.visitor import ValueTreeVisitor


class ValueTreeNode(ABC, BaseModel):
    """Base class for all value tree nodes."""

    model_config = ConfigDict(frozen=False)

    @abstractmethod
    def accept(self, visitor: "ValueTreeVisitor") -> Any:
        """Accept a visitor for the visitor pattern.

        Args:
            visitor: The visitor to accept

        Returns:
            Result of the visitor's visit operation
        """
        pass


class ValueRoot(ValueTreeNode):
    """An object field whose value was decomposed into further subtrees.

    Attributes:
        key: The path element of the field
        children: Subtrees extracted from the field's value
    """

    key: Union[Key, Iterator] = Field(..., description="The field's path element")
    children: List["ValueTree"] = Field(default_factory=list, description="Extracted subtrees")

    def accept(self, visitor: "ValueTreeVisitor") -> Any:
        """Accept a visitor for value roots."""
        return visitor.visit_value_root(self)


class SingleValue(ValueTreeNode):
    """A terminal field holding one raw JSON value.

    Attributes:
        key: The path element of the field
        value: The raw JSON value, unvalidated
    """

    key: Union[Key, Iterator] = Field(..., description="The field's path element")
    value: Any = Field(default=None, description="The raw JSON value")

    def accept(self, visitor: "ValueTreeVisitor") -> Any:
        """Accept a visitor for single values."""
        return visitor.visit_single_value(self)


class ValueArray(ValueTreeNode):
    """A terminal array whose elements are kept verbatim."""

    elements: List[Any] = Field(default_factory=list, description="Raw array elements")

    def accept(self, visitor: "ValueTreeVisitor") -> Any:
        """Accept a visitor for value arrays."""
        return visitor.visit_value_array(self)


class TreeArray(ValueTreeNode):
    """An array where every element yields its own list of subtrees.

    Attributes:
        elements: One list of extracted subtrees per array element
    """

    elements: List[List["ValueTree"]] = Field(
        default_factory=list, description="Extracted subtrees per array element"
    )

    def accept(self, visitor: "ValueTreeVisitor") -> Any:
        """Accept a visitor for tree arrays."""
        return visitor.visit_tree_array(self)


ValueTree = Union[ValueRoot, SingleValue, ValueArray, TreeArray]

ValueRoot.model_rebuild()
TreeArray.model_rebuild()
