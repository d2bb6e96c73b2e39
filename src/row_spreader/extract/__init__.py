"""Extraction of per-document value trees under a compiled schema."""

from row_spreader.extract.extractor import ExtractionVisitor, extract, extract_tree
from row_spreader.extract.values import (
    SingleValue,
    TreeArray,
    ValueArray,
    ValueRoot,
    ValueTree,
    ValueTreeNode,
)
from row_spreader.extract.visitor import ValueTreeVisitor

__all__ = [
    "ExtractionVisitor",
    "extract",
    "extract_tree",
    "SingleValue",
    "TreeArray",
    "ValueArray",
    "ValueRoot",
    "ValueTree",
    "ValueTreeNode",
    "ValueTreeVisitor",
]
