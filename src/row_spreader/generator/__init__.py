"""Row generation modules."""

from row_spreader.generator.cross import Fragment, cross_fold, cross_product, merge_fragments
from row_spreader.generator.render import project_row, render_columns, render_value
from row_spreader.generator.tuples import TupleGeneratorVisitor, generate_tuples

__all__ = [
    "Fragment",
    "cross_fold",
    "cross_product",
    "merge_fragments",
    "project_row",
    "render_columns",
    "render_value",
    "TupleGeneratorVisitor",
    "generate_tuples",
]
