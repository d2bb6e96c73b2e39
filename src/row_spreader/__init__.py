"""Row Spreader - Convert newline-delimited JSON into flat delimited rows."""

from row_spreader.config import Config, load_config
from row_spreader.errors import JsonLineError, RowSpreaderError, SchemaNotCompiledError
from row_spreader.extract.extractor import extract
from row_spreader.generator.tuples import generate_tuples
from row_spreader.paths.base import ITERATOR, Iterator, Key, render_path
from row_spreader.paths.combine import CombineMode
from row_spreader.paths.discovery import discover_paths
from row_spreader.schema_tree.builder import SchemaTreeBuilder, build_schema
from row_spreader.tabulator import Table, Tabulator, tabulate_documents

__version__ = "0.1.0"

__all__ = [
    "Config",
    "load_config",
    "JsonLineError",
    "RowSpreaderError",
    "SchemaNotCompiledError",
    "extract",
    "generate_tuples",
    "ITERATOR",
    "Iterator",
    "Key",
    "render_path",
    "CombineMode",
    "discover_paths",
    "SchemaTreeBuilder",
    "build_schema",
    "Table",
    "Tabulator",
    "tabulate_documents",
]
