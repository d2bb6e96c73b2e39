"""Two-pass conversion of JSON documents into flat rows.

The first pass discovers the paths of every document and combines them into
the header, which is compiled into a schema. Only then does the second pass
extract and flatten each document against the frozen schema. Per-document
work in either pass is independent and can be spread over a thread pool;
results always come back in input order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, List, Optional, TextIO, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field

from row_spreader.config import Config
from row_spreader.errors import SchemaNotCompiledError
from row_spreader.extract.extractor import extract
from row_spreader.generator.cross import Fragment
from row_spreader.generator.render import project_row, render_columns
from row_spreader.generator.tuples import generate_tuples
from row_spreader.ndjson import read_documents, write_rows
from row_spreader.paths.base import Path as PathType
from row_spreader.paths.base import PathSet, unique_paths
from row_spreader.paths.combine import CombineMode, combine_path_sets
from row_spreader.paths.discovery import discover_paths
from row_spreader.schema_tree.builder import build_schema
from row_spreader.schema_tree.nodes import Schema

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class Table(BaseModel):
    """Rendered conversion result.

    Attributes:
        columns: Column names, in header order
        rows: Rendered rows, each laid out over ``columns``
    """

    model_config = ConfigDict(frozen=False)

    columns: List[str] = Field(..., description="Column names in header order")
    rows: List[List[str]] = Field(default_factory=list, description="Rendered rows")


class Tabulator:
    """Converts JSON documents into rows under an inferred schema.

    Call ``build_header`` over all documents, then ``compile`` the header
    before asking for rows. ``tabulate`` and ``convert_file`` run both passes.
    """

    def __init__(
        self,
        flatten: bool = False,
        combine_mode: CombineMode = CombineMode.UNION,
        workers: int = 1,
    ):
        """Initialize the tabulator.

        Args:
            flatten: Drop ``Iterator`` steps from column names
            combine_mode: How per-document paths are combined into the header
            workers: Threads used for per-document work; 1 runs inline
        """
        self.flatten = flatten
        self.combine_mode = CombineMode(combine_mode)
        self.workers = max(1, workers)
        self.header: Optional[PathSet] = None
        self.schema: Optional[Schema] = None
        self._columns: Optional[List[str]] = None

    @classmethod
    def from_config(cls, config: Config) -> "Tabulator":
        """Create a tabulator from loaded settings."""
        return cls(flatten=config.flatten, combine_mode=config.combine_mode, workers=config.workers)

    @property
    def is_compiled(self) -> bool:
        return self.schema is not None

    @property
    def columns(self) -> List[str]:
        """Column names of the compiled header.

        Raises:
            SchemaNotCompiledError: If ``compile`` has not been called
        """
        if self._columns is None:
            raise SchemaNotCompiledError("compile a header before requesting columns")
        return self._columns

    def build_header(self, documents: Iterable[Any]) -> PathSet:
        """Discover and combine the paths of all documents.

        Args:
            documents: Parsed JSON documents

        Returns:
            The combined header paths
        """
        header = combine_path_sets(self._map(discover_paths, documents), self.combine_mode)
        logger.info("Discovered %d header paths (%s)", len(header), self.combine_mode.value)
        return header

    def compile(self, header: Iterable[PathType]) -> "Tabulator":
        """Freeze the header into a schema and a column list.

        Args:
            header: Header paths, in header order

        Returns:
            This tabulator, ready to produce rows
        """
        self.header = unique_paths(header)
        self.schema = build_schema(self.header)
        self._columns = render_columns(self.header, flatten=self.flatten)
        logger.info("Compiled schema with %d columns", len(self._columns))
        return self

    def fragments(self, document: Any) -> List[Fragment]:
        """Extract and flatten one document into row fragments.

        Raises:
            SchemaNotCompiledError: If ``compile`` has not been called
        """
        if self.schema is None:
            raise SchemaNotCompiledError("compile a header before extracting documents")
        return generate_tuples(extract(self.schema, document), flat=self.flatten)

    def rows(self, document: Any) -> List[List[str]]:
        """Render one document into zero or more rows over the column list."""
        columns = self.columns
        return [project_row(fragment, columns) for fragment in self.fragments(document)]

    def iter_rows(self, documents: Iterable[Any]) -> Iterator[List[str]]:
        """Render documents into rows, in input order."""
        for document_rows in self._map(self.rows, documents):
            yield from document_rows

    def tabulate(self, documents: Iterable[Any]) -> Table:
        """Run both passes over in-memory documents.

        Args:
            documents: Parsed JSON documents; consumed once and buffered

        Returns:
            The rendered table
        """
        documents = list(documents)
        self.compile(self.build_header(documents))
        return Table(columns=self.columns, rows=list(self.iter_rows(documents)))

    def convert(self, input_path: Union[str, Path], output: TextIO, separator: str = ";") -> int:
        """Convert an NDJSON file, writing delimited rows to a text stream.

        The input file is read twice: once to build the header, once to
        produce the rows.

        Args:
            input_path: NDJSON input file
            output: Text stream receiving the header line and the rows
            separator: Field separator

        Returns:
            Number of data rows written

        Raises:
            JsonLineError: If any input line cannot be parsed
        """
        self.compile(self.build_header(read_documents(input_path)))
        count = write_rows(output, self.columns, self.iter_rows(read_documents(input_path)), separator)
        logger.info("Wrote %d rows", count)
        return count

    def convert_file(
        self, input_path: Union[str, Path], output_path: Union[str, Path], separator: str = ";"
    ) -> int:
        """Convert an NDJSON file into a delimited text file.

        Returns:
            Number of data rows written
        """
        with Path(output_path).open("w", encoding="utf-8", newline="") as handle:
            return self.convert(input_path, handle, separator)

    def _map(self, func: Callable[[T], R], items: Iterable[T]) -> Iterator[R]:
        if self.workers <= 1:
            yield from map(func, items)
            return
        with ThreadPoolExecutor(max_workers=self.workers) as executor:
            yield from executor.map(func, items)


def tabulate_documents(
    documents: Iterable[Any],
    flatten: bool = False,
    combine_mode: CombineMode = CombineMode.UNION,
) -> Table:
    """Convenience function to convert parsed documents into a table.

    Args:
        documents: Parsed JSON documents
        flatten: Drop ``Iterator`` steps from column names
        combine_mode: How per-document paths are combined into the header

    Returns:
        The rendered table
    """
    return Tabulator(flatten=flatten, combine_mode=combine_mode).tabulate(documents)
