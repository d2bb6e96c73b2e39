"""Newline-delimited JSON input and delimited text output."""

import csv
import json
import logging
import math
from pathlib import Path
from typing import Any, Iterable, Iterator, List, TextIO, Union

from row_spreader.errors import JsonLineError

logger = logging.getLogger(__name__)


def iter_documents(lines: Iterable[str], source: str = "<input>") -> Iterator[Any]:
    """Parse NDJSON lines into JSON values.

    Blank lines are skipped. Any other line that is not valid JSON aborts the
    iteration.

    Args:
        lines: Text lines, with or without trailing newlines
        source: Input name used in error messages

    Yields:
        One parsed JSON value per non-blank line

    Raises:
        JsonLineError: If a line cannot be parsed
    """
    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            yield json.loads(
                line, parse_constant=_reject_constant, parse_float=_parse_finite_float
            )
        except json.JSONDecodeError as e:
            raise JsonLineError(line_number, e.msg, source) from e
        except ValueError as e:
            raise JsonLineError(line_number, str(e), source) from e


def _reject_constant(token: str) -> Any:
    # json.loads accepts NaN, Infinity and -Infinity, which are not JSON
    raise ValueError(f"Invalid constant {token!r}")


def _parse_finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Number out of range {text!r}")
    return value


def read_documents(path: Union[str, Path]) -> Iterator[Any]:
    """Read and parse an NDJSON file.

    Args:
        path: Path to the input file

    Yields:
        One parsed JSON value per non-blank line

    Raises:
        JsonLineError: If a line cannot be parsed
        OSError: If the file cannot be opened
    """
    path = Path(path)
    logger.debug("Reading documents from %s", path)
    with path.open("r", encoding="utf-8") as handle:
        yield from iter_documents(handle, source=str(path))


def write_rows(
    handle: TextIO,
    columns: List[str],
    rows: Iterable[List[str]],
    separator: str = ";",
) -> int:
    """Write a header line followed by one line per row.

    Fields containing the separator, quotes or line breaks are quoted.

    Args:
        handle: Text stream to write to
        columns: Column names for the header line
        rows: Rendered rows, each laid out over ``columns``
        separator: Field separator

    Returns:
        Number of data rows written
    """
    writer = csv.writer(handle, delimiter=separator, lineterminator="\n")
    writer.writerow(columns)
    count = 0
    for row in rows:
        writer.writerow(row)
        count += 1
    return count
