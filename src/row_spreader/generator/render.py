"""Rendering of column names and row values."""

import json
from typing import Any, Iterable, List

from row_spreader.generator.cross import Fragment
from row_spreader.paths.base import Path, drop_iterators, render_path


def render_value(value: Any) -> str:
    """Render a raw JSON value as a field.

    Args:
        value: The raw JSON value

    Returns:
        ``true``/``false`` for booleans, the JSON number text for numbers,
        the string itself for strings, and an empty string for null, arrays
        and objects
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bool, int, float)):
        return json.dumps(value)
    return ""


def render_columns(header: Iterable[Path], flatten: bool = False) -> List[str]:
    """Render header paths as an ordered, duplicate-free column list.

    Args:
        header: Header paths in header order
        flatten: Strip ``Iterator`` steps before rendering; paths that differ
            only by iterators then share one column

    Returns:
        Column names in header order
    """
    names = (render_path(drop_iterators(path) if flatten else path) for path in header)
    return list(dict.fromkeys(names))


def project_row(fragment: Fragment, columns: List[str]) -> List[str]:
    """Lay a fragment out over the column list, blank where it has no entry."""
    return [render_value(fragment.get(column)) for column in columns]
