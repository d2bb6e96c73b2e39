"""Path discovery for a single parsed JSON document.

Discovery walks a JSON value and collects every distinct path that leads to
non-empty scalar content or to an array of scalars. Empty containers and
nulls held by object fields are treated as absent content.
"""

from typing import Any, List, Optional

from row_spreader.paths.base import ITERATOR, Key, Path, PathElement, PathSet, unique_paths


def is_non_empty(value: Any) -> bool:
    """Check whether a JSON value carries content worth a column.

    Args:
        value: A parsed JSON value

    Returns:
        False for null, empty arrays and empty objects, True otherwise
    """
    if value is None:
        return False
    if isinstance(value, (list, dict)) and not value:
        return False
    return True


def discover_paths(value: Any, flat: bool = False) -> PathSet:
    """Discover the distinct paths of a JSON value.

    Paths are returned in first-discovered order: object fields in document
    order, array elements in index order.

    Args:
        value: A parsed JSON value
        flat: Do not prefix ``Iterator`` to paths found inside a top-level array

    Returns:
        Duplicate-free list of paths; empty for scalars and empty containers
    """
    return _compute_paths(value, flat) or []


def _prepend(prefix: PathElement, paths: PathSet) -> PathSet:
    # A step above a scalar is itself a complete path
    if not paths:
        return [(prefix,)]
    return [(prefix,) + path for path in paths]


def _compute_paths(value: Any, flat: bool) -> Optional[PathSet]:
    """Return the paths below ``value``, or None when it holds no content.

    Scalars yield an empty list (they end a path), while empty containers and
    containers made only of empty content yield None so the enclosing step is
    dropped as well.
    """
    if isinstance(value, list):
        found: List[Path] = []
        for element in value:
            element_paths = _compute_paths(element, flat)
            if element_paths is None:
                continue
            found.extend(element_paths if flat else _prepend(ITERATOR, element_paths))
        return unique_paths(found) or None

    if isinstance(value, dict):
        found = []
        for name, field_value in value.items():
            if not is_non_empty(field_value):
                continue
            field_paths = _compute_paths(field_value, False)
            if field_paths is None:
                continue
            found.extend(_prepend(Key(name=name), field_paths))
        return unique_paths(found) or None

    return []
