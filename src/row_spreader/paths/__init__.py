"""Path model, discovery and combination modules."""

from row_spreader.paths.base import (
    ITERATOR,
    Iterator,
    Key,
    Path,
    PathElement,
    PathSet,
    drop_iterators,
    render_path,
    unique_paths,
)
from row_spreader.paths.combine import (
    CombineMode,
    combine_path_sets,
    get_combiner,
    intersect_or_non_empty,
    union,
)
from row_spreader.paths.discovery import discover_paths, is_non_empty

__all__ = [
    "ITERATOR",
    "Iterator",
    "Key",
    "Path",
    "PathElement",
    "PathSet",
    "drop_iterators",
    "render_path",
    "unique_paths",
    "CombineMode",
    "combine_path_sets",
    "get_combiner",
    "intersect_or_non_empty",
    "union",
    "discover_paths",
    "is_non_empty",
]
