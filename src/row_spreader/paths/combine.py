"""Policies for combining per-document path sets into one header."""

from enum import Enum
from typing import Callable, Iterable

from row_spreader.paths.base import PathSet, unique_paths

PathSetCombine = Callable[[PathSet, PathSet], PathSet]


class CombineMode(str, Enum):
    """How per-document path sets are merged into the header."""

    UNION = "union"
    INTERSECT = "intersect"


def union(lhs: PathSet, rhs: PathSet) -> PathSet:
    """Return every path found in either operand, ``lhs`` order first."""
    return unique_paths([*lhs, *rhs])


def intersect_or_non_empty(lhs: PathSet, rhs: PathSet) -> PathSet:
    """Intersect two path sets, passing the other operand through when one is empty.

    The pass-through lets the first document seed the header from the empty
    accumulator, and keeps a document with no paths at all from erasing the
    header accumulated so far.

    Args:
        lhs: Accumulated header paths
        rhs: Paths of the next document

    Returns:
        ``rhs`` if ``lhs`` is empty, ``lhs`` if ``rhs`` is empty, otherwise the
        paths of ``lhs`` that also occur in ``rhs``
    """
    if not lhs:
        return list(rhs)
    if not rhs:
        return list(lhs)
    present = set(rhs)
    return [path for path in lhs if path in present]


COMBINERS = {
    CombineMode.UNION: union,
    CombineMode.INTERSECT: intersect_or_non_empty,
}


def get_combiner(mode: CombineMode) -> PathSetCombine:
    """Look up the combine function for a mode."""
    return COMBINERS[CombineMode(mode)]


def combine_path_sets(path_sets: Iterable[PathSet], mode: CombineMode = CombineMode.UNION) -> PathSet:
    """Fold path sets left to right, starting from the empty set.

    Args:
        path_sets: Per-document path sets in input order
        mode: Combine policy

    Returns:
        The combined header paths
    """
    combine = get_combiner(mode)
    header: PathSet = []
    for paths in path_sets:
        header = combine(header, paths)
    return header
