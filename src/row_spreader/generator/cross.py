"""Cartesian join over groups of row fragments.

Empty groups are identities rather than annihilators: folding in a group
with no fragments leaves the running product unchanged, so optional fields
missing from a document drop out instead of suppressing every row.
"""

from typing import Any, Callable, Dict, Iterable, List, TypeVar

T = TypeVar("T")

Fragment = Dict[str, Any]


def cross_product(combine: Callable[[T, T], T], lhs: List[T], rhs: List[T]) -> List[T]:
    """Combine every element of ``lhs`` with every element of ``rhs``.

    Args:
        combine: Pairwise combination function
        lhs: Left operand, outer loop
        rhs: Right operand, inner loop

    Returns:
        ``rhs`` if ``lhs`` is empty, ``lhs`` if ``rhs`` is empty, otherwise
        ``combine(l, r)`` for each pair in row-major order
    """
    if not lhs:
        return rhs
    if not rhs:
        return lhs
    return [combine(left, right) for left in lhs for right in rhs]


def merge_fragments(lhs: Fragment, rhs: Fragment) -> Fragment:
    """Merge two fragments; ``rhs`` wins on key collision."""
    return {**lhs, **rhs}


def cross_fold(groups: Iterable[List[Fragment]]) -> List[Fragment]:
    """Fold groups of fragments into their Cartesian product.

    Args:
        groups: Fragment lists, in a fixed order

    Returns:
        One merged fragment per combination taking one fragment from each
        non-empty group
    """
    result: List[Fragment] = []
    for group in groups:
        result = cross_product(merge_fragments, result, group)
    return result
