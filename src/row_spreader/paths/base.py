"""Path model for addressing locations inside a JSON value.

A path is a tuple of path elements, root to leaf. ``Key`` descends into an
object field and ``Iterator`` descends into every element of an array.
Elements are frozen pydantic models, so paths are hashable and compare
structurally.
"""

from typing import Iterable, List, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

ITERATOR_TOKEN = "$"


class Key(BaseModel):
    """Descend into the object field called ``name``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="The object field name")

    def render(self) -> str:
        return self.name


class Iterator(BaseModel):
    """Descend into every element of an array."""

    model_config = ConfigDict(frozen=True)

    def render(self) -> str:
        return ITERATOR_TOKEN


PathElement = Union[Key, Iterator]
Path = Tuple[PathElement, ...]

# Ordered, duplicate-free list of paths (first-discovered order)
PathSet = List[Path]

ITERATOR = Iterator()


def render_path(path: Iterable[PathElement]) -> str:
    """Render a path as a column name.

    Args:
        path: The path elements, root to leaf

    Returns:
        The elements joined by ``.``, with iterators rendered as ``$``
    """
    return ".".join(element.render() for element in path)


def drop_iterators(path: Iterable[PathElement]) -> Path:
    """Return the path with every ``Iterator`` step removed."""
    return tuple(element for element in path if isinstance(element, Key))


def unique_paths(paths: Iterable[Path]) -> PathSet:
    """Deduplicate paths, keeping the first occurrence of each."""
    return list(dict.fromkeys(paths))
