"""
Annotation and merge contracts for metadata attached to edges and schemas.

Two independent capabilities:
- Annotation: a value with a stable `name()` used by generators as lookup key.
- Merger: a value that can `merge(other)` with another of the same kind; the
  argument wins for the fields it sets.

Not every annotation is mergeable. `merge_annotations` folds a declaration-ordered
sequence into a name-keyed mapping, merging values of the same type where the
earlier one supports it and replacing otherwise.

Examples:
    >>> from edgeschema.core.annotation import EdgesAnnotation, merge_annotations
    >>> merged = merge_annotations([EdgesAnnotation('json:"a"'), EdgesAnnotation('json:"b"')])
    >>> merged["Edges"].struct_tag
    'json:"b"'
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "Annotation",
    "Merger",
    "EdgesAnnotation",
    "check_annotation",
    "merge_annotations",
]

logger = logging.getLogger(__name__)


@runtime_checkable
class Annotation(Protocol):
    """Metadata attached to schema objects, retrieved by generators under `name()`."""

    def name(self) -> str: ...


@runtime_checkable
class Merger(Protocol):
    """
    Merge support for annotations declared more than once.

    A common case is the same annotation type declared both on a mixin and on the
    schema itself; the later declaration is passed to `merge` and wins.
    """

    def merge(self, other: Any) -> Any: ...


@dataclass(frozen=True)
class EdgesAnnotation:
    """
    Built-in edge annotation.

    Attributes:
        struct_tag (str): Overrides the struct tag of the generated `Edges` field,
            e.g. ``json:"pet_edges"``.
    """

    struct_tag: str = ""

    def name(self) -> str:
        return "Edges"

    def merge(self, other: EdgesAnnotation) -> EdgesAnnotation:
        return EdgesAnnotation(struct_tag=other.struct_tag)


def check_annotation(ant: Any) -> str:
    """
    Return the lookup name of an annotation.

    Raises:
        TypeError: If `ant` does not provide `name()`.
    """
    if not isinstance(ant, Annotation):
        raise TypeError(f"annotation must provide name(), got {type(ant).__name__}")
    return ant.name()


def merge_annotations(annotations: Iterable[Any]) -> dict[str, Any]:
    """
    Fold annotations into a mapping keyed by annotation name.

    Args:
        annotations (Iterable[Any]): Annotation values in declaration order.

    Returns:
        dict[str, Any]: name -> resolved annotation, in first-seen order.

    Raises:
        TypeError: If a value does not provide `name()`.

    Notes:
        For duplicate names, `earlier.merge(later)` is used when both values have
        the same concrete type and the earlier one is a Merger; otherwise the
        later value replaces the earlier one.
    """
    merged: dict[str, Any] = {}
    for ant in annotations:
        key = check_annotation(ant)
        prev = merged.get(key)
        if type(prev) is type(ant) and isinstance(prev, Merger):
            logger.debug("merging annotation %s", key)
            ant = prev.merge(ant)
        merged[key] = ant
    return merged
