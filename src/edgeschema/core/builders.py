"""
Fluent builders for association ("to") and inverse ("from") edges.

Responsibilities
- `to(name, target)` starts an association edge declared on the owning entity.
- `from_(name, target)` starts an inverse (back-reference) edge.
- `AssocBuilder.from_(name)` pairs an association with its inverse, embedding the
  association descriptor as the inverse descriptor's `ref`.

Every configuration call returns a new builder and leaves the receiver intact,
so a partially configured builder can be reused as a template without aliasing.

Examples
--------
>>> from edgeschema.core.builders import to
>>> class User: ...
>>> d = to("following", User).unique().from_("followers").descriptor()
>>> d.name, d.inverse, d.ref.name, d.ref.unique, d.unique
('followers', True, 'following', True, False)
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from ..config import EdgeSettings, get_settings
from .annotation import check_annotation
from .descriptor import Descriptor, DescriptorThrough
from .grammar import assert_edge_name
from .storage import StorageKey, StorageOption, apply_storage_options

__all__ = [
    "AssocBuilder",
    "InverseBuilder",
    "to",
    "from_",
    "type_name",
]

logger = logging.getLogger(__name__)

_B = TypeVar("_B", bound="_EdgeBuilder")


def type_name(target: type | str, qualified: bool = False) -> str:
    """
    Resolve the entity type name recorded for an edge target.

    Args:
      target (type | str): Schema class or dotted type name.
      qualified (bool): Keep the module path (``pkg.schema.User``) instead of the
        bare name (``User``).

    Returns:
      str: Type name.

    Raises:
      TypeError: If target is neither a class nor a string.

    Examples:
      >>> type_name("app.schema.User")
      'User'
      >>> type_name("app.schema.User", qualified=True)
      'app.schema.User'
    """
    if isinstance(target, str):
        return target if qualified else target.rsplit(".", 1)[-1]
    if isinstance(target, type):
        if qualified:
            return f"{target.__module__}.{target.__qualname__}"
        return target.__name__
    raise TypeError(f"edge target must be a class or type name, got {type(target).__name__}")


class _EdgeBuilder:
    """Configuration surface shared by association and inverse builders."""

    __slots__ = ("_desc", "_settings")

    def __init__(self, desc: Descriptor, settings: EdgeSettings) -> None:
        self._desc = desc
        self._settings = settings

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._desc.name!r} -> {self._desc.type!r})"

    def _with(self: _B, **changes: Any) -> _B:
        return type(self)(self._desc.evolve(**changes), self._settings)

    def _check_name(self, value: str, what: str) -> None:
        if self._settings.strict_names:
            assert_edge_name(value, what)

    def unique(self: _B) -> _B:
        """
        Mark this side unique.

        Limits the relation to O2O or O2M/M2O; O2O applies when the other side
        is unique as well.
        """
        return self._with(unique=True)

    def required(self: _B) -> _B:
        """Require the edge on creation. Unlike fields, edges are optional by default."""
        return self._with(required=True)

    def immutable(self: _B) -> _B:
        """Forbid updating the edge after creation."""
        return self._with(immutable=True)

    def struct_tag(self: _B, tag: str) -> _B:
        """Set the struct tag of the generated edge field; the last call wins."""
        return self._with(tag=tag)

    def field(self: _B, name: str) -> _B:
        """
        Bind the edge to a foreign-key field declared on the schema.

        Examples:
          >>> class User: ...
          >>> to("owner", User).field("owner_id").unique().descriptor().field
          'owner_id'
        """
        return self._with(field=name)

    def through(self: _B, name: str, target: type | str) -> _B:
        """
        Declare an explicit join entity ("edge schema") for an M2M edge.

        Examples:
          >>> to("friends", "User").through("friendships", "Friendship").descriptor().through.type
          'Friendship'
        """
        self._check_name(name, "through name")
        through = DescriptorThrough(
            name=name,
            type=type_name(target, self._settings.qualified_type_names),
        )
        return self._with(through=through)

    def comment(self: _B, text: str) -> _B:
        """Set the documentation comment of the edge; the last call wins."""
        return self._with(comment=text)

    def annotations(self: _B, *annotations: Any) -> _B:
        """
        Append annotations for generator extensions; earlier ones are kept.

        Raises:
          TypeError: If a value does not provide `name()`.
        """
        for ant in annotations:
            check_annotation(ant)
        return self._with(annotations=self._desc.annotations + annotations)

    def descriptor(self) -> Descriptor:
        """Return the finished, immutable descriptor."""
        logger.debug(
            "edge %s -> %s (inverse=%s, unique=%s)",
            self._desc.name,
            self._desc.type,
            self._desc.inverse,
            self._desc.unique,
        )
        return self._desc


class AssocBuilder(_EdgeBuilder):
    """Builder for association ("to") edges."""

    __slots__ = ()

    def storage_key(self, *options: StorageOption) -> AssocBuilder:
        """
        Apply storage-key options on top of the current key.

        Only fields touched by `options` change; repeated calls accumulate.

        Examples:
          >>> from edgeschema.core.storage import table, columns
          >>> key = (
          ...     to("groups", "Group")
          ...     .storage_key(table("user_groups"), columns("user_id", "group_id"))
          ...     .descriptor()
          ...     .storage_key
          ... )
          >>> key.table
          'user_groups'
        """
        key = apply_storage_options(self._desc.storage_key or StorageKey(), options)
        return self._with(storage_key=key)

    def from_(self, name: str) -> InverseBuilder:
        """
        Create the inverse edge of this association, on the same target type.

        The current association descriptor, as configured so far, becomes the
        inverse descriptor's `ref`.
        """
        self._check_name(name, "edge name")
        desc = Descriptor(type=self._desc.type, name=name, inverse=True, ref=self._desc)
        return InverseBuilder(desc, self._settings)


class InverseBuilder(_EdgeBuilder):
    """Builder for inverse ("from") edges."""

    __slots__ = ()

    def ref(self, name: str) -> InverseBuilder:
        """Name the association edge on the target type that this edge inverts."""
        self._check_name(name, "ref name")
        return self._with(ref_name=name)


def to(name: str, target: type | str, *, settings: EdgeSettings | None = None) -> AssocBuilder:
    """
    Start an association edge between two entity types.

    Args:
      name (str): Edge name on the owning entity.
      target (type | str): Target schema class or type name.
      settings (EdgeSettings | None): Overrides the process-wide settings.

    Returns:
      AssocBuilder: Builder with `inverse=False`.

    Raises:
      EdgeNameError: If strict naming is enabled and `name` is invalid.
    """
    s = settings or get_settings()
    if s.strict_names:
        assert_edge_name(name)
    desc = Descriptor(type=type_name(target, s.qualified_type_names), name=name)
    return AssocBuilder(desc, s)


def from_(name: str, target: type | str, *, settings: EdgeSettings | None = None) -> InverseBuilder:
    """
    Start an inverse edge with a back-reference to its source association.

    Use `InverseBuilder.ref` to name the association edge declared on `target`.

    Examples:
      >>> d = from_("owner", "User").ref("pets").unique().descriptor()
      >>> d.inverse, d.ref_name, d.ref is None
      (True, 'pets', True)
    """
    s = settings or get_settings()
    if s.strict_names:
        assert_edge_name(name)
    desc = Descriptor(type=type_name(target, s.qualified_type_names), name=name, inverse=True)
    return InverseBuilder(desc, s)
