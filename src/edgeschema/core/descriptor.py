"""
Normalized edge descriptor handed to code generators.

A Descriptor records what one edge declaration says: target type, name, the
uniqueness flag of its own side, creation/update constraints, storage-key
overrides, and annotations. Descriptors are frozen; builders in
edgeschema.core.builders produce updated copies.

Notes:
    - `ref` is set only on inverse descriptors produced by `to(...).from_(...)`;
      it owns the paired association descriptor (never a back-reference).
    - `ref_name` is the textual link used when the inverse is declared on its
      own, resolved later by the generator.
    - Cardinality is not stored; see edgeschema.core.cardinality.

Examples:
    >>> from edgeschema.core.descriptor import Descriptor
    >>> d = Descriptor(type="User", name="friends")
    >>> d.inverse, d.unique, d.ref is None
    (False, False, True)
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from .storage import StorageKey

__all__ = [
    "Descriptor",
    "DescriptorThrough",
]


class DescriptorThrough(BaseModel):
    """
    Explicit join entity ("edge schema") of an M2M edge.

    Attributes:
        name (str): Edge name exposed for the join entity.
        type (str): Join entity type name.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    type: str


class Descriptor(BaseModel):
    """
    Descriptor of a single edge.

    Attributes:
        type (str): Target entity type name.
        name (str): Edge name, unique per owning entity.
        tag (str): Struct/serialization tag of the generated edge field.
        field (str): Bound foreign-key field on the owning entity.
        ref_name (str): Inverse only; name of the referenced association edge.
        ref (Descriptor | None): Paired association descriptor (to/from chain only).
        through (DescriptorThrough | None): Explicit join entity.
        unique (bool): Cardinality signal for this side.
        inverse (bool): True iff produced by an inverse builder.
        required (bool): Edge must be set on creation.
        immutable (bool): Edge cannot be updated after creation.
        storage_key (StorageKey | None): Storage naming overrides.
        annotations (tuple[Any, ...]): Annotations in declaration order.
        comment (str): Free-text documentation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = ""
    name: str = ""
    tag: str = ""
    field: str = ""
    ref_name: str = ""
    ref: Descriptor | None = None
    through: DescriptorThrough | None = None
    unique: bool = False
    inverse: bool = False
    required: bool = False
    immutable: bool = False
    storage_key: StorageKey | None = None
    annotations: tuple[Any, ...] = ()
    comment: str = ""

    def evolve(self, **changes: Any) -> Descriptor:
        """Return a copy with `changes` applied; the receiver is left untouched."""
        return self.model_copy(update=changes)
