"""
Relation inference for paired edge declarations.

Cardinality is derived from the uniqueness flags of both sides; the table lives
in edgeschema.core.grammar. Generators resolving standalone inverses (`ref_name`)
look up the association themselves and call `relation_pair` with both flags.
"""

from __future__ import annotations

from .descriptor import Descriptor
from .errors import SchemaError
from .grammar import Relation

__all__ = [
    "relation_pair",
    "relations",
]

_PAIRS: dict[tuple[bool, bool], tuple[Relation, Relation]] = {
    (False, False): (Relation.M2M, Relation.M2M),
    (True, False): (Relation.O2M, Relation.M2O),
    (False, True): (Relation.M2O, Relation.O2M),
    (True, True): (Relation.O2O, Relation.O2O),
}


def relation_pair(forward_unique: bool, inverse_unique: bool) -> tuple[Relation, Relation]:
    """
    Derive the relation seen from each side of an edge pair.

    Args:
      forward_unique (bool): `unique` of the association ("to") edge.
      inverse_unique (bool): `unique` of the inverse ("from") edge.

    Returns:
      tuple[Relation, Relation]: (association side, inverse side).

    Examples:
      >>> relation_pair(True, False)
      (<Relation.O2M: 'o2m'>, <Relation.M2O: 'm2o'>)
    """
    return _PAIRS[(bool(forward_unique), bool(inverse_unique))]


def relations(desc: Descriptor) -> tuple[Relation, Relation]:
    """
    Derive relations for an inverse descriptor built by `to(...).from_(...)`.

    Raises:
      SchemaError: If `desc` is not an inverse descriptor carrying its `ref`.
    """
    if not desc.inverse or desc.ref is None:
        raise SchemaError(
            f"edge {desc.name!r} is not a paired inverse edge; resolve its ref first"
        )
    return relation_pair(desc.ref.unique, desc.unique)
