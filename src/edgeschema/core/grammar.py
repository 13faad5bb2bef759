"""
Canonical edge grammar and naming helpers.

Defines the relation kinds derived from paired edge declarations and the zero-IO
naming helpers used when strict naming is enabled.

Responsibilities
- Define the Relation enum (serialized values are lower_snake).
- Provide name validation helpers for edge, ref, and through names.

Relation mapping
----------------
Cardinality is never stored on a descriptor; it is derived from the uniqueness
flags of both sides of a pair (see edgeschema.core.cardinality).

| forward.unique | inverse.unique | forward side | inverse side
|----------------|----------------|--------------|-------------
| False          | False          | m2m          | m2m
| True           | False          | o2m          | m2o
| False          | True           | m2o          | o2m
| True           | True           | o2o          | o2o

Examples
--------
>>> from edgeschema.core.grammar import Relation, is_edge_name
>>> Relation.M2M.value
'm2m'
>>> is_edge_name("owner_id")
True
>>> is_edge_name("")
False
"""

from __future__ import annotations

import keyword
from enum import Enum

from .errors import EdgeNameError

__all__ = [
    "Relation",
    "is_edge_name",
    "assert_edge_name",
]


class Relation(Enum):
    """
    Relational cardinality of one side of an edge pair.

    Notes:
      Consumers:
        * generators choosing between a foreign-key column and a join table
        * edgeschema.core.cardinality.relation_pair / relations
    """

    O2O = "o2o"
    O2M = "o2m"
    M2O = "m2o"
    M2M = "m2m"


def is_edge_name(value: str) -> bool:
    """
    Check whether a string is usable as an edge name.

    Args:
      value (str): Candidate name.

    Returns:
      bool: True for non-empty Python identifiers that are not keywords.

    Examples:
      >>> is_edge_name("followers")
      True
      >>> is_edge_name("class")
      False
    """
    return bool(value) and value.isidentifier() and not keyword.iskeyword(value)


def assert_edge_name(value: str, what: str = "edge name") -> None:
    """
    Validate that a string is usable as an edge name.

    Args:
      value (str): Candidate name.
      what (str): Human-friendly label used in the error message.

    Raises:
      EdgeNameError: If value is empty, not an identifier, or a keyword.
    """
    if not is_edge_name(value):
        raise EdgeNameError(f"{what} must be a non-empty identifier (got: {value!r})")
