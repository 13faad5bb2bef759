"""
Storage-key overrides for relational backends.

A StorageKey carries the table, foreign-key column, and constraint-symbol names
an edge should use instead of the generator defaults. Keys are configured by a
sequence of storage options folded left over an accumulator; each option
overwrites only the field it targets.

Notes:
    - Options are tagged frozen values (SetTable, SetSymbols, SetColumns) rather
      than closures, so a configured edge can be inspected and compared.
    - symbols/columns are ordered [to-side, from-side]. Single-element lists are
      used for O2O, O2M and M2O edges; two-element lists for M2M join tables.

Examples:
    >>> from edgeschema.core.storage import StorageKey, apply_storage_options, table, columns
    >>> key = apply_storage_options(StorageKey(), [table("user_groups"), columns("user_id", "group_id")])
    >>> key.table, key.columns
    ('user_groups', ('user_id', 'group_id'))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import SchemaError

__all__ = [
    "StorageKey",
    "SetTable",
    "SetSymbols",
    "SetColumns",
    "StorageOption",
    "table",
    "symbol",
    "symbols",
    "column",
    "columns",
    "apply_storage_options",
]

logger = logging.getLogger(__name__)

# [to-side, from-side]
_MAX_NAMES = 2


class StorageKey(BaseModel):
    """
    Storage-key configuration of an edge.

    Attributes:
        table (str): Join table (M2M) or label name; empty means generator default.
        symbols (tuple[str, ...]): Names of the foreign-key constraints.
        columns (tuple[str, ...]): Foreign-key column names.

    Raises:
        pydantic.ValidationError: If symbols or columns hold more than two names.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    table: str = ""
    symbols: tuple[str, ...] = ()
    columns: tuple[str, ...] = ()

    @field_validator("symbols", "columns")
    @classmethod
    def _check_pair(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if len(v) > _MAX_NAMES:
            raise SchemaError(
                f"storage key accepts at most {_MAX_NAMES} names ([to, from]), got {len(v)}"
            )
        return v


@dataclass(frozen=True, slots=True)
class SetTable:
    """Set the table name option (M2M join table)."""

    name: str

    def apply(self, key: StorageKey) -> StorageKey:
        return StorageKey(table=self.name, symbols=key.symbols, columns=key.columns)


@dataclass(frozen=True, slots=True)
class SetSymbols:
    """Replace the foreign-key constraint symbols."""

    names: tuple[str, ...]

    def apply(self, key: StorageKey) -> StorageKey:
        return StorageKey(table=key.table, symbols=self.names, columns=key.columns)


@dataclass(frozen=True, slots=True)
class SetColumns:
    """Replace the foreign-key column names."""

    names: tuple[str, ...]

    def apply(self, key: StorageKey) -> StorageKey:
        return StorageKey(table=key.table, symbols=key.symbols, columns=self.names)


StorageOption = SetTable | SetSymbols | SetColumns


def table(name: str) -> SetTable:
    """Set the table name for M2M edges."""
    return SetTable(name)


def symbol(name: str) -> SetSymbols:
    """
    Set the symbol of the foreign-key constraint for O2O, O2M and M2O edges.

    For M2M edges (two columns and two constraints), use `symbols`.
    """
    return SetSymbols((name,))


def symbols(to: str, from_: str) -> SetSymbols:
    """
    Set the symbols of the foreign-key constraints for M2M edges.

    Args:
        to (str): Constraint name of the "to" (association) side.
        from_ (str): Constraint name of the "from" (inverse) side.

    Notes:
        For O2O, O2M and M2O edges, use `symbol`.
    """
    return SetSymbols((to, from_))


def column(name: str) -> SetColumns:
    """
    Set the foreign-key column name for O2O, O2M and M2O edges.

    For M2M edges (two columns), use `columns`.
    """
    return SetColumns((name,))


def columns(to: str, from_: str) -> SetColumns:
    """
    Set the foreign-key column names for M2M edges.

    Args:
        to (str): Column of the "to" (association) side.
        from_ (str): Column of the "from" (inverse) side.

    Examples:
        >>> columns("user_id", "group_id").names
        ('user_id', 'group_id')
    """
    return SetColumns((to, from_))


def apply_storage_options(key: StorageKey, options: Iterable[StorageOption]) -> StorageKey:
    """
    Fold storage options over a key, in order.

    Args:
        key (StorageKey): Starting accumulator (an empty key or an edge's current key).
        options (Iterable[StorageOption]): Options to apply; later options win for
            the field they target.

    Returns:
        StorageKey: New key; the input key is not modified.

    Raises:
        pydantic.ValidationError: If an option carries more than two names.
    """
    for option in options:
        key = option.apply(key)
    logger.debug("storage key resolved: %r", key)
    return key
