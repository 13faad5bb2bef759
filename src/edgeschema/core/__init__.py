"""
Core package for edge declarations (builders, descriptors, storage keys, annotations).

## Contracts (single source of truth)
- Builders: `to` / `from_` produce AssocBuilder / InverseBuilder.
- Descriptor: frozen record of one edge, consumed by generators.
- Storage: StorageKey plus tagged options (table, symbol(s), column(s)).
- Annotation: `name()` / `merge()` capability protocols and `merge_annotations`.
- Grammar/Cardinality: Relation enum and derivation from both sides' `unique`.
- Serde: JSON payloads of descriptors for template steps.

## Notes
- Zero-IO: stdlib + pydantic only.
- Recording a declaration fails only on malformed values (a target that is not a
  type, an annotation without `name()`); graph-level validation is the generator's.

## Examples
```python
from edgeschema.core import to, relations, table, columns

pair = (
    to("groups", "Group")
    .storage_key(table("user_groups"), columns("user_id", "group_id"))
    .from_("users")
    .descriptor()
)
pair.ref.storage_key.table  # 'user_groups'
relations(pair)  # (Relation.M2M, Relation.M2M)
```
"""

from __future__ import annotations

from .annotation import Annotation, EdgesAnnotation, Merger, merge_annotations
from .builders import AssocBuilder, InverseBuilder, from_, to, type_name
from .cardinality import relation_pair, relations
from .descriptor import Descriptor, DescriptorThrough
from .errors import EdgeNameError, SchemaError
from .grammar import Relation
from .serde import descriptor_to_dict, dumps_descriptor
from .storage import (
    SetColumns,
    SetSymbols,
    SetTable,
    StorageKey,
    StorageOption,
    column,
    columns,
    symbol,
    symbols,
    table,
)

__all__ = [
    "Annotation",
    "Merger",
    "EdgesAnnotation",
    "merge_annotations",
    "AssocBuilder",
    "InverseBuilder",
    "to",
    "from_",
    "type_name",
    "relation_pair",
    "relations",
    "Relation",
    "Descriptor",
    "DescriptorThrough",
    "SchemaError",
    "EdgeNameError",
    "descriptor_to_dict",
    "dumps_descriptor",
    "StorageKey",
    "StorageOption",
    "SetTable",
    "SetSymbols",
    "SetColumns",
    "table",
    "symbol",
    "symbols",
    "column",
    "columns",
]
