"""
JSON serialization of edge descriptors for generators.

Produces the payload a template step reads: nested `ref`, storage-key lists, and
annotations resolved by name through `merge_annotations`.

Notes:
    - Annotation values are dumped with pydantic (`model_dump`) when they are
      models and `dataclasses.asdict` when they are dataclasses.
    - `dumps_descriptor` sorts keys, so equal declarations give equal strings.
"""

from __future__ import annotations

import dataclasses
import json
from typing import Any

from pydantic import BaseModel

from .annotation import merge_annotations
from .descriptor import Descriptor

__all__ = [
    "descriptor_to_dict",
    "dumps_descriptor",
]


def _annotation_value(ant: Any) -> Any:
    if isinstance(ant, BaseModel):
        return ant.model_dump(mode="json")
    if dataclasses.is_dataclass(ant) and not isinstance(ant, type):
        return dataclasses.asdict(ant)
    raise TypeError(f"annotation {type(ant).__name__} is not serializable to JSON")


def descriptor_to_dict(desc: Descriptor) -> dict[str, Any]:
    """
    Convert a descriptor into a JSON-compatible mapping.

    Args:
        desc (Descriptor): Finished descriptor.

    Returns:
        dict[str, Any]: Edge mapping; `ref` is nested the same way.

    Raises:
        TypeError: If an annotation is neither a pydantic model nor a dataclass.
    """
    out: dict[str, Any] = {
        "type": desc.type,
        "name": desc.name,
        "tag": desc.tag,
        "field": desc.field,
        "ref_name": desc.ref_name,
        "ref": descriptor_to_dict(desc.ref) if desc.ref is not None else None,
        "through": desc.through.model_dump() if desc.through is not None else None,
        "unique": desc.unique,
        "inverse": desc.inverse,
        "required": desc.required,
        "immutable": desc.immutable,
        "storage_key": None,
        "annotations": {
            name: _annotation_value(ant)
            for name, ant in merge_annotations(desc.annotations).items()
        },
        "comment": desc.comment,
    }
    if desc.storage_key is not None:
        key = desc.storage_key
        out["storage_key"] = {
            "table": key.table,
            "symbols": list(key.symbols),
            "columns": list(key.columns),
        }
    return out


def dumps_descriptor(desc: Descriptor) -> str:
    """Serialize a descriptor to compact JSON with sorted keys."""
    return json.dumps(
        descriptor_to_dict(desc), sort_keys=True, separators=(",", ":"), ensure_ascii=False
    )
