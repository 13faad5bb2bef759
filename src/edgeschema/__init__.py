"""
edgeschema — declarative edge descriptors for schema code generation.

## Public API
- to / from_ — start association and inverse edge builders.
- Descriptor, StorageKey — frozen records handed to generators.
- EdgeSettings — process-wide options (env > TOML > defaults).

## Import DAG discipline
- edgeschema.config depends only on the stdlib.
- edgeschema.core depends on stdlib, pydantic, and edgeschema.config.
"""

from __future__ import annotations

from .config import EdgeSettings, get_settings, reset_settings
from .core import Descriptor, StorageKey, from_, to

__all__ = [
    "EdgeSettings",
    "get_settings",
    "reset_settings",
    "Descriptor",
    "StorageKey",
    "to",
    "from_",
]
