"""
Core exception types raised by edge descriptors, storage keys, and naming checks.

Provides typed exceptions for core-domain failures:
- SchemaError for malformed values (e.g., a storage key with more than two symbols).
- EdgeNameError for names rejected by strict naming (see edgeschema.config.EdgeSettings).

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Recording a declaration never raises; resolving the assembled relationship
      graph (dangling refs, contradictory through/unique combinations) is the
      generator's job.
    - Validators in edgeschema.core.storage raise SchemaError, which pydantic
      surfaces as ValidationError.

Examples:
    Catch a strict-naming failure.

    >>> from edgeschema.core.errors import EdgeNameError, SchemaError
    >>> issubclass(EdgeNameError, SchemaError)
    True
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "EdgeNameError",
]


class SchemaError(ValueError):
    """Schema-level validation failure (shape, constraints, cross-field rules)."""


class EdgeNameError(SchemaError):
    """Edge, ref, or through name rejected under strict naming."""
