"""
Configuration for edgeschema builders.

Defines EdgeSettings, a frozen dataclass carrying process-wide options that
affect how edge declarations are recorded.

Source of truth
- Defaults live on the dataclass; env and TOML only override them.
- Precedence: env (EDGESCHEMA_*) > TOML (edgeschema.toml or [tool.edgeschema]
  in pyproject.toml) > defaults.

Notes
- Unknown keys and unparsable values are ignored, falling back to the previous layer.
- Builders read settings through get_settings(), which caches the loaded value;
  call reset_settings() after changing env or TOML (tests do this).
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from functools import lru_cache
from pathlib import Path
from typing import Any

__all__ = [
    "EdgeSettings",
    "get_settings",
    "reset_settings",
]

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "t", "yes", "y", "on"}


def _bool(v: Any) -> bool:
    if isinstance(v, bool):
        return v
    if isinstance(v, (int, float)):
        return bool(v)
    if isinstance(v, str):
        return v.strip().lower() in _TRUTHY
    return False


@dataclass(frozen=True)
class EdgeSettings:
    """
    Runtime settings for edge builders.

    Attributes:
        qualified_type_names (bool): Record target types as ``module.QualName``
            instead of the bare class name.
        strict_names (bool): Reject empty or non-identifier edge, ref, and through
            names with EdgeNameError at declaration time. Off by default; the
            generator validates names otherwise.

    Examples:
        >>> from edgeschema.config import EdgeSettings
        >>> EdgeSettings(strict_names=True)  # doctest: +ELLIPSIS
        EdgeSettings(...)
    """

    qualified_type_names: bool = False
    strict_names: bool = False

    @classmethod
    def _apply_mapping(cls, base: EdgeSettings, cfg: dict[str, Any] | None) -> EdgeSettings:
        """Apply a loose config mapping onto EdgeSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base
        if "qualified_type_names" in cfg:
            s = replace(s, qualified_type_names=_bool(cfg["qualified_type_names"]))
        if "strict_names" in cfg:
            s = replace(s, strict_names=_bool(cfg["strict_names"]))
        return s

    @classmethod
    def from_env(cls, base: EdgeSettings | None = None, prefix: str = "EDGESCHEMA_") -> EdgeSettings:
        """
        Build EdgeSettings from environment variables. Precedence is env > base (if provided) > defaults.

        Recognized variables:
            - EDGESCHEMA_QUALIFIED_TYPE_NAMES (1/0/true/false/yes/no/on/off)
            - EDGESCHEMA_STRICT_NAMES
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("qualified_type_names", "strict_names"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> EdgeSettings:
        """
        Build EdgeSettings from a TOML file.

        Search order when `path` is None:
            1) ./edgeschema.toml (with either an [edge] table or top-level keys)
            2) ./pyproject.toml under [tool.edgeschema]

        Returns defaults if no file is present or none parses.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning("ignoring unreadable config %s: %s", p, exc)
                return None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "edgeschema.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("edgeschema") if isinstance(tool, dict) else None
            elif isinstance(data.get("edge"), dict):
                cfg = data["edge"]
            else:
                cfg = data
            if cfg:
                logger.debug("edgeschema settings loaded from %s", p)
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> EdgeSettings:
        """
        Load EdgeSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (edgeschema.toml, pyproject.toml).

        Returns:
            EdgeSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s


@lru_cache(maxsize=1)
def get_settings() -> EdgeSettings:
    """Return the process-wide settings, loading them on first use."""
    return EdgeSettings.load()


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them."""
    get_settings.cache_clear()
