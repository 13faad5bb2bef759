from __future__ import annotations

import pytest

from edgeschema.config import reset_settings

_ENV_KEYS = ["EDGESCHEMA_QUALIFIED_TYPE_NAMES", "EDGESCHEMA_STRICT_NAMES"]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch):
    # Builders cache settings process-wide; start every test from defaults.
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    yield
    reset_settings()
