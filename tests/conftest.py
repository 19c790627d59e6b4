from __future__ import annotations

from collections.abc import Iterator

import pytest

from anyver.config import get_settings

_ENV_KEYS = ("ANYVER_ERRATA_STRICT", "ANYVER_LOG_LEVEL", "ANYVER_LOG_JSON")


@pytest.fixture(autouse=True)
def _reset_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # Ensure isolation across tests: no leaked env overrides, no cached Settings
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
