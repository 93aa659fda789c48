"""Shared pytest fixtures for the full astra test suite."""

from __future__ import annotations

import pytest


_ASTRA_ENV_KEYS = (
    "ASTRA_TRIM",
    "ASTRA_TO_UPPER",
    "ASTRA_DROP_EMPTY",
    "ASTRA_DEDUPLICATE",
    "ASTRA_INPUT",
    "ASTRA_OUTPUT",
)


@pytest.fixture(autouse=True)
def _clear_astra_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host `ASTRA_*` variables from leaking into config resolution."""

    for key in _ASTRA_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
