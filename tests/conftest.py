"""Shared fixtures for the colprint test suite."""

from __future__ import annotations

import pytest

_ENV_VARS = ("COLPRINT_SEP", "COLPRINT_WIDTH", "COLPRINT_PAD_LAST", "COLPRINT_PRETTY_WIDTH")


@pytest.fixture(autouse=True)
def _clean_colprint_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's COLPRINT_* variables out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
