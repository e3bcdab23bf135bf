"""Pytest collection rules and shared fixtures for the unit tests."""

from __future__ import annotations

import pytest
from pathlib import Path

TEST_ENV_KEY = "ENVDEFAULT_TEST_VALUE"


def _is_collectable_test_module(path: Path) -> bool:
    if path.suffix != ".py" or path.name == "__init__.py":
        return False
    return "unit" in path.parts


def pytest_collect_file(file_path: Path, parent):
    """Collect non-prefixed test modules under tests/unit."""
    if not _is_collectable_test_module(file_path):
        return None
    return pytest.Module.from_parent(parent, path=file_path)


@pytest.fixture
def env_key(monkeypatch) -> str:
    """Name of an environment variable guaranteed unset at test start."""
    monkeypatch.delenv(TEST_ENV_KEY, raising=False)
    return TEST_ENV_KEY
