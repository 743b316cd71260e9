"""Root pytest configuration for all tests."""

from __future__ import annotations

from pathlib import Path

import pytest

# Configure pytest-asyncio to use auto mode
# This is redundant with pyproject.toml but ensures it's set
pytest_plugins = ("pytest_asyncio",)


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the user config directory at a temporary location."""
    config_dir = tmp_path / "user-config"
    monkeypatch.setenv("POTENAD_CONFIG_DIR", str(config_dir))
    monkeypatch.delenv("POTENAD_LOG", raising=False)
    monkeypatch.delenv("POTENAD_LOG_LEVEL", raising=False)
    return config_dir


@pytest.fixture
def state_path(tmp_path: Path) -> Path:
    """A state file location whose parent directories do not exist yet."""
    return tmp_path / "config" / "potenad" / "config.toml"


@pytest.fixture
def document(tmp_path: Path) -> Path:
    """A small text document on disk."""
    path = tmp_path / "docs" / "hello.txt"
    path.parent.mkdir(parents=True)
    path.write_text("hello\nworld", encoding="utf-8")
    return path
