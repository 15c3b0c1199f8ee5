"""Pytest fixtures for chunkhash tests."""

import os
from pathlib import Path

import pytest
from typer.testing import CliRunner

from chunkhash.config.settings import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point settings at an empty home directory and a clean environment."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("CHUNKHASH_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield home
    get_settings.cache_clear()


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_file(tmp_path):
    """Factory writing bytes to a file under a temp directory."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()

    def _write(name: str, data: bytes) -> Path:
        path = data_dir / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def payload() -> bytes:
    """Deterministic 10,007-byte payload (not a multiple of common chunk sizes)."""
    return bytes((i * 31 + 7) % 256 for i in range(10_007))


@pytest.fixture
def secret() -> bytes:
    """Valid 136-byte secret."""
    return bytes(range(136))
