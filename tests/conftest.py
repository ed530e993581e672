"""Pytest configuration and fixtures"""

import random
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def ledger_path(temp_dir: Path) -> Path:
    """Ledger location inside a not-yet-existing hidden data directory"""
    return temp_dir / ".data" / "data.json"


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source"""
    return random.Random(1234)


@pytest.fixture
def clean_env(monkeypatch):
    """Clear termsnake environment variables"""
    env_vars = [
        "TERMSNAKE_WIDTH",
        "TERMSNAKE_HEIGHT",
        "TERMSNAKE_SPEED",
        "TERMSNAKE_DATA_PATH",
    ]
    for var in env_vars:
        monkeypatch.delenv(var, raising=False)
    yield
