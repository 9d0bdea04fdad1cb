"""
Pytest fixtures and configuration for the test suite.

Every test runs against the built-in config defaults: TIDBITS_* variables are
removed, the working directory is a temp dir (so no config/tidbits.yaml is
picked up) and the shared config cache is rebuilt around each test.
"""

import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add project root to path so tests can import the tidbits package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from tidbits import config  # noqa: E402
from tidbits.services.config_svc import ConfigService  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run each test with default configuration and no env/YAML overrides."""
    for key in list(os.environ):
        if key.startswith("TIDBITS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    config.reload()
    yield
    monkeypatch.undo()
    config.reload()


@pytest.fixture
def config_service(tmp_path: Path) -> ConfigService:
    """Fresh ConfigService rooted at an empty temp dir."""
    return ConfigService(search_dir=str(tmp_path))


@pytest.fixture
def write_config(tmp_path: Path):
    """Write tmp_path/config/tidbits.yaml with the given text."""

    def _write(text: str) -> Path:
        path = tmp_path / "config" / "tidbits.yaml"
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
