"""Pytest configuration and shared fixtures for Sea Lantern settings tests."""

import logging
import pytest
from pathlib import Path
from typing import Generator

from sea_lantern.config.paths import SETTINGS_FILE_NAME
from sea_lantern.config.settings import SettingsStore


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Provide an application data directory for a test."""
    directory = tmp_path / "Sea Lantern"
    directory.mkdir()
    return directory


@pytest.fixture
def settings_file(data_dir: Path) -> Path:
    """Return the settings file path inside the test data directory."""
    return data_dir / SETTINGS_FILE_NAME


@pytest.fixture
def store(data_dir: Path) -> SettingsStore:
    """Create a SettingsStore backed by the test data directory."""
    return SettingsStore(data_dir=data_dir)


@pytest.fixture
def blocked_data_dir(tmp_path: Path) -> Path:
    """Return a data directory path that cannot be created (a file is in the way)."""
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    return blocker / "Sea Lantern"


@pytest.fixture
def clean_app_logger() -> Generator[None, None, None]:
    """Close and remove handlers added to the application logger."""
    yield
    logger = logging.getLogger("sea_lantern")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
