"""Path constants and discovery for Sea Lantern.

Defines the per-user application data directory and the files kept in it.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

logger = logging.getLogger("sea_lantern.paths")


# Application directory names
APP_NAME = "Sea Lantern"
APP_NAME_LINUX = "sea-lantern"
HOME_FALLBACK_DIR = ".sea-lantern"

# Settings file kept directly inside the data directory
SETTINGS_FILE_NAME = "sea_lantern_settings.json"


def _home_dir() -> Optional[Path]:
    """
    Get the user's home directory.

    Returns:
        Home directory path, or None if it cannot be determined
    """
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    # An empty $HOME expands to the current directory
    if str(home) in ("", ".", "~"):
        return None
    return home


def _standard_data_dir() -> Optional[Path]:
    """
    Get the operating system's per-user application data location.

    Returns:
        Base data directory, or None if the platform does not provide one
    """
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else None

    home = _home_dir()
    if sys.platform == "darwin":
        if home is None:
            return None
        return home / "Library" / "Application Support"

    xdg_data_home = os.environ.get("XDG_DATA_HOME")
    if xdg_data_home and os.path.isabs(xdg_data_home):
        return Path(xdg_data_home)
    if home is None:
        return None
    return home / ".local" / "share"


def get_app_data_dir() -> Path:
    """
    Compute the application data directory without creating it.

    Returns:
        Path to the app data directory

    Platform-specific locations, first available wins:
        - Windows: %APPDATA%/Sea Lantern, then ~/.sea-lantern
        - macOS: ~/Library/Application Support/Sea Lantern
        - Linux: $XDG_DATA_HOME/sea-lantern or ~/.local/share/sea-lantern,
          then ~/.sea-lantern
        - Anywhere: the current directory when no home directory is known
    """
    base = _standard_data_dir()
    if base is not None:
        if sys.platform in ("win32", "darwin"):
            return base / APP_NAME
        return base / APP_NAME_LINUX

    home = _home_dir()
    if home is not None:
        if sys.platform == "darwin":
            return home / "Library" / "Application Support" / APP_NAME
        return home / HOME_FALLBACK_DIR

    return Path(".")


def resolve_data_directory() -> Path:
    """
    Get the application data directory, creating it if needed.

    Creation failures are logged and otherwise ignored, so the returned
    directory may not exist. Callers must handle later I/O errors.

    Returns:
        Path to app data directory
    """
    data_dir = get_app_data_dir()
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create data directory {data_dir}: {e}")
    return data_dir


def get_settings_path(data_dir: Optional[Path] = None) -> Path:
    """
    Get the path to the settings JSON file.

    Args:
        data_dir: Data directory, defaults to the resolved app data directory

    Returns:
        Path to sea_lantern_settings.json
    """
    return (data_dir or resolve_data_directory()) / SETTINGS_FILE_NAME


def get_log_dir(data_dir: Optional[Path] = None) -> Path:
    """
    Get the directory for log files.

    Args:
        data_dir: Data directory, defaults to the resolved app data directory

    Returns:
        Path to logs directory (created if possible)
    """
    log_dir = (data_dir or resolve_data_directory()) / "logs"
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning(f"Could not create log directory {log_dir}: {e}")
    return log_dir


def get_log_file_path(data_dir: Optional[Path] = None) -> Path:
    """
    Get the path to the main log file.

    Returns:
        Path to application log file
    """
    return get_log_dir(data_dir) / "app.log"
