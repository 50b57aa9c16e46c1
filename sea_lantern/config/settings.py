"""Application settings management for Sea Lantern.

Provides the AppSettings dataclass and SettingsStore, the thread-safe holder
that keeps one settings value in memory and mirrors it to a JSON file in the
application data directory.
"""

import copy
import json
import logging
import math
import os
import shutil
import tempfile
import threading
import time
from dataclasses import dataclass, field, asdict, fields
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional, Tuple

from sea_lantern.config.exceptions import (
    SettingsError,
    SettingsSerializationError,
    SettingsWriteError,
)
from sea_lantern.config.paths import get_settings_path, resolve_data_directory

logger = logging.getLogger("sea_lantern.settings")


def _check_value(name: str, value: Any, default: Any) -> Any:
    """
    Check a loaded value against the type of its default.

    Args:
        name: Field name, used in the error message
        value: Value read from the settings file
        default: Default value of the field

    Returns:
        The value, with integers widened to float for float fields

    Raises:
        TypeError: If the value has the wrong type or is not a finite number
    """
    if isinstance(default, bool):
        valid = isinstance(value, bool)
    elif isinstance(default, int):
        valid = isinstance(value, int) and not isinstance(value, bool)
    elif isinstance(default, float):
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
        if valid:
            value = float(value)
            valid = math.isfinite(value)
    elif isinstance(default, list):
        valid = isinstance(value, list) and all(isinstance(v, str) for v in value)
    else:
        valid = isinstance(value, str)

    if not valid:
        raise TypeError(f"Setting '{name}' has invalid value {value!r}")
    return value


@dataclass
class AppSettings:
    """Application settings that persist between sessions."""

    # Server lifecycle
    close_servers_on_exit: bool = True
    auto_accept_eula: bool = True

    # New server defaults
    default_max_memory: int = 2048
    default_min_memory: int = 512
    default_port: int = 25565
    default_java_path: str = ""
    default_jvm_args: str = ""

    # Console
    console_font_size: int = 13
    max_log_lines: int = 5000

    # Java installations found by the last scan
    cached_java_list: List[str] = field(default_factory=list)

    # Appearance
    background_image: str = ""
    background_opacity: float = 0.3
    background_blur: int = 0
    background_brightness: float = 1.0
    theme: str = "auto"
    font_size: int = 14

    def clone(self) -> "AppSettings":
        """Return an independent deep copy of these settings."""
        return copy.deepcopy(self)

    def to_dict(self) -> dict:
        """Convert settings to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "AppSettings":
        """
        Create settings from dictionary, ignoring unknown keys.

        Missing keys keep their default values.

        Raises:
            TypeError: If a known key holds a value of the wrong type
        """
        defaults = cls()
        values = {}
        for f in fields(cls):
            if f.name in data:
                values[f.name] = _check_value(
                    f.name, data[f.name], getattr(defaults, f.name)
                )
        return cls(**values)

    def to_json(self) -> str:
        """
        Serialize settings to pretty-printed JSON.

        Raises:
            TypeError: If a field holds a value JSON cannot represent
            ValueError: If a float field is NaN or infinite
        """
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False, allow_nan=False)

    @classmethod
    def from_json(cls, text: str) -> "AppSettings":
        """
        Deserialize settings from JSON text.

        Raises:
            ValueError: If the text is not a JSON object or nests too deeply
            TypeError: If a known key holds a value of the wrong type
        """
        try:
            data = json.loads(text)
        except RecursionError as e:
            raise ValueError("settings JSON is nested too deeply") from e
        if not isinstance(data, dict):
            raise ValueError("settings root is not a JSON object")
        return cls.from_dict(data)


class LoadOutcome(Enum):
    """How SettingsStore obtained its initial value."""
    LOADED = "loaded"
    DEFAULTED_MISSING = "defaulted_missing"
    DEFAULTED_UNREADABLE = "defaulted_unreadable"
    DEFAULTED_CORRUPT = "defaulted_corrupt"

    @property
    def used_defaults(self) -> bool:
        """True if the store fell back to default settings."""
        return self is not LoadOutcome.LOADED


class SettingsStore:
    """
    Thread-safe owner of the application settings.

    The settings are loaded once on construction and never fail to load:
    a missing, unreadable or corrupted file yields default settings, and
    load_outcome records which case occurred.

    update() and reset() replace the whole value. The in-memory value is
    swapped before the file is written, so a failed write still leaves the
    new value visible to get(). Writes are serialized so the file always
    reflects the most recent replacement.
    """

    def __init__(self, data_dir: Optional[Path] = None):
        """
        Initialize the settings store.

        Args:
            data_dir: Optional data directory, defaults to platform standard
        """
        self._data_dir = data_dir if data_dir is not None else resolve_data_directory()
        self._settings_path = get_settings_path(self._data_dir)

        # Guards _settings only; held just long enough to swap or copy it
        self._lock = threading.Lock()
        # Held across swap and write so file order matches update order
        self._write_lock = threading.Lock()

        self._settings, self._load_outcome = self._load()
        logger.info(
            f"Settings {self._load_outcome.value} from {self._settings_path}"
        )

    @property
    def data_dir(self) -> Path:
        """Directory holding the settings file."""
        return self._data_dir

    @property
    def settings_path(self) -> Path:
        """Path to settings file."""
        return self._settings_path

    @property
    def load_outcome(self) -> LoadOutcome:
        """How the initial settings were obtained."""
        return self._load_outcome

    def get(self) -> AppSettings:
        """
        Get a copy of the current settings.

        Returns:
            AppSettings instance independent of the stored value
        """
        with self._lock:
            return self._settings.clone()

    def update(self, new_settings: AppSettings) -> None:
        """
        Replace the settings and persist them.

        Args:
            new_settings: Complete settings value to store

        Raises:
            SettingsSerializationError: If the settings cannot be serialized
            SettingsWriteError: If the settings file cannot be written
        """
        settings = new_settings.clone()
        with self._write_lock:
            with self._lock:
                self._settings = settings
            self._write(settings)
        logger.info(f"Settings saved to {self._settings_path}")

    def reset(self) -> AppSettings:
        """
        Reset to default settings and persist them.

        Returns:
            Default AppSettings instance

        Raises:
            SettingsSerializationError: If the settings cannot be serialized
            SettingsWriteError: If the settings file cannot be written
        """
        defaults = AppSettings()
        self.update(defaults)
        return defaults

    def _load(self) -> Tuple[AppSettings, LoadOutcome]:
        """Load settings from disk, falling back to defaults."""
        path = self._settings_path
        try:
            exists = path.exists()
        except OSError as e:
            logger.warning(f"Cannot access settings file {path}: {e}")
            return AppSettings(), LoadOutcome.DEFAULTED_UNREADABLE

        if not exists:
            settings = AppSettings()
            try:
                self._write(settings)
            except SettingsError as e:
                logger.warning(f"Could not save default settings: {e}")
            return settings, LoadOutcome.DEFAULTED_MISSING

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Cannot read settings file {path}: {e}")
            return AppSettings(), LoadOutcome.DEFAULTED_UNREADABLE

        try:
            return AppSettings.from_json(text), LoadOutcome.LOADED
        except (ValueError, TypeError) as e:
            logger.warning(f"Invalid settings file {path}, using defaults: {e}")
            self._backup_corrupt_file()
            return AppSettings(), LoadOutcome.DEFAULTED_CORRUPT

    def _backup_corrupt_file(self) -> None:
        """Copy a corrupted settings file aside before it gets overwritten."""
        path = self._settings_path
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        backup = path.with_name(f"{path.name}.bak.{timestamp}")
        try:
            # One backup per distinct corrupted content
            content = path.read_bytes()
            for existing in path.parent.glob(f"{path.name}.bak.*"):
                if existing.read_bytes() == content:
                    return
            shutil.copy2(path, backup)
            logger.info(f"Backed up corrupted settings to {backup}")
        except OSError as e:
            logger.warning(f"Could not back up corrupted settings: {e}")

    def _write(self, settings: AppSettings) -> None:
        """
        Atomically write settings to disk.

        The JSON is written to a temporary file in the same directory and
        renamed over the settings file, so the file always holds either the
        previous or the new complete content.
        """
        try:
            text = settings.to_json()
        except (TypeError, ValueError) as e:
            raise SettingsSerializationError(e) from e

        path = self._settings_path
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
            raise SettingsWriteError(path, e) from e
