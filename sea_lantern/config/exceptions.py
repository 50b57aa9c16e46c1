"""Settings persistence exceptions for Sea Lantern.

Raised by SettingsStore.update() and SettingsStore.reset() when the new
settings could not be written to disk. Loading never raises; see LoadOutcome.
"""

from pathlib import Path


class SettingsError(Exception):
    """Base exception for all settings persistence errors."""

    def __init__(self, message: str, original_error: Exception = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error:
            return f"{self.message}: {self.original_error}"
        return self.message


class SettingsSerializationError(SettingsError):
    """Settings could not be converted to JSON."""

    def __init__(self, original_error: Exception = None):
        super().__init__("Failed to serialize settings", original_error)


class SettingsWriteError(SettingsError):
    """Serialized settings could not be written to the settings file."""

    def __init__(self, path: Path, original_error: Exception = None):
        self.path = path
        message = f"Failed to save settings to '{path}'"
        super().__init__(message, original_error)
