"""Main application entry point for Sea Lantern settings.

Initializes logging and the settings store once, and exposes the settings
command handlers the UI layer dispatches to.
"""

import sys
from pathlib import Path
from typing import Optional, Tuple

from .config.exceptions import SettingsError
from .config.paths import get_log_file_path, resolve_data_directory
from .config.settings import AppSettings, SettingsStore
from .utils.logging import setup_logging, get_logger


class Application:
    """
    Main application controller.

    Owns the single SettingsStore for this application instance and passes
    it to the command handlers. Construct exactly one Application at startup.
    """

    def __init__(
        self,
        store: Optional[SettingsStore] = None,
        data_dir: Optional[Path] = None,
        log_to_file: bool = True
    ):
        """
        Initialize the application.

        Args:
            store: Optional pre-built settings store
            data_dir: Optional data directory, defaults to platform standard
            log_to_file: Whether to write logs to the data directory
        """
        if data_dir is None:
            data_dir = store.data_dir if store is not None else resolve_data_directory()

        # Set up logging first
        log_file = get_log_file_path(data_dir) if log_to_file else None
        setup_logging(log_file=log_file)
        self._logger = get_logger("sea_lantern.app")
        self._logger.info("Application starting")

        self._settings_store = store or SettingsStore(data_dir=data_dir)

        outcome = self._settings_store.load_outcome
        if outcome.used_defaults:
            self._logger.warning(f"Using default settings ({outcome.value})")

        self._logger.info("Application initialized")

    @property
    def settings_store(self) -> SettingsStore:
        """The application's settings store."""
        return self._settings_store

    # Settings command handlers

    def on_get_settings(self) -> dict:
        """Handle a request for the current settings."""
        return self._settings_store.get().to_dict()

    def on_save_settings(self, data: dict) -> Tuple[bool, Optional[str]]:
        """
        Handle a request to replace the settings.

        Args:
            data: Complete settings dictionary; missing keys take defaults

        Returns:
            Tuple of (success, error_message)
        """
        try:
            settings = AppSettings.from_dict(data)
        except TypeError as e:
            return False, f"Invalid settings: {e}"

        try:
            self._settings_store.update(settings)
        except SettingsError as e:
            self._logger.error(f"Settings update failed: {e}")
            return False, f"Settings could not be saved: {e}"
        return True, None

    def on_reset_settings(self) -> Tuple[bool, Optional[str], dict]:
        """
        Handle a request to restore default settings.

        Returns:
            Tuple of (success, error_message, current settings dictionary)
        """
        try:
            defaults = self._settings_store.reset()
        except SettingsError as e:
            self._logger.error(f"Settings reset failed: {e}")
            return False, f"Settings could not be saved: {e}", self.on_get_settings()
        return True, None, defaults.to_dict()


def main() -> int:
    """
    Application entry point.

    Returns:
        Exit code (0 for success)
    """
    try:
        app = Application()
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1

    print(app.settings_store.settings_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
