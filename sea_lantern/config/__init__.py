"""Configuration module for Sea Lantern.

This module handles persistent application settings:
- SettingsStore: Thread-safe JSON settings persistence
- AppSettings: Settings dataclass
- Paths: Application data directory discovery
- Exceptions: Errors raised when settings cannot be saved
"""
