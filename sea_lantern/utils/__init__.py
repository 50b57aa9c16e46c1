"""Utility module for Sea Lantern.

This module provides cross-cutting utilities:
- Logging: Configured logging with home directory redaction
"""
