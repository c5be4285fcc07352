"""
Application services for the insulin dose calculator.
"""

from .settings_store import SettingsStore

__all__ = ["SettingsStore"]
