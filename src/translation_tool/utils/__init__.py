"""Utility modules for settings persistence."""

from .settings import DEFAULT_SETTINGS, apply_environment, load_settings

__all__ = [
    "DEFAULT_SETTINGS",
    "apply_environment",
    "load_settings",
]
