"""
Configuration module initialization.
Exports configuration components for use throughout the application.
"""

from config.settings import Settings, settings, get_settings

__all__ = ["Settings", "settings", "get_settings"]
