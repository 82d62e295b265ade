"""Integration with pydantic_settings."""

from .settings_loader import SettingsAttributeLoader

__all__ = ("SettingsAttributeLoader",)
