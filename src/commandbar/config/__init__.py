"""Configuration helpers for the command palette."""

from .settings import PaletteConfig, SettingsManager, cache_dir, config_dir, log_dir

__all__ = [
    "PaletteConfig",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "log_dir",
]
