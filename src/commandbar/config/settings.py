from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from dotenv import load_dotenv, set_key
from platformdirs import user_cache_dir, user_config_dir

if TYPE_CHECKING:
    from commandbar.data.catalog import SuggestionProvider
    from commandbar.data.models import PaletteItem

APP_NAME = "CommandBar"
ENV_PREFIX = "COMMANDBAR_"
ENV_FILE_NAME = "settings.env"

DEFAULT_MAX_ITEMS_SHOWN = 6
DEFAULT_PLACEHOLDER_TEXT = "Search"

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


def _config_dir() -> Path:
    path = Path(user_config_dir(APP_NAME, roaming=True))
    path.mkdir(parents=True, exist_ok=True)
    return path


def _cache_dir() -> Path:
    path = Path(user_cache_dir(APP_NAME))
    path.mkdir(parents=True, exist_ok=True)
    return path


def config_dir() -> Path:
    return _config_dir()


def cache_dir() -> Path:
    return _cache_dir()


def log_dir() -> Path:
    override = os.getenv(f"{ENV_PREFIX}LOG_DIR")
    path = Path(override).expanduser() if override else cache_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


def _env_file_path(explicit: Path | None) -> Path:
    if explicit is not None:
        return explicit
    return _config_dir() / ENV_FILE_NAME


@dataclass(slots=True)
class PaletteConfig:
    """Options recognised by the palette core.

    ``max_items_shown`` and ``placeholder_text`` are display hints for the host;
    they never influence which items are visible.
    """

    max_items_shown: int = DEFAULT_MAX_ITEMS_SHOWN
    default_items: list[PaletteItem] = field(default_factory=list)
    additional_items_for_search: SuggestionProvider | None = None
    placeholder_text: str = DEFAULT_PLACEHOLDER_TEXT
    search_subtitles: bool = False


class SettingsManager:
    """Load and persist palette settings with environment overrides."""

    def __init__(self, env_file: Path | None = None) -> None:
        self._env_file = _env_file_path(env_file)

    @property
    def env_file(self) -> Path:
        return self._env_file

    def load(self) -> PaletteConfig:
        """Build a config from the environment, falling back to the env file."""
        load_dotenv(self._env_file, override=False)

        config = PaletteConfig()

        max_items = self._get_int("MAX_ITEMS_SHOWN")
        if max_items is not None:
            config.max_items_shown = max_items

        placeholder = self._get_env("PLACEHOLDER_TEXT")
        if placeholder:
            config.placeholder_text = placeholder

        search_subtitles = self._get_bool("SEARCH_SUBTITLES")
        if search_subtitles is not None:
            config.search_subtitles = search_subtitles

        return config

    def save(self, config: PaletteConfig) -> None:
        """Persist the scalar fields; callables and item lists stay in code.

        Values are always quoted so that spaces, ``#`` and quotes survive a
        later ``load``.
        """
        self._env_file.parent.mkdir(parents=True, exist_ok=True)
        self._env_file.touch(exist_ok=True)
        values = {
            "MAX_ITEMS_SHOWN": str(config.max_items_shown),
            "PLACEHOLDER_TEXT": config.placeholder_text,
            "SEARCH_SUBTITLES": "true" if config.search_subtitles else "false",
        }
        for name, value in values.items():
            set_key(self._env_file, f"{ENV_PREFIX}{name}", value, quote_mode="always")

    def _get_env(self, name: str) -> str | None:
        return os.getenv(f"{ENV_PREFIX}{name}") or None

    def _get_int(self, name: str) -> int | None:
        raw = self._get_env(name)
        if raw is None:
            return None
        try:
            value = int(raw.strip())
        except ValueError:
            _warn_invalid(name, raw)
            return None
        if value < 1:
            _warn_invalid(name, raw)
            return None
        return value

    def _get_bool(self, name: str) -> bool | None:
        raw = self._get_env(name)
        if raw is None:
            return None
        lowered = raw.strip().lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
        _warn_invalid(name, raw)
        return None


def _warn_invalid(name: str, raw: str) -> None:
    # Imported lazily: logging resolves its directory through this module.
    from commandbar.utils.logging import get_logger

    get_logger(__name__).warning(
        "Ignoring invalid palette setting", setting=f"{ENV_PREFIX}{name}", value=raw
    )


__all__ = [
    "PaletteConfig",
    "SettingsManager",
    "cache_dir",
    "config_dir",
    "log_dir",
]
