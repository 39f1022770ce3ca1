"""PySide6 host widget for the command palette."""

from .command_palette import CommandPalette

__all__ = ["CommandPalette"]
