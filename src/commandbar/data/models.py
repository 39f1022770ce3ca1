from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable
from uuid import UUID, uuid4


ItemAction = Callable[[], object]


def _noop() -> None:
    return None


@dataclass(slots=True, frozen=True)
class PaletteItem:
    """Searchable, activatable palette entry.

    Identity is carried by ``id`` alone: two items with the same id compare
    equal regardless of their text, which is what selection tracking relies on.
    ``image`` and ``badge`` are opaque to the core and never searched.
    """

    title: str = field(compare=False)
    subtitle: str | None = field(default=None, compare=False)
    image: str | None = field(default=None, compare=False)
    badge: str | None = field(default=None, compare=False)
    action: ItemAction = field(default=_noop, compare=False, repr=False)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not isinstance(self.title, str):
            raise TypeError(f"PaletteItem title must be str, not {type(self.title).__name__}")
        if self.subtitle is not None and not isinstance(self.subtitle, str):
            raise TypeError(
                f"PaletteItem subtitle must be str or None, not {type(self.subtitle).__name__}"
            )
        if not callable(self.action):
            raise TypeError("PaletteItem action must be callable")

    def search_text(self, *, include_subtitle: bool = False) -> str:
        if include_subtitle and self.subtitle:
            return f"{self.title} {self.subtitle}"
        return self.title


__all__ = ["ItemAction", "PaletteItem"]
