from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("COMMANDBAR_LOG_DIR", tempfile.mkdtemp(prefix="commandbar-logs-"))

import pytest  # noqa: E402
from PySide6.QtWidgets import QApplication  # noqa: E402

from commandbar.config import PaletteConfig  # noqa: E402
from commandbar.data import Catalog  # noqa: E402
from commandbar.search import WordTokenizer  # noqa: E402
from commandbar.services import PaletteController  # noqa: E402
from tests.factories import make_item  # noqa: E402


@pytest.fixture(scope="session")
def qt_app() -> Iterator[QApplication]:
    """Ensure a QApplication instance exists for UI tests."""

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def tokenizer() -> WordTokenizer:
    """Fresh tokenizer so cache assertions are not affected by other tests."""

    return WordTokenizer()


@pytest.fixture
def writing_catalog() -> Catalog:
    """Catalog mirroring a small writing-assistant command set."""

    return Catalog(
        [
            make_item("Fix Grammar"),
            make_item("Fix Spelling"),
            make_item("Emphasize"),
        ]
    )


@pytest.fixture
def controller(writing_catalog: Catalog, tokenizer: WordTokenizer) -> PaletteController:
    return PaletteController(writing_catalog, PaletteConfig(), tokenizer=tokenizer)
