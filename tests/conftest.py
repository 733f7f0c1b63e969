"""Test setup for mdbook-private."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def context_json() -> dict:
    """A build context as mdbook 0.4 sends it, with an empty private table."""
    return {
        "root": "/path/to/book",
        "config": {
            "book": {
                "authors": ["AUTHOR"],
                "language": "en",
                "multilingual": False,
                "src": "src",
                "title": "TITLE",
            },
            "preprocessor": {"private": {}},
        },
        "renderer": "html",
        "mdbook_version": "0.4.21",
    }
