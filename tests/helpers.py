"""Builders shared by the test modules."""

from __future__ import annotations

from mdbook_private.config import STYLE_CONTENT, STYLE_NOTICE
from mdbook_private.schemas import BookItem, Chapter


def styled(payload: str, notice: str = "CONFIDENTIAL") -> str:
    """Expected notice box for ``payload``, without the trailing line break."""
    return (
        f"<blockquote style='{STYLE_CONTENT}'>"
        f"<span style='{STYLE_NOTICE}'>{notice}</span>{payload}</blockquote>"
    )


def chapter(
    name: str,
    number: list[int] | None,
    source_path: str | None = None,
    sub_items: list[BookItem] | None = None,
    content: str | None = None,
) -> Chapter:
    """Build a chapter whose path mirrors its source file."""
    return Chapter(
        name=name,
        content=content if content is not None else f"# {name}",
        number=number,
        sub_items=sub_items or [],
        path=source_path,
        source_path=source_path,
    )


def names(items: list[BookItem]) -> list[str]:
    return [item.name for item in items if isinstance(item, Chapter)]
