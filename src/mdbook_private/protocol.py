"""JSON protocol spoken between mdbook and a preprocessor.

mdbook writes ``[context, book]`` to the preprocessor's stdin and reads the
processed book back from stdout. Book items are externally tagged::

    {"Chapter": {...}}  |  "Separator"  |  {"PartTitle": "..."}
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from mdbook_private.config import SUPPORTED_MDBOOK_VERSION
from mdbook_private.exceptions import ProtocolError
from mdbook_private.schemas import Book, BookItem, Chapter, PartTitle, PreprocessorContext, Separator
from mdbook_private.utils.logging_config import get_logger

logger = get_logger(__name__)

# mdbook 0.4 names the top-level list ``sections``; 0.5 renamed it ``items``.
_ITEM_KEYS = ("sections", "items")

_CHAPTER_FIELDS = ("name", "content", "number", "sub_items", "path", "source_path", "parent_names")


def parse_input(raw: str | bytes) -> tuple[PreprocessorContext, Book]:
    """Decode mdbook's ``[context, book]`` payload.

    Raises:
        ProtocolError: If the payload is not valid JSON or has the wrong shape.
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ProtocolError(f"Preprocessor input is not valid JSON: {exc}") from exc

    if not isinstance(data, list) or len(data) != 2:
        raise ProtocolError("Preprocessor input must be a JSON array of [context, book]")

    raw_context, raw_book = data
    if not isinstance(raw_context, dict):
        raise ProtocolError("Preprocessor context must be a JSON object")
    try:
        context = PreprocessorContext.model_validate(raw_context)
    except ValidationError as exc:
        raise ProtocolError(f"Invalid preprocessor context: {exc}") from exc

    return context, book_from_json(raw_book)


def book_from_json(data: Any) -> Book:
    """Decode a book object into a :class:`Book`."""
    if not isinstance(data, dict):
        raise ProtocolError("Book must be a JSON object")

    items_key = next((key for key in _ITEM_KEYS if key in data), None)
    if items_key is None:
        raise ProtocolError(f"Book has none of the keys {', '.join(_ITEM_KEYS)}")
    raw_items = data[items_key]
    if not isinstance(raw_items, list):
        raise ProtocolError(f"Book '{items_key}' must be a list")

    envelope = {key: value for key, value in data.items() if key != items_key}
    return Book(
        sections=[item_from_json(item) for item in raw_items],
        items_key=items_key,
        envelope=envelope,
    )


def item_from_json(data: Any) -> BookItem:
    """Decode one externally tagged book item."""
    if data == "Separator":
        return Separator()
    if isinstance(data, dict) and len(data) == 1:
        tag, value = next(iter(data.items()))
        if tag == "Chapter":
            return _chapter_from_json(value)
        if tag == "PartTitle" and isinstance(value, str):
            return PartTitle(title=value)
        if tag == "Separator":
            return Separator()
    raise ProtocolError(f"Unrecognized book item: {data!r}")


def _chapter_from_json(data: Any) -> Chapter:
    if not isinstance(data, dict):
        raise ProtocolError(f"Chapter must be a JSON object, got {data!r}")
    raw_sub_items = data.get("sub_items") or []
    if not isinstance(raw_sub_items, list):
        raise ProtocolError(f"Chapter '{data.get('name')}' has non-list sub_items")
    fields = {key: value for key, value in data.items() if key in _CHAPTER_FIELDS}
    fields["sub_items"] = [item_from_json(item) for item in raw_sub_items]
    try:
        return Chapter.model_validate(fields)
    except ValidationError as exc:
        raise ProtocolError(f"Invalid chapter {data.get('name')!r}: {exc}") from exc


def book_to_json(book: Book) -> dict[str, Any]:
    """Encode a :class:`Book` in the shape it was received in."""
    data = dict(book.envelope)
    data[book.items_key] = [item_to_json(item) for item in book.sections]
    if book.items_key == "sections":
        data.setdefault("__non_exhaustive", None)
    return data


def item_to_json(item: BookItem) -> Any:
    if isinstance(item, Separator):
        return "Separator"
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return {
        "Chapter": {
            "name": item.name,
            "content": item.content,
            "number": item.number,
            "sub_items": [item_to_json(sub_item) for sub_item in item.sub_items],
            "path": item.path,
            "source_path": item.source_path,
            "parent_names": item.parent_names,
        }
    }


def dump_book(book: Book) -> str:
    """Serialize ``book`` for mdbook's stdin reader."""
    return json.dumps(book_to_json(book), ensure_ascii=False)


def check_mdbook_version(context: PreprocessorContext) -> bool:
    """Warn when mdbook's release line differs from the supported one.

    Returns:
        True if the major and minor versions match.
    """
    running = ".".join(context.mdbook_version.split(".")[:2])
    if running == SUPPORTED_MDBOOK_VERSION:
        return True
    logger.warning(
        "The private preprocessor targets mdbook %s.x but is being called from mdbook %s",
        SUPPORTED_MDBOOK_VERSION,
        context.mdbook_version or "<unknown>",
    )
    return False
