"""Shared schemas for mdbook-private."""

from mdbook_private.schemas.book import Book, BookItem, Chapter, PartTitle, Separator
from mdbook_private.schemas.context import PreprocessorContext
from mdbook_private.schemas.settings import PrivateSettings

__all__ = [
    "Book",
    "BookItem",
    "Chapter",
    "PartTitle",
    "PreprocessorContext",
    "PrivateSettings",
    "Separator",
]
