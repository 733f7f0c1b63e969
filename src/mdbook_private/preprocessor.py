"""The ``private`` preprocessor: inline block handling and chapter removal."""

from __future__ import annotations

import re

from mdbook_private.blocks import PRIVATE_BLOCK_RE, process_blocks
from mdbook_private.chapters import filter_private_chapters
from mdbook_private.config import PREPROCESSOR_NAME, UNSUPPORTED_RENDERER
from mdbook_private.numbering import renumber_chapters
from mdbook_private.schemas import Book, BookItem, Chapter, PreprocessorContext, PrivateSettings
from mdbook_private.utils.logging_config import get_logger

logger = get_logger(__name__)


class PrivatePreprocessor:
    """mdbook preprocessor that marks or strips confidential content.

    In the default mode every ``<!-- private ... -->`` block is kept and
    wrapped in a notice box (or unwrapped when styling is off). In remove
    mode the blocks are deleted, chapters whose source file starts with the
    configured prefix are dropped with their descendants, and the remaining
    chapters are renumbered.
    """

    name = PREPROCESSOR_NAME

    def __init__(self, pattern: re.Pattern[str] = PRIVATE_BLOCK_RE) -> None:
        self.pattern = pattern

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        """Resolve settings from the build context and transform ``book``.

        Raises:
            ConfigurationError: If ``[preprocessor.private]`` is malformed.
                Nothing is transformed in that case.
            BookStructureError: If renumbering finds an inconsistent tree.
        """
        logger.info("Running mdbook-private preprocessor")
        settings = PrivateSettings.from_table(ctx.preprocessor_config(self.name))
        return self.transform(book, settings)

    def transform(self, book: Book, settings: PrivateSettings) -> Book:
        """Return a new book with ``settings`` applied; ``book`` is left as is."""
        sections = self._process_content(book.sections, settings)
        if settings.remove:
            sections = filter_private_chapters(sections, prefix=settings.chapter_prefix)
            sections = renumber_chapters(sections)
        return book.model_copy(update={"sections": sections})

    def supports_renderer(self, renderer: str) -> bool:
        return renderer != UNSUPPORTED_RENDERER

    def _process_content(self, items: list[BookItem], settings: PrivateSettings) -> list[BookItem]:
        result: list[BookItem] = []
        for item in items:
            if not isinstance(item, Chapter):
                result.append(item)
                continue
            logger.info("Processing chapter '%s'", item.name)
            result.append(
                item.model_copy(
                    update={
                        "content": process_blocks(item.content, settings, self.pattern),
                        "sub_items": self._process_content(item.sub_items, settings),
                    }
                )
            )
        return result
