"""Whole-chapter filtering for private source files."""

from __future__ import annotations

from mdbook_private.config import DEFAULT_CHAPTER_PREFIX
from mdbook_private.schemas import BookItem, Chapter
from mdbook_private.utils.logging_config import get_logger

logger = get_logger(__name__)


def is_private_chapter(chapter: Chapter, prefix: str = DEFAULT_CHAPTER_PREFIX) -> bool:
    """Check whether a chapter's source file name starts with ``prefix``.

    Chapters without a source file (drafts, generated chapters) are never private.
    """
    filename = chapter.source_filename
    if not filename:
        return False
    return filename.startswith(prefix)


def filter_private_chapters(
    items: list[BookItem],
    *,
    prefix: str = DEFAULT_CHAPTER_PREFIX,
) -> list[BookItem]:
    """Drop private chapters together with everything nested below them.

    A private chapter's subtree is never inspected. Public chapters are
    rebuilt with their surviving children; separators and part titles pass
    through unchanged. The input items are not modified.
    """

    def _filter(nodes: list[BookItem]) -> list[BookItem]:
        result: list[BookItem] = []
        for node in nodes:
            if not isinstance(node, Chapter):
                result.append(node)
                continue
            if is_private_chapter(node, prefix):
                logger.debug("Removing private chapter '%s' (%s)", node.name, node.source_path)
                continue
            result.append(node.model_copy(update={"sub_items": _filter(node.sub_items)}))
        return result

    return _filter(list(items))
