"""Section renumbering after chapters have been removed."""

from __future__ import annotations

from mdbook_private.exceptions import BookStructureError
from mdbook_private.schemas import BookItem, Chapter
from mdbook_private.utils.logging_config import get_logger

logger = get_logger(__name__)


def renumber_chapters(items: list[BookItem]) -> list[BookItem]:
    """Reassign dense section numbers to every numbered chapter.

    Within each sibling group the numbered chapters become ``1..k`` in order;
    unnumbered chapters keep ``None`` and do not use up a number. The number
    of a chapter is its parent's number extended by its own position, so the
    length always equals the nesting depth.

    Raises:
        BookStructureError: If an input number's length disagrees with the
            chapter's depth. Such a tree cannot be renumbered faithfully.
    """
    return _renumber(items, [])


def _renumber(items: list[BookItem], path: list[int]) -> list[BookItem]:
    result: list[BookItem] = []
    counter = 1
    for item in items:
        if not isinstance(item, Chapter):
            result.append(item)
            continue
        if not item.is_numbered:
            result.append(item.model_copy(update={"sub_items": _renumber(item.sub_items, path)}))
            continue

        expected_depth = len(path) + 1
        if len(item.number) != expected_depth:
            raise BookStructureError(
                f"Chapter '{item.name}' has number {item.format_number()} "
                f"but sits at depth {expected_depth}"
            )

        path.append(counter)
        number = list(path)
        if number != item.number:
            logger.debug("Renumbering '%s' from %s to %s", item.name, item.number, number)
        sub_items = _renumber(item.sub_items, path)
        path.pop()
        counter += 1
        result.append(item.model_copy(update={"number": number, "sub_items": sub_items}))
    return result
