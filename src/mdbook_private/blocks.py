"""Private block extraction within chapter Markdown."""

from __future__ import annotations

import re
from dataclasses import dataclass

from mdbook_private.config import STYLE_CONTENT, STYLE_NOTICE
from mdbook_private.schemas import PrivateSettings

# ``<!-- private ... -->``: the keyword must be a whole word, the payload is
# matched lazily so each block closes at its own nearest ``-->``, and one line
# break after the closing delimiter belongs to the block.
PRIVATE_BLOCK_RE = re.compile(
    r"<!--\s*private\b\s*(?:\r?\n)?(?P<payload>.*?)(?:\r?\n)?\s*-->(?P<eol>\r?\n)?",
    re.DOTALL,
)


@dataclass(frozen=True)
class PrivateBlock:
    """One matched private region.

    Attributes:
        start: Offset of the opening ``<!--``.
        end: Offset just past the closing ``-->`` and its line break.
        payload: Text between the markers, verbatim.
        line_break: The line break consumed after ``-->`` (empty if none).
    """

    start: int
    end: int
    payload: str
    line_break: str = ""


def find_private_blocks(content: str, pattern: re.Pattern[str] = PRIVATE_BLOCK_RE) -> list[PrivateBlock]:
    """Return every private block in ``content`` in document order."""
    return [_to_block(match) for match in pattern.finditer(content)]


def render_block(block: PrivateBlock, settings: PrivateSettings) -> str:
    """Return the replacement text for a single block under ``settings``.

    Kept blocks always end in one line break: the one consumed after ``-->``
    when present, otherwise a newline.
    """
    if settings.remove:
        return ""
    line_break = block.line_break or "\n"
    if settings.style:
        return (
            f"<blockquote style='{STYLE_CONTENT}'>"
            f"<span style='{STYLE_NOTICE}'>{settings.notice}</span>"
            f"{block.payload}</blockquote>{line_break}"
        )
    return f"{block.payload}{line_break}"


def process_blocks(
    content: str,
    settings: PrivateSettings,
    pattern: re.Pattern[str] = PRIVATE_BLOCK_RE,
) -> str:
    """Remove, style, or unwrap every private block in ``content``.

    Content without private blocks is returned unchanged.
    """
    return pattern.sub(lambda match: render_block(_to_block(match), settings), content)


def _to_block(match: re.Match[str]) -> PrivateBlock:
    return PrivateBlock(
        start=match.start(),
        end=match.end(),
        payload=match.group("payload"),
        line_break=match.group("eol") or "",
    )
