"""mdbook-private: mark or strip confidential content in mdbook books."""

__version__ = "0.3.0"

from mdbook_private.blocks import PRIVATE_BLOCK_RE, PrivateBlock, find_private_blocks, process_blocks
from mdbook_private.chapters import filter_private_chapters, is_private_chapter
from mdbook_private.exceptions import (
    BookStructureError,
    ConfigurationError,
    MdbookPrivateError,
    ProtocolError,
)
from mdbook_private.numbering import renumber_chapters
from mdbook_private.preprocessor import PrivatePreprocessor
from mdbook_private.schemas import (
    Book,
    Chapter,
    PartTitle,
    PreprocessorContext,
    PrivateSettings,
    Separator,
)

__all__ = [
    "PRIVATE_BLOCK_RE",
    "Book",
    "BookStructureError",
    "Chapter",
    "ConfigurationError",
    "MdbookPrivateError",
    "PartTitle",
    "PreprocessorContext",
    "PrivateBlock",
    "PrivatePreprocessor",
    "PrivateSettings",
    "ProtocolError",
    "Separator",
    "filter_private_chapters",
    "find_private_blocks",
    "is_private_chapter",
    "process_blocks",
    "renumber_chapters",
]
