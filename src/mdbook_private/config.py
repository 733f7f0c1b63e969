"""Local configuration for mdbook-private."""

from __future__ import annotations

import os

PREPROCESSOR_NAME = "private"

# Renderer name the preprocessor refuses; mdbook's own test suite uses it.
UNSUPPORTED_RENDERER = "not-supported"

# mdbook release line the wire format is written against.
SUPPORTED_MDBOOK_VERSION = "0.4"

DEFAULT_NOTICE = "CONFIDENTIAL"
DEFAULT_CHAPTER_PREFIX = "_"

STYLE_CONTENT = "position: relative; padding: 20px 20px;"
STYLE_NOTICE = "position: absolute; top: 0; right: 5px; font-size: 80%; opacity: 0.4;"

DEFAULT_LOG_LEVEL = "INFO"

MDBOOK_PRIVATE_LOG_LEVEL = os.getenv("MDBOOK_PRIVATE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
