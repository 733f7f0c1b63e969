"""Preprocessor context model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PreprocessorContext(BaseModel):
    """Build context mdbook sends alongside the book.

    Attributes:
        root: Book root directory.
        config: Parsed ``book.toml``.
        renderer: Name of the renderer the book is being built for.
        mdbook_version: Version of the mdbook binary running the build.
    """

    model_config = ConfigDict(extra="allow")

    root: str = ""
    config: dict[str, Any] = Field(default_factory=dict)
    renderer: str = ""
    mdbook_version: str = ""

    def preprocessor_config(self, name: str) -> Any:
        """Return the ``[preprocessor.<name>]`` table, or ``{}`` when absent."""
        preprocessors = self.config.get("preprocessor")
        if not isinstance(preprocessors, dict):
            return {}
        table = preprocessors.get(name)
        return {} if table is None else table
