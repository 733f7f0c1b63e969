"""Settings read from the ``[preprocessor.private]`` table."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError, field_validator

from mdbook_private.config import DEFAULT_CHAPTER_PREFIX, DEFAULT_NOTICE
from mdbook_private.exceptions import ConfigurationError


class PrivateSettings(BaseModel):
    """Effective preprocessor settings for one run.

    Attributes:
        remove: Delete private blocks and private chapters instead of marking them.
        style: Wrap kept private blocks in a bordered notice box.
        notice: Label shown in the corner of the notice box.
        chapter_prefix: File name prefix marking a whole chapter private.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    remove: StrictBool = False
    style: StrictBool = True
    notice: StrictStr = DEFAULT_NOTICE
    chapter_prefix: StrictStr = Field(default=DEFAULT_CHAPTER_PREFIX, alias="chapter-prefix")

    @field_validator("chapter_prefix")
    @classmethod
    def validate_chapter_prefix(cls, v: str) -> str:
        """Reject an empty prefix, which would match every chapter file."""
        if not v:
            raise ValueError("empty value not allowed, it would mark every chapter private")
        return v

    @classmethod
    def from_table(cls, table: Any) -> PrivateSettings:
        """Build settings from a config table, failing fast on bad values.

        Raises:
            ConfigurationError: If the table is not a mapping, a recognized
                key holds a value of the wrong type, or ``chapter-prefix``
                is empty.
        """
        if table is None:
            return cls()
        if not isinstance(table, Mapping):
            raise ConfigurationError(
                f"[preprocessor.private] must be a table, got {type(table).__name__}"
            )
        try:
            return cls.model_validate(dict(table))
        except ValidationError as exc:
            raise ConfigurationError(_describe(exc)) from exc


def _describe(exc: ValidationError) -> str:
    problems = []
    for error in exc.errors():
        key = ".".join(str(part) for part in error["loc"]) or "<table>"
        problems.append(f"{key}: {error['msg']} (got {error.get('input')!r})")
    return "Invalid [preprocessor.private] configuration: " + "; ".join(problems)
