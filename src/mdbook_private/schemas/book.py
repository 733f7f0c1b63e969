"""Book tree models mirroring mdbook's ``Book`` and ``BookItem``."""

from __future__ import annotations

from pathlib import PureWindowsPath
from typing import Annotated, Any, Iterator, Literal, Union

from pydantic import BaseModel, Field, PositiveInt


class Separator(BaseModel):
    """A horizontal separator in the summary."""

    kind: Literal["separator"] = "separator"


class PartTitle(BaseModel):
    """A part heading in the summary."""

    kind: Literal["part_title"] = "part_title"
    title: str


class Chapter(BaseModel):
    """A chapter and its nested sub-items.

    Attributes:
        name: Display name shown in the table of contents.
        content: Markdown source of the chapter.
        number: Section number such as ``[2, 1]``; ``None`` for prefix,
            suffix and draft chapters.
        sub_items: Nested chapters and markers, in order.
        path: Output path relative to the book source directory.
        source_path: Path of the Markdown file the chapter was read from.
        parent_names: Display names of every ancestor chapter.
    """

    kind: Literal["chapter"] = "chapter"
    name: str
    content: str = ""
    number: list[PositiveInt] | None = None
    sub_items: list[BookItem] = Field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = Field(default_factory=list)

    @property
    def is_numbered(self) -> bool:
        return self.number is not None

    @property
    def source_filename(self) -> str | None:
        """Final segment of ``source_path``; either slash style is accepted."""
        if self.source_path is None:
            return None
        return PureWindowsPath(self.source_path).name

    def format_number(self) -> str:
        """Render the section number the way mdbook prints it (``2.1.``)."""
        if not self.number:
            return ""
        return "".join(f"{part}." for part in self.number)


BookItem = Annotated[Union[Chapter, Separator, PartTitle], Field(discriminator="kind")]

Chapter.model_rebuild()


class Book(BaseModel):
    """An ordered sequence of top-level book items.

    ``items_key`` and ``envelope`` only matter to the JSON protocol: they
    remember which list key mdbook used and any other top-level keys so the
    book can be written back in the shape it arrived in.
    """

    sections: list[BookItem] = Field(default_factory=list)
    items_key: str = "sections"
    envelope: dict[str, Any] = Field(default_factory=dict)

    def for_each_chapter(self) -> Iterator[Chapter]:
        """Yield every chapter depth-first, nested chapters included."""
        yield from iter_chapters(self.sections)


def iter_chapters(items: list[BookItem]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, Chapter):
            yield item
            yield from iter_chapters(item.sub_items)
