"""Block tree models."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, StrictInt


class BlockType(str, Enum):
    """Known block discriminants."""

    PARAGRAPH = "paragraph"
    TEXT = "text"
    LIST = "list"
    LIST_ITEM = "list-item"
    HEADING = "heading"
    LINK = "link"
    IMAGE = "image"
    QUOTE = "quote"
    CODE = "code"


class ListFormat(str, Enum):
    UNORDERED = "unordered"
    ORDERED = "ordered"


class Image(BaseModel):
    """Uploaded image metadata attached to an image block."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    name: str = ""
    alternative_text: str = Field("", alias="alternativeText")
    url: str = ""


class Block(BaseModel):
    """A node of the editor's block tree.

    ``type`` is kept as a plain string so unknown discriminants still
    deserialize. Every other field is optional and ``None`` means the key was
    absent from the payload, which is distinct from ``False`` or ``""``.

    Attributes:
        type: Block discriminant, usually one of ``BlockType``.
        children: Nested blocks, in document order.
        text: Text payload of ``text`` blocks.
        bold: Bold flag of ``text`` blocks.
        italic: Italic flag of ``text`` blocks.
        underline: Underline flag of ``text`` blocks.
        strikethrough: Strikethrough flag of ``text`` blocks.
        code: Inline code flag of ``text`` blocks.
        format: ``ListFormat`` value of ``list`` blocks.
        url: Link target of ``link`` blocks.
        level: Heading level of ``heading`` blocks.
        image: Image payload of ``image`` blocks.
        language: Source language of ``code`` blocks.
    """

    model_config = ConfigDict(frozen=True)

    type: str
    children: list["Block"] | None = None
    text: str | None = None
    bold: bool | None = None
    italic: bool | None = None
    underline: bool | None = None
    strikethrough: bool | None = None
    code: bool | None = None
    format: str | None = None
    url: str | None = None
    level: StrictInt | None = None
    image: Image | None = None
    language: str | None = None

    def is_empty_text(self) -> bool:
        """Return True for a ``text`` block whose text is absent or empty."""
        return self.type == BlockType.TEXT and not self.text

    def iter_children(self) -> Iterator["Block"]:
        return iter(self.children or ())
