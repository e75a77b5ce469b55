"""blocks2html: render rich-text editor block trees as HTML."""

from blocks2html.exceptions import (
    Blocks2htmlError,
    MissingTextError,
    ParseError,
    RenderError,
)
from blocks2html.formatter import prettify_html
from blocks2html.loader import load_blocks
from blocks2html.renderer import (
    DEFAULT_RULES,
    BlockRenderer,
    render,
    render_code_with_language,
    render_fragment,
    render_json,
)
from blocks2html.schemas import Block, BlockType, Image, ListFormat

__all__ = [
    "DEFAULT_RULES",
    "Block",
    "BlockRenderer",
    "BlockType",
    "Blocks2htmlError",
    "Image",
    "ListFormat",
    "MissingTextError",
    "ParseError",
    "RenderError",
    "load_blocks",
    "prettify_html",
    "render",
    "render_code_with_language",
    "render_fragment",
    "render_json",
]
