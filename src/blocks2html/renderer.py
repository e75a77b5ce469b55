"""Render editor block trees to HTML."""

from __future__ import annotations

import logging
from html import escape
from types import MappingProxyType
from typing import Any, Callable, Iterable, Mapping

from blocks2html.exceptions import MissingTextError
from blocks2html.formatter import Formatter, prettify_html
from blocks2html.loader import load_blocks
from blocks2html.schemas import Block, BlockType, ListFormat

logger = logging.getLogger(__name__)

UNSUPPORTED_BLOCK_TYPE = "unsupported block type"
UNSUPPORTED_LIST = "unsupported list"
MISSING_IMAGE = "missing image"
LINK_PLACEHOLDER = "#"

_HEADING_LEVELS = range(1, 7)

# Outermost first; applied in reverse so code wraps the text first.
_TEXT_MARKS = (
    ("bold", "strong"),
    ("italic", "em"),
    ("underline", "u"),
    ("strikethrough", "del"),
    ("code", "code"),
)

RenderRule = Callable[[Block, "BlockRenderer"], str]


def render_paragraph(block: Block, renderer: BlockRenderer) -> str:
    # A lone empty text child is how the editor stores a blank line.
    children = list(block.iter_children())
    if len(children) == 1 and children[0].is_empty_text():
        return "<br />"
    return f"<p>{renderer.render_fragment(children)}</p>"


def render_text(block: Block, renderer: BlockRenderer) -> str:
    """Render a text leaf, wrapping it in one tag per enabled mark."""
    if block.text is None:
        raise MissingTextError("text block has no text payload")
    out = block.text
    for flag, tag in reversed(_TEXT_MARKS):
        if getattr(block, flag):
            out = f"<{tag}>{out}</{tag}>"
    return out


def render_list(block: Block, renderer: BlockRenderer) -> str:
    if block.format == ListFormat.UNORDERED:
        return f"<ul>{renderer.render_fragment(block.iter_children())}</ul>"
    if block.format == ListFormat.ORDERED:
        return f"<ol>{renderer.render_fragment(block.iter_children())}</ol>"
    logger.debug("Unsupported list format %r", block.format)
    return UNSUPPORTED_LIST


def render_list_item(block: Block, renderer: BlockRenderer) -> str:
    return f"<li>{renderer.render_fragment(block.iter_children())}</li>"


def render_heading(block: Block, renderer: BlockRenderer) -> str:
    """Render a heading, falling back to its raw text without a usable level."""
    if block.level in _HEADING_LEVELS:
        tag = f"h{block.level}"
        return f"<{tag}>{renderer.render_fragment(block.iter_children())}</{tag}>"
    logger.debug("Heading level %r unusable, emitting raw text", block.level)
    return block.text or ""


def render_image(block: Block, renderer: BlockRenderer) -> str:
    if block.image is None:
        logger.debug("Image block without image payload")
        return MISSING_IMAGE
    src = escape(block.image.url, quote=True)
    alt = escape(block.image.alternative_text, quote=True)
    return f'<img src="{src}" alt="{alt}" />'


def render_code(block: Block, renderer: BlockRenderer) -> str:
    # The editor's own renderer ignores ``language`` as well.
    return f"<pre><code>{renderer.render_fragment(block.iter_children())}</code></pre>"


def render_code_with_language(block: Block, renderer: BlockRenderer) -> str:
    """Render a code block, exposing ``language`` as a ``language-*`` class.

    Not installed by default; pass it as an override for ``BlockType.CODE``.
    """
    if not block.language:
        return render_code(block, renderer)
    language = escape(block.language, quote=True)
    content = renderer.render_fragment(block.iter_children())
    return f'<pre><code class="language-{language}">{content}</code></pre>'


def render_quote(block: Block, renderer: BlockRenderer) -> str:
    return f"<blockquote>{renderer.render_fragment(block.iter_children())}</blockquote>"


def render_link(block: Block, renderer: BlockRenderer) -> str:
    href = escape(LINK_PLACEHOLDER if block.url is None else block.url, quote=True)
    return f'<a href="{href}">{renderer.render_fragment(block.iter_children())}</a>'


DEFAULT_RULES: Mapping[str, RenderRule] = MappingProxyType(
    {
        BlockType.PARAGRAPH.value: render_paragraph,
        BlockType.TEXT.value: render_text,
        BlockType.LIST.value: render_list,
        BlockType.LIST_ITEM.value: render_list_item,
        BlockType.HEADING.value: render_heading,
        BlockType.LINK.value: render_link,
        BlockType.IMAGE.value: render_image,
        BlockType.QUOTE.value: render_quote,
        BlockType.CODE.value: render_code,
    }
)


class BlockRenderer:
    """Dispatch blocks to one render rule per block type.

    Any rule can be replaced through ``rules`` without touching the others.
    Rules receive the renderer so nested blocks go through the same table.
    Instances hold no per-call state and can be shared between threads.

    Attributes:
        rules: The effective discriminant -> rule table.
        formatter: Post-format step applied by ``render``; ``None`` returns
            the raw concatenated fragments.
    """

    def __init__(
        self,
        rules: Mapping[str, RenderRule] | None = None,
        *,
        formatter: Formatter | None = prettify_html,
    ) -> None:
        table = dict(DEFAULT_RULES)
        for block_type, rule in (rules or {}).items():
            key = block_type.value if isinstance(block_type, BlockType) else block_type
            table[key] = rule
        self.rules: Mapping[str, RenderRule] = MappingProxyType(table)
        self.formatter = formatter

    def render(self, blocks: Iterable[Block]) -> str:
        """Render top-level blocks in order and post-format the result."""
        out = self.render_fragment(blocks)
        if self.formatter is None:
            return out
        return self.formatter(out)

    def render_fragment(self, blocks: Iterable[Block]) -> str:
        return "".join(self.render_block(block) for block in blocks)

    def render_block(self, block: Block) -> str:
        rule = self.rules.get(block.type)
        if rule is None:
            logger.debug("Unsupported block type %r", block.type)
            return UNSUPPORTED_BLOCK_TYPE
        return rule(block, self)


_default_renderer = BlockRenderer()


def render(blocks: Iterable[Block]) -> str:
    """Render blocks to indented HTML with the default rules."""
    return _default_renderer.render(blocks)


def render_fragment(blocks: Iterable[Block]) -> str:
    """Render blocks to raw HTML with the default rules, skipping post-format."""
    return _default_renderer.render_fragment(blocks)


def render_json(payload: str | bytes | list[Any]) -> str:
    """Decode a JSON block payload and render it.

    Raises:
        ParseError: If the payload is not a valid list of blocks.
        MissingTextError: If a text block has no text payload.
    """
    return render(load_blocks(payload))
