"""Pretty-print rendered HTML fragments."""

from __future__ import annotations

from typing import Callable

from bs4 import BeautifulSoup
from bs4.dammit import EntitySubstitution
from bs4.element import Tag
from bs4.formatter import HTMLFormatter

from blocks2html.config import BLOCKS2HTML_INDENT, BLOCKS2HTML_PARSER

Formatter = Callable[[str], str]


def prettify_html(
    markup: str, *, indent: int | None = None, parser: str | None = None
) -> str:
    """Reformat an HTML fragment into an indented, deterministic layout.

    Tag structure, attributes and text are preserved; only whitespace
    between tags changes. Content of ``<pre>`` elements is left untouched.

    Parameters
    ----------
    markup : str
        The HTML fragment to format.
    indent : int | None
        Spaces per nesting level. Defaults to ``BLOCKS2HTML_INDENT``.
    parser : str | None
        BeautifulSoup tree builder. Defaults to ``BLOCKS2HTML_PARSER``.
    """
    if not markup:
        return ""
    formatter = HTMLFormatter(
        entity_substitution=EntitySubstitution.substitute_xml,
        void_element_close_prefix="/",
        indent=BLOCKS2HTML_INDENT if indent is None else indent,
    )
    soup = BeautifulSoup(markup, parser or BLOCKS2HTML_PARSER)
    root = _fragment_root(soup)
    if root is soup:
        return soup.prettify(formatter=formatter).strip()
    parts: list[str] = []
    for child in root.children:
        if isinstance(child, Tag):
            parts.append(child.prettify(formatter=formatter))
        elif child.strip():
            parts.append(child.output_ready(formatter).strip() + "\n")
    return "".join(parts).strip()


def _fragment_root(soup: BeautifulSoup) -> Tag:
    """Find the element holding the fragment's top-level nodes.

    Document-oriented tree builders such as lxml wrap fragments in
    ``<html><body>``; the wrapper is not part of the fragment.
    """
    if soup.body:
        return soup.body
    return soup
