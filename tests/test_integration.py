"""End-to-end tests: editor JSON export -> formatted HTML."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from blocks2html import BlockRenderer, MissingTextError, load_blocks, render, render_json
from blocks2html.schemas import Block


@pytest.fixture
def rendered(editor_export: str) -> str:
    return render_json(editor_export)


@pytest.fixture
def soup(rendered: str) -> BeautifulSoup:
    return BeautifulSoup(rendered, "html.parser")


def _top_level(soup: BeautifulSoup) -> list[str]:
    return [child.name for child in soup.find_all(True, recursive=False)]


class TestEditorExport:
    """Render a full editor export and inspect the resulting markup."""

    def test_top_level_order(self, soup: BeautifulSoup) -> None:
        assert _top_level(soup) == [
            "p", "p", "p", "p", "p",
            "h1", "h2", "h3",
            "img", "blockquote", "pre",
            "ul", "br", "p", "br", "ol", "br",
        ]

    def test_formatting_marks_nest_bold_outermost(self, soup: BeautifulSoup) -> None:
        underline = soup.find_all("p")[2].find("u")

        assert underline.parent.name == "em"
        assert underline.parent.parent.name == "strong"
        assert underline.get_text(strip=True) == "modifers at once"

    def test_link_target(self, soup: BeautifulSoup) -> None:
        link = soup.find("a")

        assert link["href"] == "http://asdf.de"
        assert link.get_text(strip=True) == "links"

    def test_image_attributes(self, soup: BeautifulSoup) -> None:
        image = soup.find("img")

        assert image.attrs == {
            "src": "http://localhost:1337/uploads/cdreier_gopher_small_a32e6e2b51.jpg",
            "alt": "cdreier_gopher_small.jpg",
        }

    def test_code_block_keeps_whitespace(self, soup: BeautifulSoup) -> None:
        assert soup.find("pre").get_text() == (
            'func andCodeBlocks() string {\n  return "with multilines"\n}'
        )

    def test_nested_lists(self, soup: BeautifulSoup) -> None:
        nested_ul = soup.find("ul").find("ul")
        nested_ol = soup.find("ol").find("ol")

        assert [li.get_text(strip=True) for li in nested_ul.find_all("li")] == [
            "sublist 1",
            "sublist 2",
        ]
        assert [li.get_text(strip=True) for li in nested_ol.find_all("li")] == ["two.a"]

    def test_output_is_indented(self, rendered: str) -> None:
        assert rendered.startswith("<p>\n  this is normal text\n</p>")
        assert "\n  <li>\n    list 1\n  </li>\n" in rendered

    def test_no_document_wrapper(self, rendered: str) -> None:
        assert "<html" not in rendered
        assert "<body" not in rendered

    def test_render_is_deterministic(self, editor_export: str) -> None:
        blocks = load_blocks(editor_export)
        assert render(blocks) == render(blocks)

    def test_matches_raw_fragments_without_formatter(self, editor_export: str) -> None:
        blocks = load_blocks(editor_export)
        raw = BlockRenderer(formatter=None).render(blocks)

        assert raw.startswith("<p>this is normal text</p><p>this is text with ")
        assert raw.endswith("<li>three</li></ol><br />")


class TestDegradedInput:
    """Malformed blocks degrade locally instead of aborting the render."""

    def test_diagnostics_are_rendered_in_place(self) -> None:
        blocks = load_blocks(
            """[
              {"type": "paragraph", "children": [{"type": "text", "text": "ok"}]},
              {"type": "list", "children": []},
              {"type": "image"},
              {"type": "video"},
              {"type": "heading", "text": "plain heading"}
            ]"""
        )

        result = render(blocks)

        for diagnostic in ("unsupported list", "missing image", "unsupported block type"):
            assert diagnostic in result
        assert "plain heading" in result
        assert "<h" not in result

    def test_text_without_payload_raises(self) -> None:
        block = Block(type="paragraph", children=[Block(type="text", bold=True), Block(type="text")])
        with pytest.raises(MissingTextError):
            render([block])
