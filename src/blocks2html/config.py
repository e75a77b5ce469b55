"""Local configuration for blocks2html."""

from __future__ import annotations

import os


DEFAULT_INDENT = 2
DEFAULT_PARSER = "html.parser"

# Indentation width and tree builder used by the post-format step.
BLOCKS2HTML_INDENT = int(os.getenv("BLOCKS2HTML_INDENT", str(DEFAULT_INDENT)))
BLOCKS2HTML_PARSER = os.getenv("BLOCKS2HTML_PARSER", DEFAULT_PARSER)
