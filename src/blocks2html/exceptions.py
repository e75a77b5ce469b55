"""Custom exceptions for blocks2html."""


class Blocks2htmlError(Exception):
    """Base exception for blocks2html operations."""


class ParseError(Blocks2htmlError):
    """Error while decoding a block payload."""


class RenderError(Blocks2htmlError):
    """A block violates a required-field contract during rendering."""


class MissingTextError(RenderError):
    """A text block has no text payload."""
