"""Shared schemas for blocks2html."""

from blocks2html.schemas.blocks import Block, BlockType, Image, ListFormat

__all__ = ["Block", "BlockType", "Image", "ListFormat"]
