"""Decode editor JSON payloads into block trees."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from blocks2html.exceptions import ParseError
from blocks2html.schemas import Block

logger = logging.getLogger(__name__)

_BLOCK_LIST = TypeAdapter(list[Block])


def load_blocks(payload: str | bytes | list[Any]) -> list[Block]:
    """Decode a top-level block sequence.

    Args:
        payload: A JSON document (``str`` or ``bytes``) or an already decoded
            list of block mappings.

    Returns:
        The blocks in document order.

    Raises:
        ParseError: If the payload is not valid JSON or does not describe a
            list of blocks.
    """
    try:
        if isinstance(payload, (str, bytes)):
            return _BLOCK_LIST.validate_json(payload)
        return _BLOCK_LIST.validate_python(payload)
    except ValidationError as exc:
        logger.debug("Rejected block payload: %s", exc)
        raise ParseError(f"Invalid block payload: {exc.error_count()} error(s)") from exc
