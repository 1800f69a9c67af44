"""Response body helpers.

Drains a chunked body (an async iterator such as an HTTP response stream,
or a plain iterable) and parses the joined text as JSON.
"""
from __future__ import annotations

import codecs
import json
import logging
from typing import Any

from .errors import JSONParseError

logger = logging.getLogger(__name__)


class _ChunkDecoder:
    """Turns chunks into text, decoding bytes incrementally as UTF-8."""

    def __init__(self):
        self._decoder = codecs.getincrementaldecoder('utf-8')()

    def feed(self, chunk) -> str:
        if isinstance(chunk, (bytes, bytearray)):
            return self._decoder.decode(bytes(chunk))
        return self._decoder.decode(b'', final=True) + str(chunk)

    def close(self) -> str:
        return self._decoder.decode(b'', final=True)


def _iter_sync(body):
    # A whole str/bytes body is a single chunk, not a sequence of characters.
    if isinstance(body, (str, bytes, bytearray)):
        return [body]
    return body


async def read_body(body) -> str:
    """Concatenate every chunk of ``body`` in delivery order."""
    decoder = _ChunkDecoder()
    parts = []
    try:
        if hasattr(body, '__aiter__'):
            async for chunk in body:
                parts.append(decoder.feed(chunk))
        else:
            for chunk in _iter_sync(body):
                parts.append(decoder.feed(chunk))
        parts.append(decoder.close())
    except UnicodeDecodeError as e:
        logger.error("Body is not valid UTF-8: %s", e)
        raise JSONParseError(f"Body is not valid UTF-8: {e}") from e
    text = ''.join(parts)
    logger.debug("Read body with %d chars", len(text))
    return text


def _reject_constant(name):
    raise ValueError(f"Non-standard JSON constant: {name}")


async def get_json_response(body) -> Any:
    """Read ``body`` to the end and return the decoded JSON value.

    Raises :class:`JSONParseError` for empty or malformed JSON. Errors from
    the stream itself propagate unchanged.
    """
    text = await read_body(body)
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        logger.error("Failed to parse JSON body (%d chars): %s", len(text), e)
        raise JSONParseError(str(e)) from e
