"""
Hex and binary codecs for SLIP-21 nodes.

Two representations, chosen at the serialization boundary by :class:`Mode`:

- TEXT: 128 lowercase hex characters, no prefix. Decoding is case-insensitive
  and also accepts bytes carrying UTF-8 hex text.
- BINARY: the 64 raw bytes, no framing or length prefix.
"""

from __future__ import annotations

import binascii
import enum
import logging
import string
from typing import Union

from .constants import HEX_NODE_LEN, NODE_SIZE
from .errors import HexDecodeError, InvalidValueError, NodeLengthError
from .node import BytesLike, Node


logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


class Mode(enum.Enum):
    TEXT = "text"
    BINARY = "binary"


def to_hex(node: Node) -> str:
    return node.data.hex()


def _hex_text(value: Union[str, BytesLike]) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug("rejected non-UTF-8 hex input of %d bytes", len(value))
            raise InvalidValueError(f"invalid value: expected an ASCII hex string, got non-UTF-8 bytes ({e.reason})") from e
    raise InvalidValueError(f"invalid value: expected an ASCII hex string, got {type(value).__name__}")


def _check_hex_length(text: str) -> None:
    if len(text) % 2:
        logger.debug("rejected hex input of odd length %d", len(text))
        raise HexDecodeError(f"odd-length hex string ({len(text)} characters)")
    if len(text) != HEX_NODE_LEN:
        logger.debug("rejected hex input of %d characters", len(text))
        raise NodeLengthError(len(text) // 2, NODE_SIZE)


def from_hex(value: Union[str, BytesLike]) -> Node:
    """Decode a node from hex text (``str``, or bytes holding UTF-8 text)."""
    text = _hex_text(value)
    # Oversized input is rejected on length alone, before any scan
    if len(text) > HEX_NODE_LEN:
        _check_hex_length(text)
    for pos, ch in enumerate(text):
        if ch not in _HEX_DIGITS:
            logger.debug("rejected hex input: bad character at position %d", pos)
            raise HexDecodeError(f"invalid hex character {ch!r} at position {pos}")
    _check_hex_length(text)
    try:
        raw = binascii.unhexlify(text)
    except binascii.Error as e:  # pragma: no cover - characters are checked above
        raise HexDecodeError(str(e)) from e
    return Node(raw)


def to_bytes(node: Node) -> bytes:
    return node.data


def from_bytes(data: BytesLike) -> Node:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise InvalidValueError(f"invalid value: expected a bytestring, got {type(data).__name__}")
    if len(data) != NODE_SIZE:
        logger.debug("rejected binary input of %d bytes", len(data))
        raise NodeLengthError(len(data), NODE_SIZE)
    return Node(data)


def encode(node: Node, mode: Mode = Mode.TEXT) -> Union[str, bytes]:
    """Serialize ``node`` as hex text (TEXT) or 64 raw bytes (BINARY)."""
    if mode is Mode.TEXT:
        return to_hex(node)
    if mode is Mode.BINARY:
        return to_bytes(node)
    raise ValueError(f"unsupported mode: {mode!r}")


def decode(value: Union[str, BytesLike], mode: Mode = Mode.TEXT) -> Node:
    """Inverse of :func:`encode` for the same ``mode``."""
    if mode is Mode.TEXT:
        return from_hex(value)
    if mode is Mode.BINARY:
        return from_bytes(value)
    raise ValueError(f"unsupported mode: {mode!r}")


# -------- JSON hooks --------

def json_default(obj):
    """``default=`` hook for :func:`json.dumps`: nodes become hex strings."""
    if isinstance(obj, Node):
        return to_hex(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def node_from_json(value) -> Node:
    if not isinstance(value, str):
        raise InvalidValueError(f"invalid value: expected an ASCII hex string, got {type(value).__name__}")
    return from_hex(value)


__all__ = [
    "Mode",
    "to_hex",
    "from_hex",
    "to_bytes",
    "from_bytes",
    "encode",
    "decode",
    "json_default",
    "node_from_json",
]
