"""
slip21: SLIP-0021 hierarchical derivation of symmetric keys.

- ``Node``: immutable 64-byte node (chain code || symmetric key) with
  equality, ordering, hashing, indexing and pickling.
- ``new_master`` / ``derive_child`` / ``derive_path``: HMAC-SHA512 derivation
  (PyCryptodomex) from a seed along a path of labels such as
  ``m/"SLIP-0021"/"Master encryption key"``.
- ``slip21.encoding``: hex (human-readable) and raw 64-byte (binary) codecs
  behind a single ``Mode``-driven ``encode``/``decode`` pair.
"""

from .node import Node
from .derivation import new_master, derive_child, derive_path, parse_path, format_path
from .encoding import Mode, encode, decode, from_hex, to_hex, from_bytes, to_bytes
from .errors import (
    Slip21Error,
    DecodeError,
    HexDecodeError,
    NodeLengthError,
    InvalidValueError,
    PathError,
)

__version__ = "0.1"

__all__ = [
    "Node",
    "new_master",
    "derive_child",
    "derive_path",
    "parse_path",
    "format_path",
    "Mode",
    "encode",
    "decode",
    "from_hex",
    "to_hex",
    "from_bytes",
    "to_bytes",
    "Slip21Error",
    "DecodeError",
    "HexDecodeError",
    "NodeLengthError",
    "InvalidValueError",
    "PathError",
]
