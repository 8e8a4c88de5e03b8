from __future__ import annotations

import hmac
import operator
from dataclasses import dataclass
from typing import Iterator, Union

from .constants import CHAIN_SIZE, KEY_SIZE, LABEL_PREFIX, MASTER_NODE_KEY, NODE_SIZE
from .errors import NodeLengthError
from .hmacutil import hmac_sha512


BytesLike = Union[bytes, bytearray, memoryview]
Label = Union[bytes, bytearray, memoryview, str]

_BYTES_TYPES = (bytes, bytearray, memoryview)


def label_bytes(label: Label) -> bytes:
    """Normalize a derivation label to bytes; text labels are UTF-8 encoded."""
    if isinstance(label, str):
        return label.encode("utf-8")
    if isinstance(label, _BYTES_TYPES):
        return bytes(label)
    raise TypeError(f"label must be bytes or str, not {type(label).__name__}")


@dataclass(frozen=True, order=True)
class Node:
    """A SLIP-21 derivation node.

    Holds exactly 64 bytes: ``data[0:32]`` is the chain component used to derive
    children and ``data[32:64]`` is the symmetric key exposed through ``key``.
    Nodes are immutable; equality, ordering and hashing all operate on the
    whole 64-byte buffer.
    """

    data: bytes

    def __post_init__(self):
        if not isinstance(self.data, _BYTES_TYPES):
            raise TypeError(f"node data must be bytes-like, not {type(self.data).__name__}")
        raw = bytes(self.data)
        if len(raw) != NODE_SIZE:
            raise NodeLengthError(len(raw), NODE_SIZE)
        object.__setattr__(self, "data", raw)

    @classmethod
    def default(cls) -> "Node":
        """The all-zero node. Placeholder only, never a derived key."""
        return cls(bytes(NODE_SIZE))

    @classmethod
    def new_master(cls, seed: BytesLike) -> "Node":
        """Create the master node from a BIP-39 or SLIP-39 seed (usually 64 bytes)."""
        if not isinstance(seed, _BYTES_TYPES):
            raise TypeError(f"seed must be bytes-like, not {type(seed).__name__}")
        return cls(hmac_sha512(MASTER_NODE_KEY, bytes(seed)))

    def derive_child(self, label: Label) -> "Node":
        return Node(hmac_sha512(self.data[:CHAIN_SIZE], LABEL_PREFIX, label_bytes(label)))

    @property
    def chain(self) -> bytes:
        return self.data[:CHAIN_SIZE]

    @property
    def key(self) -> bytes:
        """The symmetric key of this node (bytes 32..64)."""
        return self.data[CHAIN_SIZE:CHAIN_SIZE + KEY_SIZE]

    @property
    def is_default(self) -> bool:
        return not any(self.data)

    def __eq__(self, other):
        if other.__class__ is not self.__class__:
            return NotImplemented
        return hmac.compare_digest(self.data, other.data)

    def __hash__(self):
        return hash(self.data)

    def __len__(self) -> int:
        return NODE_SIZE

    def __bytes__(self) -> bytes:
        return self.data

    def __iter__(self) -> Iterator[int]:
        return iter(self.data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            if index.step not in (None, 1):
                raise IndexError("node slices must be contiguous")
            start = 0 if index.start is None else operator.index(index.start)
            stop = NODE_SIZE if index.stop is None else operator.index(index.stop)
            # No clamping: a range outside the buffer is a caller error
            if not 0 <= start <= stop <= NODE_SIZE:
                raise IndexError(f"range {start}..{stop} out of bounds for node of length {NODE_SIZE}")
            return self.data[start:stop]
        return self.data[index]

    def __reduce__(self):
        return (self.__class__, (self.data,))

    def __str__(self) -> str:
        return self.data.hex()

    def __format__(self, format_spec: str) -> str:
        if format_spec == "x":
            return self.data.hex()
        return format(self.data.hex(), format_spec)

    def __repr__(self) -> str:
        return f"Node('{self.data.hex()}')"
