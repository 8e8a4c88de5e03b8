"""SLIP-0021 derivation over :class:`~slip21.node.Node` values.

    m          = HMAC-SHA512(key = b"Symmetric key seed", msg = seed)
    child(N, L) = HMAC-SHA512(key = N[0:32], msg = b"\\x00" || L)

Paths use the notation of the SLIP-0021 document: a root ``m`` followed by
double-quoted labels, e.g. ``m/"SLIP-0021"/"Master encryption key"``.
"""

from __future__ import annotations

from typing import Iterable, List, Union

from .constants import PATH_ROOT, PATH_SEPARATOR
from .errors import PathError
from .node import BytesLike, Label, Node, label_bytes


def new_master(seed: BytesLike) -> Node:
    return Node.new_master(seed)


def derive_child(parent: Node, label: Label) -> Node:
    return parent.derive_child(label)


def parse_path(path: str) -> List[bytes]:
    """Split a SLIP-21 path into its labels (UTF-8 bytes).

    Inside a label, ``\\"`` and ``\\\\`` escape a quote and a backslash.
    The bare root ``m`` yields an empty list.
    """
    if not path.startswith(PATH_ROOT):
        raise PathError(f"path must start with {PATH_ROOT!r}")
    labels: List[bytes] = []
    pos = len(PATH_ROOT)
    n = len(path)
    while pos < n:
        if path[pos] != PATH_SEPARATOR:
            raise PathError(f"expected {PATH_SEPARATOR!r} at position {pos}")
        pos += 1
        if pos >= n or path[pos] != '"':
            raise PathError(f"expected '\"' at position {pos}")
        pos += 1
        buf = []
        while True:
            if pos >= n:
                raise PathError("unterminated label")
            ch = path[pos]
            if ch == "\\":
                if pos + 1 >= n or path[pos + 1] not in ('"', "\\"):
                    raise PathError(f"invalid escape at position {pos}")
                buf.append(path[pos + 1])
                pos += 2
            elif ch == '"':
                pos += 1
                break
            else:
                buf.append(ch)
                pos += 1
        labels.append("".join(buf).encode("utf-8"))
    return labels


def format_path(labels: Iterable[Label]) -> str:
    """Inverse of :func:`parse_path` for labels that are valid UTF-8."""
    parts = [PATH_ROOT]
    for label in labels:
        text = label_bytes(label).decode("utf-8")
        parts.append('"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"')
    return PATH_SEPARATOR.join(parts)


def derive_path(root: Union[Node, BytesLike], path: Union[str, Iterable[Label]]) -> Node:
    """Walk ``path`` from ``root``, applying labels left to right.

    ``root`` is either a node or a seed (a master node is derived first).
    ``path`` is either a path string or a sequence of labels.
    """
    node = root if isinstance(root, Node) else Node.new_master(root)
    labels = parse_path(path) if isinstance(path, str) else path
    for label in labels:
        node = node.derive_child(label)
    return node
