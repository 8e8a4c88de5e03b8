from __future__ import annotations

from Cryptodome.Hash import HMAC, SHA512


def hmac_sha512(key: bytes, *parts: bytes) -> bytes:
    """HMAC-SHA512 over the concatenation of ``parts``, keyed with ``key``.

    Returns the 64-byte digest.
    """
    mac = HMAC.new(bytes(key), digestmod=SHA512)
    for part in parts:
        mac.update(part)
    return mac.digest()
