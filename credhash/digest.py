"""HMAC-SHA256 keyed digest applied to passwords before bcrypt."""

from __future__ import annotations

import hashlib
import hmac

from .errors import InvalidKeyLength

DIGEST_HEX_LENGTH = hashlib.sha256().digest_size * 2


def check_key(hmac_key: bytes, *, min_length: int = 1) -> bytes:
    """Return *hmac_key* as ``bytes`` or raise :class:`InvalidKeyLength`.

    Only bytes-like keys are accepted; passing a ``str`` is a programming
    error and raises ``TypeError``.
    """
    if not isinstance(hmac_key, (bytes, bytearray, memoryview)):
        raise TypeError(f"hmac_key must be bytes, not {type(hmac_key).__name__}")
    key = bytes(hmac_key)
    if len(key) < max(min_length, 1):
        raise InvalidKeyLength(len(key))
    return key


def keyed_digest(password: str, hmac_key: bytes, *, min_length: int = 1) -> str:
    """HMAC-SHA256 of the UTF-8 password, as 64 lowercase hex characters."""
    key = check_key(hmac_key, min_length=min_length)
    return hmac.new(key, password.encode("utf-8"), hashlib.sha256).hexdigest()
