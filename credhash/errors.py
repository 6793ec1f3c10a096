"""Error taxonomy for credential hashing.

The three :class:`PasswordError` subclasses are expected operational
conditions and carry just enough data for a caller to react.
:class:`CryptoBackendError` sits outside that hierarchy. It means
the underlying crypto library is broken, and ``except PasswordError`` does
not catch it.
"""

from __future__ import annotations

from typing import Any


class PasswordError(Exception):
    """Base class for recoverable hashing/verification errors."""

    def _payload(self) -> tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._payload() == other._payload()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._payload()))

    def __repr__(self) -> str:
        args = ", ".join(repr(p) for p in self._payload())
        return f"{type(self).__name__}({args})"


class InvalidKeyLength(PasswordError):
    """The HMAC key cannot be used (empty or shorter than the minimum)."""

    def __init__(self, key_length: int) -> None:
        super().__init__(f"HMAC key of length {key_length} is not allowed")
        self.key_length = key_length

    def _payload(self) -> tuple[Any, ...]:
        return (self.key_length,)


class CostNotAllowed(PasswordError):
    """The requested bcrypt cost factor is outside the accepted range."""

    def __init__(self, cost: Any) -> None:
        super().__init__(f"bcrypt cost {cost!r} is not allowed")
        self.cost = cost

    def _payload(self) -> tuple[Any, ...]:
        return (self.cost,)


class InvalidHash(PasswordError):
    """A stored hash record is not a well-formed bcrypt string."""

    def __init__(self, hash_record: str) -> None:
        super().__init__("malformed bcrypt hash record")
        self.hash_record = hash_record

    def _payload(self) -> tuple[Any, ...]:
        return (self.hash_record,)


class CryptoBackendError(RuntimeError):
    """The underlying bcrypt/HMAC implementation failed unexpectedly."""
