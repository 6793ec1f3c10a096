"""bcrypt hashing and verification of keyed digests."""

from __future__ import annotations

import re

import bcrypt
from pydantic import BaseModel, ConfigDict, Field

from .errors import CostNotAllowed, CryptoBackendError, InvalidHash

MIN_COST = 4
MAX_COST = 31
DEFAULT_COST = 12
DEFAULT_IDENT = "2b"

_HASH_RE = re.compile(
    r"\$(?P<ident>2[abxy])\$(?P<cost>[0-9]{2})\$"
    r"(?P<salt>[./A-Za-z0-9]{22})(?P<checksum>[./A-Za-z0-9]{31})"
)


class HashRecord(BaseModel):
    """The parsed parts of a bcrypt hash string."""

    model_config = ConfigDict(frozen=True)

    ident: str = Field(description="bcrypt version identifier, e.g. 2b")
    cost: int = Field(ge=MIN_COST, le=MAX_COST, description="log2 of the iteration count")
    salt: str = Field(description="22-char bcrypt-base64 salt")
    checksum: str = Field(description="31-char bcrypt-base64 digest")


def check_cost(cost: int) -> int:
    """Return *cost* if bcrypt accepts it, else raise :class:`CostNotAllowed`."""
    if isinstance(cost, bool) or not isinstance(cost, int):
        raise CostNotAllowed(cost)
    if not MIN_COST <= cost <= MAX_COST:
        raise CostNotAllowed(cost)
    return cost


def parse_hash_record(hash_record: str) -> HashRecord:
    """Split a bcrypt string into its parts, raising :class:`InvalidHash` if malformed."""
    if not isinstance(hash_record, str):
        raise InvalidHash(hash_record)
    match = _HASH_RE.fullmatch(hash_record)
    if match is None:
        raise InvalidHash(hash_record)
    cost = int(match["cost"])
    if not MIN_COST <= cost <= MAX_COST:
        raise InvalidHash(hash_record)
    return HashRecord(
        ident=match["ident"],
        cost=cost,
        salt=match["salt"],
        checksum=match["checksum"],
    )


def adaptive_hash(value: str, cost: int) -> str:
    """bcrypt-hash *value* with a fresh random salt at the given cost."""
    check_cost(cost)
    try:
        salt = bcrypt.gensalt(rounds=cost, prefix=DEFAULT_IDENT.encode("ascii"))
        hashed = bcrypt.hashpw(value.encode("utf-8"), salt)
    except (ValueError, TypeError) as exc:
        raise CryptoBackendError("bcrypt failed to hash a valid input") from exc
    return hashed.decode("ascii")


def adaptive_verify(value: str, hash_record: str) -> bool:
    """Check *value* against a stored bcrypt record.

    The comparison itself is bcrypt's constant-time check.
    """
    parse_hash_record(hash_record)
    try:
        return bcrypt.checkpw(value.encode("utf-8"), hash_record.encode("ascii"))
    except ValueError as exc:
        # Passed the shape check but bcrypt still rejects the salt encoding.
        raise InvalidHash(hash_record) from exc
    except TypeError as exc:
        raise CryptoBackendError("bcrypt failed to verify a valid input") from exc
