"""Two-stage password hashing: HMAC-SHA256, then bcrypt."""

from __future__ import annotations

import structlog

from .adaptive import (
    DEFAULT_COST,
    DEFAULT_IDENT,
    adaptive_hash,
    adaptive_verify,
    check_cost,
    parse_hash_record,
)
from .config import HasherConfig
from .digest import check_key, keyed_digest
from .errors import CostNotAllowed, InvalidHash, InvalidKeyLength

logger = structlog.get_logger()


def hash_password(password: str, hmac_key: bytes, cost: int) -> str:
    """Hash *password* for storage.

    Raises :class:`InvalidKeyLength` or :class:`CostNotAllowed`.
    """
    return adaptive_hash(keyed_digest(password, hmac_key), cost)


def verify_password(password: str, hash_record: str, hmac_key: bytes) -> bool:
    """Check *password* against a record produced by :func:`hash_password`.

    Raises :class:`InvalidKeyLength` or :class:`InvalidHash`.
    """
    return adaptive_verify(keyed_digest(password, hmac_key), hash_record)


def needs_rehash(hash_record: str, cost: int) -> bool:
    """True if *hash_record* was made with a different cost or bcrypt ident."""
    check_cost(cost)
    record = parse_hash_record(hash_record)
    return record.cost != cost or record.ident != DEFAULT_IDENT


class CredentialHasher:
    """Binds an HMAC key and bcrypt cost to the hashing functions.

    The key is validated once at construction; an unusable key raises
    :class:`InvalidKeyLength` immediately rather than on first use.
    """

    def __init__(
        self,
        hmac_key: bytes,
        cost: int = DEFAULT_COST,
        *,
        min_key_length: int = 1,
    ) -> None:
        self._key = check_key(hmac_key, min_length=min_key_length)
        self._min_key_length = min_key_length
        self.cost = check_cost(cost)

    @classmethod
    def from_config(cls, config: HasherConfig) -> CredentialHasher:
        try:
            return cls(config.key_bytes(), config.bcrypt_cost, min_key_length=config.min_key_length)
        except InvalidKeyLength:
            logger.warning("invalid_key_length", min_key_length=config.min_key_length)
            raise
        except CostNotAllowed as exc:
            logger.warning("cost_not_allowed", cost=exc.cost)
            raise

    def __repr__(self) -> str:
        return f"CredentialHasher(cost={self.cost})"

    def hash(self, password: str) -> str:
        digest = keyed_digest(password, self._key, min_length=self._min_key_length)
        hashed = adaptive_hash(digest, self.cost)
        logger.debug("password_hashed", cost=self.cost)
        return hashed

    def verify(self, password: str, hash_record: str) -> bool:
        digest = keyed_digest(password, self._key, min_length=self._min_key_length)
        try:
            matched = adaptive_verify(digest, hash_record)
        except InvalidHash:
            logger.warning("invalid_hash_record")
            raise
        logger.debug("password_verified", match=matched)
        return matched

    def needs_rehash(self, hash_record: str) -> bool:
        return needs_rehash(hash_record, self.cost)
