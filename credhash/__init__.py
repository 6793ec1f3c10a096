"""HMAC-peppered bcrypt password hashing.

Public API re-exported here for convenience::

    from credhash import CredentialHasher, hash_password, verify_password
"""

from .adaptive import (
    DEFAULT_COST,
    MAX_COST,
    MIN_COST,
    HashRecord,
    adaptive_hash,
    adaptive_verify,
    parse_hash_record,
)
from .config import HasherConfig
from .digest import keyed_digest
from .errors import (
    CostNotAllowed,
    CryptoBackendError,
    InvalidHash,
    InvalidKeyLength,
    PasswordError,
)
from .hasher import CredentialHasher, hash_password, needs_rehash, verify_password
from .logging import setup_logging, setup_logging_from_config

__all__ = [
    "DEFAULT_COST",
    "MAX_COST",
    "MIN_COST",
    "CostNotAllowed",
    "CredentialHasher",
    "CryptoBackendError",
    "HashRecord",
    "HasherConfig",
    "InvalidHash",
    "InvalidKeyLength",
    "PasswordError",
    "adaptive_hash",
    "adaptive_verify",
    "hash_password",
    "keyed_digest",
    "needs_rehash",
    "parse_hash_record",
    "setup_logging",
    "setup_logging_from_config",
    "verify_password",
]
