"""Hasher configuration loaded from environment variables.

Uses pydantic-settings so the key and cost can come from the deployment
environment (``CREDHASH_HMAC_KEY``, ``CREDHASH_BCRYPT_COST``, ...).  The
hashing functions themselves never read this; it is only consumed by
:meth:`credhash.hasher.CredentialHasher.from_config`.
"""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from .adaptive import DEFAULT_COST


class HasherConfig(BaseSettings):
    """Settings for a :class:`~credhash.hasher.CredentialHasher`."""

    model_config = SettingsConfigDict(env_prefix="CREDHASH_")

    hmac_key: SecretStr = Field(description="Secret HMAC key applied before bcrypt")
    bcrypt_cost: int = Field(default=DEFAULT_COST, description="bcrypt work factor (4-31)")
    min_key_length: int = Field(
        default=1,
        ge=1,
        description="Shortest HMAC key (in bytes) that is accepted",
    )

    # --- Logging ------------------------------------------------------------
    log_level: str = Field(default="INFO", description="Log level")
    log_json: bool = Field(
        default=True,
        description="Use JSON log output (True for prod, False for dev)",
    )

    def key_bytes(self) -> bytes:
        """The HMAC key as UTF-8 bytes."""
        return self.hmac_key.get_secret_value().encode("utf-8")
