"""
Signing key derivation for HMAC-SHA-512 tokens.
"""

import base64
import secrets

from shared.errors import ConfigurationError, WeakKeyError
from shared.logging import get_logger

logger = get_logger("stateless_token.keys")

# HS512 needs a key at least as long as its 512-bit digest.
MIN_KEY_BYTES = 64


def generate_secret(num_bytes: int = MIN_KEY_BYTES) -> str:
    """Generate a random secret long enough to sign HS512 tokens."""
    return base64.b64encode(secrets.token_bytes(num_bytes)).decode("ascii")


def derive_key(secret: str, *, name: str = "tokenSecret", weak_key_hint: bool = True) -> bytes:
    """Turn a raw secret string into an HMAC signing key.

    Args:
        secret: Secret as configured by the operator
        name: Setting name used in error messages
        weak_key_hint: Log a generated replacement secret when the key is weak

    Returns:
        UTF-8 bytes of the secret

    Raises:
        ConfigurationError: If the secret is empty
        WeakKeyError: If the key is shorter than ``MIN_KEY_BYTES``
    """
    if not isinstance(secret, str) or not secret.strip():
        raise ConfigurationError(f"{name} must be a non-empty string", details={"setting": name})

    key = secret.encode("utf-8")
    if len(key) < MIN_KEY_BYTES:
        if weak_key_hint:
            logger.error(
                f"The {name} string is too weak to be used as a secret key. "
                f"You must use a string that is at least {MIN_KEY_BYTES} bytes long. "
                "You can create a secret key by using the random value below.",
                setting=name,
                key_bytes=len(key),
                suggested_secret=generate_secret(),
            )
        raise WeakKeyError(
            f"{name} is too weak: {len(key) * 8} bits, HS512 requires at least {MIN_KEY_BYTES * 8} bits",
            details={"setting": name, "key_bytes": len(key), "min_key_bytes": MIN_KEY_BYTES},
        )
    return key
