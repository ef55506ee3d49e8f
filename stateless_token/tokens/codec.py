"""
Sign and verify subjects as HS512 JWTs.

``sign`` and ``read`` are the lifecycle primitives every token kind goes
through; only the key and timeout passed in differ. ``verify`` is the strict
form of ``read`` that reports why a token was rejected.
"""

import math
import time
from typing import Any

import jwt
from pydantic import PydanticUserError, ValidationError

from shared.errors import VerificationFailure
from shared.logging import get_logger

from .subject import decode_subject, encode_subject
from .token import Token

logger = get_logger("stateless_token.codec")

ALGORITHM = "HS512"
REQUIRED_CLAIMS = ["sub", "iat", "exp"]


def sign(subject: Any, key: bytes, timeout_seconds: int) -> Token:
    """Sign ``subject`` into a compact token expiring after ``timeout_seconds``.

    A negative timeout still yields a signed string, but the token is
    reported invalid with no subject. Use it to mint tokens that no verifier
    will accept.

    Raises:
        SerializationError: If the subject cannot be encoded
    """
    # Claims are whole seconds; expiry rounds up so a token never lives
    # shorter than its timeout.
    now = time.time()
    claims = {
        "sub": encode_subject(subject),
        "iat": math.floor(now),
        "exp": math.ceil(now + timeout_seconds),
    }
    value = jwt.encode(claims, key, algorithm=ALGORITHM)

    if timeout_seconds < 0:
        return Token.rejected(value)
    return Token(value=value, subject=subject, invalid=False)


def verify(value: str, key: bytes, shape: Any) -> Any:
    """Verify ``value`` and decode its subject into ``shape``.

    Raises:
        VerificationFailure: With ``reason`` set to expired, signature, malformed or payload
    """
    try:
        claims = jwt.decode(
            value,
            key,
            algorithms=[ALGORITHM],
            options={"require": REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError as e:
        raise VerificationFailure(VerificationFailure.EXPIRED, "Token has expired") from e
    except jwt.InvalidSignatureError as e:
        raise VerificationFailure(VerificationFailure.SIGNATURE, "Token signature mismatch") from e
    except jwt.InvalidTokenError as e:
        raise VerificationFailure(
            VerificationFailure.MALFORMED,
            "Token is malformed",
            details={"error": str(e)},
        ) from e

    try:
        return decode_subject(claims["sub"], shape)
    except ValidationError as e:
        raise VerificationFailure(
            VerificationFailure.PAYLOAD,
            "Token subject does not match the requested shape",
            details={"error_count": e.error_count()},
        ) from e
    except (PydanticUserError, TypeError) as e:
        raise VerificationFailure(
            VerificationFailure.PAYLOAD,
            "Token subject cannot be decoded into the requested shape",
            details={"error": str(e)},
        ) from e


def read(value: str, key: bytes, shape: Any) -> Token:
    """Parse ``value`` into a token; failures yield an invalid token, never an exception."""
    try:
        subject = verify(value, key, shape)
    except VerificationFailure as failure:
        if failure.reason == VerificationFailure.PAYLOAD:
            logger.warning("Failed to parse token subject", shape=_shape_name(shape), **failure.details)
        elif failure.reason != VerificationFailure.EXPIRED:
            logger.debug("Token rejected", reason=failure.reason)
        return Token.rejected(value)
    return Token(value=value, subject=subject, invalid=False)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)
