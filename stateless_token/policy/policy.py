"""
Immutable token policy and its builder.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from shared.errors import ConfigurationError
from shared.logging import get_logger

from .keys import derive_key

logger = get_logger("stateless_token.policy")

DEFAULT_ACCESS_TIMEOUT_SECONDS = 60 * 30
DEFAULT_REFRESH_TIMEOUT_SECONDS = 60 * 60 * 12


class TokenKind(str, Enum):
    """Token kinds, each bound to its own policy key and timeout."""

    TOKEN = "token"
    ACCESS = "access"
    REFRESH = "refresh"


@dataclass(frozen=True)
class TokenPolicy:
    """Signing keys and timeouts shared by every token operation.

    Keys are excluded from ``repr`` so a policy can be logged safely.
    """

    token_key: bytes = field(repr=False)
    access_key: bytes = field(repr=False)
    refresh_key: bytes = field(repr=False)
    token_timeout_seconds: int
    access_timeout_seconds: int = DEFAULT_ACCESS_TIMEOUT_SECONDS
    refresh_timeout_seconds: int = DEFAULT_REFRESH_TIMEOUT_SECONDS

    @classmethod
    def builder(cls, *, weak_key_hint: bool = True) -> "TokenPolicyBuilder":
        return TokenPolicyBuilder(weak_key_hint=weak_key_hint)

    def key_for(self, kind: TokenKind) -> bytes:
        if kind is TokenKind.ACCESS:
            return self.access_key
        if kind is TokenKind.REFRESH:
            return self.refresh_key
        return self.token_key

    def timeout_for(self, kind: TokenKind) -> int:
        if kind is TokenKind.ACCESS:
            return self.access_timeout_seconds
        if kind is TokenKind.REFRESH:
            return self.refresh_timeout_seconds
        return self.token_timeout_seconds


def _check_timeout(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{name} must be an integer number of seconds", details={"setting": name})
    if value < 0:
        raise ConfigurationError(f"{name} must not be negative", details={"setting": name, "value": value})
    return value


class TokenPolicyBuilder:
    """Mutable, in-progress policy handed to customizers before freezing."""

    def __init__(self, *, weak_key_hint: bool = True):
        self.weak_key_hint = weak_key_hint
        self.token_key: Optional[bytes] = None
        self.access_key: Optional[bytes] = None
        self.refresh_key: Optional[bytes] = None
        self.token_timeout_seconds: Optional[int] = None
        self.access_timeout_seconds: Optional[int] = None
        self.refresh_timeout_seconds: Optional[int] = None

    def token_secret(self, secret: str) -> "TokenPolicyBuilder":
        self.token_key = derive_key(secret, name="tokenSecret", weak_key_hint=self.weak_key_hint)
        return self

    def access_secret(self, secret: str) -> "TokenPolicyBuilder":
        self.access_key = derive_key(secret, name="accessTokenSecret", weak_key_hint=self.weak_key_hint)
        return self

    def refresh_secret(self, secret: str) -> "TokenPolicyBuilder":
        self.refresh_key = derive_key(secret, name="refreshTokenSecret", weak_key_hint=self.weak_key_hint)
        return self

    def token_timeout(self, seconds: int) -> "TokenPolicyBuilder":
        self.token_timeout_seconds = _check_timeout(seconds, "tokenTimeout")
        return self

    def access_timeout(self, seconds: int) -> "TokenPolicyBuilder":
        self.access_timeout_seconds = _check_timeout(seconds, "accessTokenTimeout")
        return self

    def refresh_timeout(self, seconds: int) -> "TokenPolicyBuilder":
        self.refresh_timeout_seconds = _check_timeout(seconds, "refreshTokenTimeout")
        return self

    def build(self) -> TokenPolicy:
        """Freeze the builder into a ``TokenPolicy``.

        Access and refresh keys fall back to the token key. Their timeouts
        fall back to fixed defaults (30 minutes and 12 hours), never to the
        general token timeout.
        """
        if self.token_key is None:
            raise ConfigurationError("token secret is required", details={"setting": "tokenSecret"})
        if self.token_timeout_seconds is None:
            raise ConfigurationError("token timeout is required", details={"setting": "tokenTimeout"})

        access_timeout = self.access_timeout_seconds
        if access_timeout is None:
            logger.debug("Access token timeout not provided, using default", seconds=DEFAULT_ACCESS_TIMEOUT_SECONDS)
            access_timeout = DEFAULT_ACCESS_TIMEOUT_SECONDS

        refresh_timeout = self.refresh_timeout_seconds
        if refresh_timeout is None:
            logger.debug("Refresh token timeout not provided, using default", seconds=DEFAULT_REFRESH_TIMEOUT_SECONDS)
            refresh_timeout = DEFAULT_REFRESH_TIMEOUT_SECONDS

        return TokenPolicy(
            token_key=self.token_key,
            access_key=self.access_key if self.access_key is not None else self.token_key,
            refresh_key=self.refresh_key if self.refresh_key is not None else self.token_key,
            token_timeout_seconds=self.token_timeout_seconds,
            access_timeout_seconds=access_timeout,
            refresh_timeout_seconds=refresh_timeout,
        )
