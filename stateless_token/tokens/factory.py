"""
Token factories for the general, access and refresh token kinds.
"""

from typing import Any, Optional, Type, TypeVar, Union

from stateless_token.policy import TokenKind, TokenPolicy, get_policy

from . import codec
from .token import Token

T = TypeVar("T")


class TokenFactory:
    """Create and parse tokens of one kind.

    The kind decides which policy key signs the token and which timeout
    applies when none is given. ``policy`` may be passed to every call;
    otherwise the process-wide policy is used.
    """

    def __init__(self, kind: TokenKind):
        self.kind = kind

    def __repr__(self) -> str:
        return f"TokenFactory({self.kind.value})"

    def create(
        self,
        subject: T,
        timeout_seconds: Optional[int] = None,
        *,
        policy: Optional[TokenPolicy] = None,
    ) -> Token[T]:
        policy = get_policy(policy)
        if timeout_seconds is None:
            timeout_seconds = policy.timeout_for(self.kind)
        return codec.sign(subject, policy.key_for(self.kind), timeout_seconds)

    def parse(
        self,
        value: str,
        shape: Union[Type[T], Any],
        *,
        policy: Optional[TokenPolicy] = None,
    ) -> Token[T]:
        policy = get_policy(policy)
        return codec.read(value, policy.key_for(self.kind), shape)

    def verify(
        self,
        value: str,
        shape: Union[Type[T], Any],
        *,
        policy: Optional[TokenPolicy] = None,
    ) -> T:
        """Like ``parse`` but raises ``VerificationFailure`` instead of returning an invalid token."""
        policy = get_policy(policy)
        return codec.verify(value, policy.key_for(self.kind), shape)

    def expire(self, subject: Any, *, policy: Optional[TokenPolicy] = None) -> Token:
        """Mint an already expired token, e.g. to overwrite a client credential on logout."""
        return self.create(subject, -1, policy=policy)


tokens = TokenFactory(TokenKind.TOKEN)
access_tokens = TokenFactory(TokenKind.ACCESS)
refresh_tokens = TokenFactory(TokenKind.REFRESH)
