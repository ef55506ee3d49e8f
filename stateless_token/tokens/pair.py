"""
Access/refresh token pairs for credential renewal.
"""

from dataclasses import dataclass
from typing import Any, Optional

from stateless_token.policy import TokenKind, TokenPolicy, get_policy
from shared.logging import get_logger

from .factory import access_tokens, refresh_tokens
from .token import Token

logger = get_logger("stateless_token.pair")


@dataclass(frozen=True)
class TokenPair:
    """Access token plus the refresh token that renews it."""

    access: Token
    refresh: Token
    expires_in: int
    token_type: str = "Bearer"


def issue_token_pair(subject: Any, *, policy: Optional[TokenPolicy] = None) -> TokenPair:
    """Issue an access and a refresh token for the same subject."""
    policy = get_policy(policy)
    return TokenPair(
        access=access_tokens.create(subject, policy=policy),
        refresh=refresh_tokens.create(subject, policy=policy),
        expires_in=policy.timeout_for(TokenKind.ACCESS),
    )


def renew_token_pair(refresh_value: str, shape: Any, *, policy: Optional[TokenPolicy] = None) -> Optional[TokenPair]:
    """Issue a fresh pair from a refresh token.

    Returns None when the refresh token is invalid or expired.
    """
    policy = get_policy(policy)
    refresh = refresh_tokens.parse(refresh_value, shape, policy=policy)
    if refresh.invalid:
        logger.info("Token renewal refused")
        return None
    return issue_token_pair(refresh.subject, policy=policy)
