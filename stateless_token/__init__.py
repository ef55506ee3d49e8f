"""
Stateless signed tokens.

Two layers:

- policy: signing keys and timeouts, resolved once from configuration
- tokens: create/parse general, access and refresh tokens against a policy

Configuration, errors and logging live in the ``shared`` package.
"""

from shared.errors import (
    ConfigurationError,
    SerializationError,
    StatelessTokenError,
    VerificationFailure,
    WeakKeyError,
)

from .policy import (
    PolicyAware,
    TokenKind,
    TokenPolicy,
    TokenPolicyBuilder,
    configure_policy,
    customizer,
    get_policy,
    policy_holder,
    resolve_policy,
)
from .tokens import (
    Token,
    TokenFactory,
    TokenPair,
    access_tokens,
    issue_token_pair,
    refresh_tokens,
    renew_token_pair,
    tokens,
)

__version__ = "1.0.0"

__all__ = [
    "ConfigurationError",
    "PolicyAware",
    "SerializationError",
    "StatelessTokenError",
    "Token",
    "TokenFactory",
    "TokenKind",
    "TokenPair",
    "TokenPolicy",
    "TokenPolicyBuilder",
    "VerificationFailure",
    "WeakKeyError",
    "access_tokens",
    "configure_policy",
    "customizer",
    "get_policy",
    "issue_token_pair",
    "policy_holder",
    "refresh_tokens",
    "renew_token_pair",
    "resolve_policy",
    "tokens",
]
