"""Token policy: signing keys, timeouts and their resolution."""

from .holder import PolicyAware, PolicyHolder, get_policy, policy_holder
from .keys import MIN_KEY_BYTES, derive_key, generate_secret
from .policy import (
    DEFAULT_ACCESS_TIMEOUT_SECONDS,
    DEFAULT_REFRESH_TIMEOUT_SECONDS,
    TokenKind,
    TokenPolicy,
    TokenPolicyBuilder,
)
from .resolver import PolicyCustomizer, configure_policy, customizer, resolve_policy

__all__ = [
    "DEFAULT_ACCESS_TIMEOUT_SECONDS",
    "DEFAULT_REFRESH_TIMEOUT_SECONDS",
    "MIN_KEY_BYTES",
    "PolicyAware",
    "PolicyCustomizer",
    "PolicyHolder",
    "TokenKind",
    "TokenPolicy",
    "TokenPolicyBuilder",
    "configure_policy",
    "customizer",
    "derive_key",
    "generate_secret",
    "get_policy",
    "policy_holder",
    "resolve_policy",
]
