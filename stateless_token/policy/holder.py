"""
Process-wide holder for the active token policy.

Call sites that are not handed a policy explicitly read it from here. The
holder is written once at startup (or once per test scenario) and read
concurrently afterwards; since ``TokenPolicy`` is immutable, reads need no
lock.
"""

import threading
from typing import Optional, Protocol, runtime_checkable

from shared.errors import ConfigurationError
from shared.logging import get_logger

from .policy import TokenPolicy

logger = get_logger("stateless_token.holder")


@runtime_checkable
class PolicyAware(Protocol):
    """Receives the resolved policy once, when it becomes available."""

    def set_token_policy(self, policy: TokenPolicy) -> None:
        ...


class PolicyHolder:
    """Single-writer holder of the active ``TokenPolicy``."""

    def __init__(self):
        self._policy: Optional[TokenPolicy] = None
        self._lock = threading.Lock()

    def set_token_policy(self, policy: TokenPolicy) -> None:
        if not isinstance(policy, TokenPolicy):
            raise ConfigurationError("Policy holder only accepts TokenPolicy instances")
        with self._lock:
            replaced = self._policy is not None
            self._policy = policy
        if replaced:
            logger.info("Token policy replaced")
        else:
            logger.debug("Token policy registered")

    def get_token_policy(self) -> TokenPolicy:
        policy = self._policy
        if policy is None:
            raise ConfigurationError("Token policy has not been configured")
        return policy

    @property
    def configured(self) -> bool:
        return self._policy is not None

    def clear(self) -> None:
        """Forget the active policy. Intended for test teardown."""
        with self._lock:
            self._policy = None


policy_holder = PolicyHolder()


def get_policy(policy: Optional[TokenPolicy] = None) -> TokenPolicy:
    """Return ``policy`` if given, otherwise the process-wide one."""
    if policy is not None:
        return policy
    return policy_holder.get_token_policy()
