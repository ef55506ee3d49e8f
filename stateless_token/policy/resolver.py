"""
Resolve a ``TokenPolicy`` from flat configuration properties.
"""

from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from shared.config import (
    ACCESS_SECRET,
    ACCESS_TIMEOUT,
    REFRESH_SECRET,
    REFRESH_TIMEOUT,
    TOKEN_SECRET,
    TOKEN_TIMEOUT,
    StatelessTokenSettings,
    get_settings,
)
from shared.errors import ConfigurationError
from shared.logging import get_logger

from .holder import PolicyAware, policy_holder
from .policy import TokenPolicy, TokenPolicyBuilder

logger = get_logger("stateless_token.resolver")

PolicyCustomizer = Callable[[TokenPolicyBuilder], None]


def customizer(order: int = 0) -> Callable[[PolicyCustomizer], PolicyCustomizer]:
    """Mark a function as a policy customizer running at ``order``.

    Customizers run in ascending order; ties keep registration order.
    """

    def decorator(func: PolicyCustomizer) -> PolicyCustomizer:
        func.order = order
        return func

    return decorator


def _text(properties: Mapping[str, Any], key: str) -> Optional[str]:
    value = properties.get(key)
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


def _seconds(properties: Mapping[str, Any], key: str) -> Optional[int]:
    value = properties.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = _text(properties, key)
    if text is None:
        return None
    try:
        return int(text)
    except ValueError:
        raise ConfigurationError(
            f"{key} must be an integer number of seconds",
            details={"setting": key, "value": text},
        ) from None


def _ordered(customizers: Iterable[PolicyCustomizer]) -> Sequence[PolicyCustomizer]:
    return sorted(customizers, key=lambda c: getattr(c, "order", 0))


def resolve_policy(
    properties: Mapping[str, Any],
    customizers: Iterable[PolicyCustomizer] = (),
    aware: Iterable[PolicyAware] = (),
    *,
    weak_key_hint: bool = True,
) -> TokenPolicy:
    """Build the token policy from configuration properties.

    Environment values are applied first, then customizers may overwrite any
    field of the in-progress builder, and only then are required fields
    checked. The frozen policy is pushed once to every policy-aware consumer.

    Args:
        properties: Flat ``stateless.token.*`` mapping; missing and blank values are equivalent
        customizers: Callables receiving the ``TokenPolicyBuilder``
        aware: Consumers notified with the resolved policy
        weak_key_hint: Log a replacement secret when a configured key is weak

    Returns:
        The resolved, immutable policy
    """
    builder = TokenPolicy.builder(weak_key_hint=weak_key_hint)

    token_secret = _text(properties, TOKEN_SECRET)
    if token_secret is not None:
        builder.token_secret(token_secret)

    access_secret = _text(properties, ACCESS_SECRET)
    if access_secret is not None:
        builder.access_secret(access_secret)
    else:
        logger.debug(f"{ACCESS_SECRET} not provided, using {TOKEN_SECRET}")

    refresh_secret = _text(properties, REFRESH_SECRET)
    if refresh_secret is not None:
        builder.refresh_secret(refresh_secret)
    else:
        logger.debug(f"{REFRESH_SECRET} not provided, using {TOKEN_SECRET}")

    token_timeout = _seconds(properties, TOKEN_TIMEOUT)
    if token_timeout is not None:
        builder.token_timeout(token_timeout)

    access_timeout = _seconds(properties, ACCESS_TIMEOUT)
    if access_timeout is not None:
        builder.access_timeout(access_timeout)

    refresh_timeout = _seconds(properties, REFRESH_TIMEOUT)
    if refresh_timeout is not None:
        builder.refresh_timeout(refresh_timeout)

    for customize in _ordered(customizers):
        customize(builder)

    policy = builder.build()

    for consumer in aware:
        consumer.set_token_policy(policy)

    logger.info(
        "Token policy resolved",
        token_timeout_seconds=policy.token_timeout_seconds,
        access_timeout_seconds=policy.access_timeout_seconds,
        refresh_timeout_seconds=policy.refresh_timeout_seconds,
    )
    return policy


def configure_policy(
    settings: Optional[StatelessTokenSettings] = None,
    customizers: Iterable[PolicyCustomizer] = (),
    aware: Iterable[PolicyAware] = (),
) -> TokenPolicy:
    """Resolve the policy from settings and install it in the process-wide holder."""
    if settings is None:
        settings = get_settings()
    return resolve_policy(
        settings.to_properties(),
        customizers,
        [policy_holder, *aware],
        weak_key_hint=settings.weak_key_hint,
    )
