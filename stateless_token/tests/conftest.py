"""
Shared fixtures for stateless token tests.
"""

import pytest

from shared.test_helpers import (
    TEST_ACCESS_SECRET,
    TEST_REFRESH_SECRET,
    TEST_TOKEN_SECRET,
    TestUser,
)
from stateless_token.policy import TokenPolicy, policy_holder


@pytest.fixture(autouse=True)
def clear_policy_holder():
    """Reset the process-wide policy between tests."""
    policy_holder.clear()
    yield
    policy_holder.clear()


@pytest.fixture
def user():
    """Create test user."""
    return TestUser(id=1, name="Administrator")


@pytest.fixture
def policy():
    """Policy with only the general secret and timeout."""
    return TokenPolicy.builder().token_secret(TEST_TOKEN_SECRET).token_timeout(300).build()


@pytest.fixture
def split_policy():
    """Policy with distinct access and refresh secrets."""
    return (
        TokenPolicy.builder()
        .token_secret(TEST_TOKEN_SECRET)
        .access_secret(TEST_ACCESS_SECRET)
        .refresh_secret(TEST_REFRESH_SECRET)
        .token_timeout(300)
        .build()
    )


@pytest.fixture
def installed_policy(policy):
    """Install the general policy in the process-wide holder."""
    policy_holder.set_token_policy(policy)
    return policy
