"""
Shared utilities for stateless token services.

This package aggregates the ambient building blocks used by the token
packages:

- config: Token settings via pydantic-settings
- logging: Structured logging via structlog
- errors: Canonical error types and responses
- test_helpers: Test data and hand-made token factories

Do not import from stateless_token into shared/.
"""
