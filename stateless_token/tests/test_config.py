"""
Tests for token settings and the error hierarchy.
"""

import pytest

from shared.config import StatelessTokenSettings, get_settings
from shared.errors import (
    ConfigurationError,
    ErrorResponse,
    SerializationError,
    StatelessTokenError,
    VerificationFailure,
    WeakKeyError,
)
from shared.test_helpers import TEST_TOKEN_SECRET, test_environment


class TestStatelessTokenSettings:
    """Test cases for StatelessTokenSettings."""

    def test_reads_prefixed_environment(self, monkeypatch):
        """Settings come from STATELESS_TOKEN_* variables."""
        for key, value in test_environment.get_mock_config().items():
            monkeypatch.setenv(key, value)

        settings = StatelessTokenSettings()

        assert settings.secret == TEST_TOKEN_SECRET
        assert settings.timeout == "300"
        assert settings.access_timeout == "120"
        assert settings.refresh_timeout == "3600"
        assert settings.weak_key_hint is True

    def test_defaults_are_empty(self, monkeypatch):
        """Nothing configured means nothing set."""
        for key in test_environment.get_mock_config():
            monkeypatch.delenv(key, raising=False)

        settings = StatelessTokenSettings(_env_file=None)

        assert settings.secret is None
        assert settings.timeout is None

    def test_to_properties(self):
        """Settings flatten into resolver properties."""
        settings = get_settings(secret=TEST_TOKEN_SECRET, timeout=300, refresh_secret="")

        properties = settings.to_properties()

        assert properties["stateless.token.secret"] == TEST_TOKEN_SECRET
        assert properties["stateless.token.timeout"] == 300
        assert properties["stateless.token.refresh.secret"] == ""
        assert properties["stateless.token.access.timeout"] is None
        assert len(properties) == 6

    def test_unrelated_variables_ignored(self, monkeypatch):
        """Only token inputs are read; other prefixed variables are ignored."""
        monkeypatch.setenv("STATELESS_TOKEN_LOG_LEVEL", "debug")

        settings = StatelessTokenSettings(_env_file=None)

        assert not hasattr(settings, "log_level")
        assert set(settings.model_dump()) == {
            "secret",
            "timeout",
            "access_secret",
            "access_timeout",
            "refresh_secret",
            "refresh_timeout",
            "weak_key_hint",
        }

    def test_hint_flag_from_environment(self, monkeypatch):
        """The weak-key hint can be switched off from the environment."""
        monkeypatch.setenv("STATELESS_TOKEN_WEAK_KEY_HINT", "false")

        assert StatelessTokenSettings().weak_key_hint is False


class TestErrors:
    """Test cases for the error hierarchy."""

    @pytest.mark.parametrize(
        "error, code",
        [
            (ConfigurationError(), "CONFIGURATION_ERROR"),
            (WeakKeyError(), "WEAK_KEY_ERROR"),
            (SerializationError(), "SERIALIZATION_ERROR"),
            (VerificationFailure("expired"), "VERIFICATION_FAILURE"),
        ],
    )
    def test_codes(self, error, code):
        """Every error carries its code."""
        assert isinstance(error, StatelessTokenError)
        assert error.code == code

    def test_to_response(self):
        """Errors convert to the standard response model."""
        error = ConfigurationError("token secret is required", details={"setting": "tokenSecret"})

        response = error.to_response()

        assert isinstance(response, ErrorResponse)
        assert response.code == "CONFIGURATION_ERROR"
        assert response.message == "token secret is required"
        assert response.details == {"setting": "tokenSecret"}
        assert str(error) == "token secret is required"

    def test_weak_key_is_configuration_error(self):
        """Weak keys abort startup like any configuration error."""
        with pytest.raises(ConfigurationError):
            raise WeakKeyError()

    def test_verification_reason(self):
        """Verification failures expose their reason."""
        failure = VerificationFailure(VerificationFailure.PAYLOAD, details={"error_count": 2})

        assert failure.reason == "payload"
        assert failure.details == {"error_count": 2, "reason": "payload"}
