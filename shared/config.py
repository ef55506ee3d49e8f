"""
Shared configuration management for stateless token services.
"""

from typing import Dict, Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Flat property names understood by the policy resolver.
TOKEN_SECRET = "stateless.token.secret"
TOKEN_TIMEOUT = "stateless.token.timeout"
ACCESS_SECRET = "stateless.token.access.secret"
ACCESS_TIMEOUT = "stateless.token.access.timeout"
REFRESH_SECRET = "stateless.token.refresh.secret"
REFRESH_TIMEOUT = "stateless.token.refresh.timeout"


class StatelessTokenSettings(BaseSettings):
    """Token policy inputs read from ``STATELESS_TOKEN_*`` variables.

    Values stay raw strings; validation and fallback belong to the resolver.
    """

    model_config = SettingsConfigDict(
        env_prefix="STATELESS_TOKEN_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # General token
    secret: Optional[str] = Field(default=None)
    timeout: Optional[Union[int, str]] = Field(default=None)

    # Access token
    access_secret: Optional[str] = Field(default=None)
    access_timeout: Optional[Union[int, str]] = Field(default=None)

    # Refresh token
    refresh_secret: Optional[str] = Field(default=None)
    refresh_timeout: Optional[Union[int, str]] = Field(default=None)

    # Diagnostics
    weak_key_hint: bool = Field(default=True)

    def to_properties(self) -> Dict[str, Optional[Union[int, str]]]:
        """Flatten into the property mapping consumed by the resolver."""
        return {
            TOKEN_SECRET: self.secret,
            TOKEN_TIMEOUT: self.timeout,
            ACCESS_SECRET: self.access_secret,
            ACCESS_TIMEOUT: self.access_timeout,
            REFRESH_SECRET: self.refresh_secret,
            REFRESH_TIMEOUT: self.refresh_timeout,
        }


def get_settings(**overrides) -> StatelessTokenSettings:
    """Get token settings, with keyword overrides taking precedence over the environment."""
    return StatelessTokenSettings(**overrides)
