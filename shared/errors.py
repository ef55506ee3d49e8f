"""
Shared error handling for stateless token services.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class StatelessTokenError(Exception):
    """Base exception for stateless token errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class ConfigurationError(StatelessTokenError):
    """Missing or malformed token policy configuration."""

    def __init__(self, message: str = "Invalid token configuration", details: Optional[Dict[str, Any]] = None):
        super().__init__("CONFIGURATION_ERROR", message, details)


class WeakKeyError(ConfigurationError):
    """Signing key shorter than the HMAC algorithm requires."""

    def __init__(self, message: str = "Signing key is too weak", details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.code = "WEAK_KEY_ERROR"


class SerializationError(StatelessTokenError):
    """Subject could not be encoded into a token."""

    def __init__(self, message: str = "Token subject is not serializable", details: Optional[Dict[str, Any]] = None):
        super().__init__("SERIALIZATION_ERROR", message, details)


class VerificationFailure(StatelessTokenError):
    """Token string failed signature, expiration or payload checks."""

    EXPIRED = "expired"
    SIGNATURE = "signature"
    MALFORMED = "malformed"
    PAYLOAD = "payload"

    def __init__(self, reason: str, message: str = "Token verification failed", details: Optional[Dict[str, Any]] = None):
        details = dict(details or {})
        details.setdefault("reason", reason)
        super().__init__("VERIFICATION_FAILURE", message, details)
        self.reason = reason
