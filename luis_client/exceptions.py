"""Errors raised by the LUIS client."""

from typing import Optional


class LuisError(Exception):
    """Base class for all LUIS client errors."""
    pass


class ConfigurationError(LuisError):
    """Raised when the model is missing its id or subscription key."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"LUIS model configuration is missing '{field}'")


class UnsupportedVersionError(LuisError, ValueError):
    """Raised when the model names an API version this client cannot build URLs for."""

    def __init__(self, api_version):
        self.api_version = api_version
        super().__init__(f"{api_version} is not a valid LUIS api version")


class UpstreamHttpError(LuisError):
    """Raised when LUIS answers with a non-success status code."""

    def __init__(self, status_code: int, reason: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        message = f"LUIS request failed with status {status_code}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UpstreamConnectionError(LuisError):
    """Raised when no response could be obtained (connection failure, timeout, invalid URL)."""
    pass


class ResponseParseError(LuisError):
    """Raised when the response body cannot be deserialized into a LuisResult."""

    def __init__(self, message: str = "Unable to deserialize the LUIS response."):
        super().__init__(message)
