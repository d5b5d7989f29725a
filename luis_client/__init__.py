"""Asynchronous client for the LUIS natural-language-understanding API."""

from luis_client.clients.luis_service import LuisService
from luis_client.exceptions import (
    LuisError,
    ConfigurationError,
    UnsupportedVersionError,
    UpstreamHttpError,
    UpstreamConnectionError,
    ResponseParseError,
)
from luis_client.models.schemas import (
    ApiVersion,
    LuisModel,
    LuisRequest,
    LuisResult,
    IntentRecommendation,
    EntityRecommendation,
)
from luis_client.services.request_builder import build_uri

__all__ = [
    "LuisService",
    "LuisError",
    "ConfigurationError",
    "UnsupportedVersionError",
    "UpstreamHttpError",
    "UpstreamConnectionError",
    "ResponseParseError",
    "ApiVersion",
    "LuisModel",
    "LuisRequest",
    "LuisResult",
    "IntentRecommendation",
    "EntityRecommendation",
    "build_uri",
]
