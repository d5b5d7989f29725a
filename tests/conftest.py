"""
Pytest configuration and fixtures for luis_client tests.

LUIS is never contacted: services are wired to an httpx.MockTransport that
records every request it receives.
"""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from luis_client.clients.luis_service import LuisService
from luis_client.models.schemas import ApiVersion, LuisModel


# =========================================================================
# Models
# =========================================================================


@pytest.fixture
def v2_model() -> LuisModel:
    """A v2.0 model with an explicit endpoint."""
    return LuisModel(
        model_id="app-123",
        subscription_key="key/with+chars",
        uri_base="https://westus.api.cognitive.microsoft.com/luis/v2.0/apps/",
        api_version=ApiVersion.V2,
        threshold=0.5,
    )


@pytest.fixture
def v1_model() -> LuisModel:
    """A legacy v1 model."""
    return LuisModel(
        model_id="app-123",
        subscription_key="secret",
        uri_base="https://api.projectoxford.ai/luis/v1/application",
        api_version=ApiVersion.V1,
    )


# =========================================================================
# Responses
# =========================================================================


@pytest.fixture
def weather_payload() -> Dict[str, Any]:
    """A v2.0 response without the intent list (verbose not set)."""
    return {
        "query": "what's the weather in seattle",
        "topScoringIntent": {"intent": "Weather", "score": 0.9},
        "entities": [
            {
                "entity": "seattle",
                "type": "Location",
                "startIndex": 23,
                "endIndex": 29,
                "score": 0.87,
            }
        ],
        "sentimentAnalysis": {"label": "neutral", "score": 0.5},
    }


class RecordingTransport:
    """Builds an httpx.MockTransport and keeps the requests it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


def json_response(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=json.dumps(payload))
    return handler


@pytest.fixture
def make_service(v2_model):
    """Factory for a LuisService answering every GET with `handler`."""
    def factory(handler, model: LuisModel = None, **kwargs):
        recorder = RecordingTransport(handler)
        client = httpx.AsyncClient(transport=recorder.transport())
        service = LuisService(model or v2_model, client=client, **kwargs)
        return service, recorder

    return factory
