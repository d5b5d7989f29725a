"""HTTP client for the LUIS endpoint API."""

import httpx
from pydantic import ValidationError
from typing import Callable, Optional, Union
import logging

from luis_client.exceptions import (
    ResponseParseError,
    UpstreamConnectionError,
    UpstreamHttpError,
)
from luis_client.models.schemas import LuisModel, LuisRequest, LuisResult
from luis_client.services.request_builder import build_uri

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 20.0
NO_MATCH_INTENT = "None"

RequestHook = Callable[[LuisRequest], LuisRequest]


def fix_result(result: LuisResult) -> LuisResult:
    """Make sure `intents` holds at least the top scoring intent.

    v2.0 only returns the full intent list when `verbose` is set.
    """
    if not result.intents and result.top_scoring_intent is not None:
        result.intents = [result.top_scoring_intent]
    return result


def apply_threshold(result: LuisResult, threshold: float) -> LuisResult:
    """Replace a top intent that does not beat the threshold with "None" at 1.0."""
    top = result.top_scoring_intent
    if top is None:
        return result
    if top.score is not None and top.score > threshold:
        return result

    top.intent = NO_MATCH_INTENT
    top.score = 1.0
    return result


class LuisService:
    """Client for a single LUIS model."""

    def __init__(
        self,
        model: LuisModel,
        client: Optional[httpx.AsyncClient] = None,
        modify_request: Optional[RequestHook] = None,
        timeout: float = DEFAULT_TIMEOUT
    ):
        self.model = model
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)
        self.timeout = timeout
        self._modify_request = modify_request or model.modify_request

    def modify_request(self, request: LuisRequest) -> LuisRequest:
        """Run the request modification hook."""
        return self._modify_request(request)

    def build_uri(self, request: LuisRequest) -> str:
        """Build the query URL for a request, without running the hook."""
        return build_uri(request, self.model)

    def build_uri_for_text(self, text: str) -> str:
        """Build the query URL for plain text, after running the hook."""
        return self.build_uri(self.modify_request(LuisRequest(query=text)))

    async def query(self, query: Union[str, LuisRequest]) -> LuisResult:
        """
        Query LUIS with text or a prepared request.

        The request modification hook runs before the URL is built.
        """
        if isinstance(query, str):
            query = LuisRequest(query=query)
        request = self.modify_request(query)
        return await self.query_uri(self.build_uri(request))

    async def query_uri(self, uri: str) -> LuisResult:
        """
        Query LUIS with an already built URL.

        Raises:
            UpstreamHttpError: LUIS answered with a non-success status
            UpstreamConnectionError: no response was received, or the URL is invalid
            ResponseParseError: the body is not a LUIS result
        """
        try:
            response = await self.client.get(uri, timeout=self.timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error(f"LUIS request failed: {e!r}")
            raise UpstreamConnectionError(f"LUIS request failed: {e}") from e

        if not response.is_success:
            logger.error(f"LUIS returned status {response.status_code}")
            raise UpstreamHttpError(response.status_code, response.reason_phrase)

        body = response.text
        try:
            result = LuisResult.model_validate_json(body)
        except ValidationError as e:
            logger.error(f"Unable to deserialize LUIS response: {e.error_count()} error(s)")
            raise ResponseParseError() from e

        fix_result(result)
        apply_threshold(result, self.model.threshold)
        return result

    async def close(self):
        """Close the HTTP client if this service created it."""
        if self._owns_client:
            await self.client.aclose()
