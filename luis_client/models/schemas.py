"""Pydantic schemas for LUIS models, requests and results."""

from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Dict, Any, Union
from enum import Enum


# ===========================================
# Model configuration
# ===========================================

class ApiVersion(str, Enum):
    """LUIS endpoint API versions."""
    V1 = "v1"  # legacy, model id sent as the `id` query parameter
    V2 = "v2.0"


DEFAULT_URI_BASES = {
    ApiVersion.V1: "https://api.projectoxford.ai/luis/v1/application",
    ApiVersion.V2: "https://westus.api.cognitive.microsoft.com/luis/v2.0/apps/",
}


class LuisOptions(BaseModel):
    """Optional LUIS query parameters.

    Every field is tri-state: None means "not sent", so an explicit False
    still ends up in the query string.
    """
    log: Optional[bool] = None
    spell_check: Optional[bool] = None
    staging: Optional[bool] = None
    timezone_offset: Optional[float] = None
    verbose: Optional[bool] = None
    bing_spell_check_subscription_key: Optional[str] = None


OPTION_FIELDS = tuple(LuisOptions.model_fields)


class LuisModel(LuisOptions):
    """A LUIS application: identity, endpoint, threshold and default options."""
    model_id: Optional[str] = None
    subscription_key: Optional[str] = None
    uri_base: Optional[str] = None
    api_version: Union[ApiVersion, str] = ApiVersion.V2
    threshold: float = 0.0

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    @property
    def is_configured(self) -> bool:
        """True when both the model id and the subscription key are non-empty."""
        return bool(self.model_id) and bool(self.subscription_key)

    @property
    def endpoint(self) -> Optional[str]:
        """Configured base URI, or the public endpoint for the API version."""
        if self.uri_base:
            return self.uri_base
        try:
            return DEFAULT_URI_BASES[ApiVersion(self.api_version)]
        except ValueError:
            return None

    def modify_request(self, request: "LuisRequest") -> "LuisRequest":
        """Copy every option set on the model onto the request."""
        for name in OPTION_FIELDS:
            value = getattr(self, name)
            if value is not None:
                setattr(request, name, value)
        return request


class LuisRequest(LuisOptions):
    """A single LUIS query and the parameters sent with it."""
    query: str = ""
    # Appended to the query string as-is; must already be URL encoded.
    extra_parameters: Optional[str] = None
    # Deprecated action-binding parameters.
    context_id: Optional[str] = None
    force_set: Optional[str] = None


# ===========================================
# Results
# ===========================================

class IntentRecommendation(BaseModel):
    """An intent and its confidence score."""
    intent: Optional[str] = None
    score: Optional[float] = None
    actions: Optional[List[Dict[str, Any]]] = None

    model_config = ConfigDict(extra="allow")


class EntityRecommendation(BaseModel):
    """An entity recognized in the query."""
    entity: Optional[str] = None
    type: Optional[str] = None
    start_index: Optional[int] = Field(None, alias="startIndex")
    end_index: Optional[int] = Field(None, alias="endIndex")
    score: Optional[float] = None
    role: Optional[str] = None
    resolution: Optional[Dict[str, Any]] = None

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class LuisResult(BaseModel):
    """Deserialized LUIS response."""
    query: Optional[str] = None
    altered_query: Optional[str] = Field(None, alias="alteredQuery")
    top_scoring_intent: Optional[IntentRecommendation] = Field(None, alias="topScoringIntent")
    intents: Optional[List[IntentRecommendation]] = None
    entities: Optional[List[EntityRecommendation]] = None
    composite_entities: Optional[List[Dict[str, Any]]] = Field(None, alias="compositeEntities")
    dialog: Optional[Dict[str, Any]] = None
    sentiment_analysis: Optional[Dict[str, Any]] = Field(None, alias="sentimentAnalysis")

    model_config = ConfigDict(extra="allow", populate_by_name=True)
