"""Builds LUIS query URLs.

The parameter order is fixed so that two identical requests always render
the same URL:

    subscription-key, q, [id], log, spellCheck, staging, timezoneOffset,
    verbose, bing-spell-check-subscription-key, contextId, forceSet,
    extra parameters
"""

from typing import List, Union
from urllib.parse import quote, urlsplit, urlunsplit
import logging

from luis_client.exceptions import ConfigurationError, UnsupportedVersionError
from luis_client.models.schemas import ApiVersion, LuisModel, LuisRequest

logger = logging.getLogger(__name__)

# (attribute, query parameter) for the tri-state options, in render order
OPTION_PARAMETERS = (
    ("log", "log"),
    ("spell_check", "spellCheck"),
    ("staging", "staging"),
    ("timezone_offset", "timezoneOffset"),
    ("verbose", "verbose"),
)


def escape(value: str) -> str:
    """Percent-encode everything except RFC 3986 unreserved characters."""
    return quote(value, safe="")


def format_value(value) -> str:
    """Render an option value the way LUIS expects it on the query string."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def resolve_api_version(api_version: Union[ApiVersion, str]) -> ApiVersion:
    try:
        return ApiVersion(api_version)
    except ValueError:
        raise UnsupportedVersionError(api_version)


def mask_uri(uri: str) -> str:
    """Hide the subscription key so a URL can be logged."""
    parts = urlsplit(uri)
    params = [
        "subscription-key=***" if p.startswith("subscription-key=") else p
        for p in parts.query.split("&")
    ]
    return urlunsplit(parts._replace(query="&".join(params)))


def build_uri(request: LuisRequest, model: LuisModel) -> str:
    """
    Render the query URL for a request against a LUIS model.

    Raises:
        ConfigurationError: the model id or subscription key is missing or empty
        UnsupportedVersionError: the model's API version is unknown

    `request.extra_parameters` is trusted input: it is appended verbatim,
    without validation or escaping.
    """
    if not model.model_id:
        raise ConfigurationError("model_id")
    if not model.subscription_key:
        raise ConfigurationError("subscription_key")

    params: List[str] = [
        f"subscription-key={escape(model.subscription_key)}",
        f"q={escape(request.query)}",
    ]

    model_id = escape(model.model_id)
    version = resolve_api_version(model.api_version)
    base = urlsplit(model.endpoint)

    if version is ApiVersion.V1:
        path = base.path
        params.append(f"id={model_id}")
    else:
        # v2.0 takes the model id as the last path segment
        path = f"{base.path.rstrip('/')}/{model_id}"

    for attribute, name in OPTION_PARAMETERS:
        value = getattr(request, attribute)
        if value is not None:
            params.append(f"{name}={escape(format_value(value))}")

    key = request.bing_spell_check_subscription_key
    if key is not None and key.strip():
        params.append(f"bing-spell-check-subscription-key={escape(key)}")

    if request.context_id is not None:
        params.append(f"contextId={escape(request.context_id)}")
    if request.force_set is not None:
        params.append(f"forceSet={escape(request.force_set)}")

    if request.extra_parameters is not None:
        params.append(request.extra_parameters)

    uri = urlunsplit(base._replace(path=path, query="&".join(params), fragment=""))
    logger.debug(f"Built LUIS uri: {mask_uri(uri)}")
    return uri
