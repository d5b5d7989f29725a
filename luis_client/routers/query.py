"""Query endpoints forwarding to LUIS."""

from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Any, Dict, Optional
import logging

from luis_client.clients.luis_service import LuisService
from luis_client.dependencies import get_luis_service
from luis_client.exceptions import (
    ConfigurationError,
    ResponseParseError,
    UnsupportedVersionError,
    UpstreamConnectionError,
    UpstreamHttpError,
)
from luis_client.models.schemas import LuisRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/query")
async def query_luis(
    q: str = Query(..., min_length=1, max_length=500),
    verbose: Optional[bool] = None,
    spell_check: Optional[bool] = Query(None, alias="spellCheck"),
    staging: Optional[bool] = None,
    timezone_offset: Optional[float] = Query(None, alias="timezoneOffset"),
    luis: LuisService = Depends(get_luis_service)
) -> Dict[str, Any]:
    """
    Recognize intents and entities in an utterance.

    Returns the normalized LUIS result with upstream field names.
    """
    request = LuisRequest(
        query=q,
        verbose=verbose,
        spell_check=spell_check,
        staging=staging,
        timezone_offset=timezone_offset
    )

    try:
        result = await luis.query(request)
    except (ConfigurationError, UnsupportedVersionError) as e:
        logger.error(f"LUIS model misconfigured: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    except UpstreamHttpError as e:
        raise HTTPException(
            status_code=502,
            detail=f"LUIS returned status {e.status_code}"
        )
    except ResponseParseError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except UpstreamConnectionError as e:
        raise HTTPException(status_code=504, detail=str(e))

    return result.model_dump(by_alias=True, exclude_none=True)
