"""
LUIS Query Service

Exposes a configured LUIS model over HTTP:
- GET /query: recognize intents and entities in an utterance
- GET /health: configuration status
"""

from fastapi import FastAPI
from contextlib import asynccontextmanager
import logging

from luis_client.clients.luis_service import LuisService
from luis_client.config import settings
from luis_client.routers import health, query

# Configure logging
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - create the LUIS client on startup."""
    model = settings.to_luis_model()
    logger.info(f"LUIS model: {model.model_id} (api {model.api_version})")
    if not model.is_configured:
        logger.warning("LUIS_MODEL_ID or LUIS_SUBSCRIPTION_KEY is not set; queries will fail")

    app.state.luis_service = LuisService(model, timeout=settings.luis_timeout)

    yield

    # Cleanup
    logger.info("Shutting down LUIS query service")
    await app.state.luis_service.close()


# Create FastAPI application
app = FastAPI(
    title="LUIS Query Service",
    description="Intent recognition through a LUIS model",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(health.router, tags=["health"])
app.include_router(query.router, tags=["query"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": "LUIS Query Service",
        "version": "1.0.0",
        "docs": "/docs"
    }


def run():
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
