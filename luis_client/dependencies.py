"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from luis_client.clients.luis_service import LuisService


async def get_luis_service(request: Request) -> LuisService:
    """Get the LUIS service."""
    return request.app.state.luis_service
