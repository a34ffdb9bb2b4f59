"""Health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from hdnotes.config import Settings


router = APIRouter(prefix="/api", tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    status: str
    message: str
    timestamp: datetime
    version: str
    git_sha: str
    allowed_origins: list[str]


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Also reports the accepted CORS origins, which is the usual suspect when
    a browser client cannot reach the API.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="OK",
        message="HD Notes API is running",
        timestamp=datetime.now(timezone.utc),
        version="0.1.0",
        git_sha=settings.git_sha,
        allowed_origins=settings.cors.allowed_origins,
    )
