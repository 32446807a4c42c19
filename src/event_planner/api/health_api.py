from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from event_planner import __version__
from event_planner.core.database import StorageConnector
from event_planner.core.dependencies import get_connector
from event_planner.schemas.common import HealthCheckResponse

logger = logging.getLogger("HEALTH_API")

health_api_router = APIRouter(prefix="/health", tags=["health"])


@health_api_router.get("", response_model=HealthCheckResponse)
def health_status(connector: StorageConnector = Depends(get_connector)):
    """Report whether the storage connector can reach the database."""
    database_health = connector.health()
    healthy = database_health.get("status") == "healthy"
    if not healthy:
        logger.warning(f"Health check degraded: {database_health.get('error')}")

    body = HealthCheckResponse(
        status="healthy" if healthy else "degraded",
        database=database_health,
        version=__version__,
    )
    return JSONResponse(status_code=200 if healthy else 503, content=body.model_dump())
