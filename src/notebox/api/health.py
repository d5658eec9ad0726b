"""Health check API endpoints."""

from fastapi import APIRouter, Depends

from ..core.schemas.common import HealthCheckResponse
from ..core.services import HealthService
from ..database import Database, get_database

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthCheckResponse)
async def health_check(database: Database = Depends(get_database)):
    """Get overall system health status."""
    health_service = HealthService(database)
    return await health_service.get_health_status()
