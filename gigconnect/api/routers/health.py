"""
Health Check Router.
"""
from fastapi import APIRouter, Depends, Response, status
from gigconnect.core.config import settings
from gigconnect.core.logging import get_logger
from gigconnect.services.health_aggregator import HealthAggregator
from gigconnect.api.dependencies import get_health_aggregator
from gigconnect.schemas.health_status import HealthReport, Status

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthReport,
    summary="Service health",
    description="Checks the database connection and the unique contact index."
)
async def health_check(
    response: Response,
    health_aggregator: HealthAggregator = Depends(get_health_aggregator)
) -> HealthReport:
    """
    - **ok**: every component is healthy (HTTP 200)
    - **unhealthy**: at least one component failed (HTTP 503)
    """
    details = await health_aggregator.check_all()
    overall_status = HealthAggregator.overall(details)

    if overall_status == Status.UNHEALTHY:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning(f"Health check resulted in UNHEALTHY state. Details: {details}")

    return HealthReport(overall_status=overall_status, details=details)


@router.get("/", summary="API information")
async def root():
    return {
        "service": settings.API_TITLE,
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
        "workers": "/api/workers"
    }
