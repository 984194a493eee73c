"""
Operational routes: health and metrics.
"""

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from ..observability import (
    HealthChecker,
    HealthStatus,
    check_mongodb_health,
    get_metrics_collector,
)

router = APIRouter(tags=["operations"])


@router.get("/health")
async def health(request: Request) -> JSONResponse:
    """Ping MongoDB; 200 when healthy, 503 otherwise."""
    manager = getattr(request.app.state, "connection_manager", None)
    client = manager.mongo_client if manager is not None and manager.initialized else None

    async def mongodb():
        return await check_mongodb_health(client)

    checker = HealthChecker()
    checker.register_check(mongodb)
    report = await checker.check_all()

    status_code = 200 if report["status"] == HealthStatus.HEALTHY.value else 503
    return JSONResponse(report, status_code=status_code)


@router.get("/metrics")
async def metrics() -> dict[str, Any]:
    return get_metrics_collector().get_summary()
