"""
Health Check Endpoints.

This module provides system status endpoints used by the frontend's backend
status indicator, by load balancers and for deployment verification. None
of them require the database: they report its state instead of failing.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from skillvouch import __version__
from skillvouch.core.database import check_tables
from skillvouch.core.database.entities import REQUIRED_TABLES
from skillvouch.core.logging_config import get_logger
from skillvouch.server.core.config import settings
from skillvouch.server.core.constant import API_PREFIX
from skillvouch.server.services.deps import MonitorDep

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get("/", summary="Root", description="Confirm the API server is running.")
async def root():
    return {"status": "OK", "message": "SkillVouch API Server Running"}


@router.get(
    "/health",
    summary="Health Check",
    description="Check the operational status of the API server.",
    response_description="Status object with process uptime in seconds.",
)
async def health_check(monitor: MonitorDep):
    return {"status": "OK", "uptime": round(monitor.uptime, 3)}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve version information for the API server.",
)
async def version():
    return {"version": __version__}


@router.get(
    f"{API_PREFIX}/health",
    summary="Dependency Health",
    description="Report whether the database is reachable and whether an AI provider is configured.",
)
async def api_health(monitor: MonitorDep):
    """
    Dependency health check.

    The server is healthy when the database is reachable; the AI check only
    reports whether an API key is configured.
    """
    checks = {"database": monitor.connected, "ai": settings.mistral.configured}
    return {"healthy": checks["database"], "checks": checks}


@router.get(
    f"{API_PREFIX}/status",
    summary="Service Status",
    description="Detailed status of the server and its backing services.",
)
async def api_status(monitor: MonitorDep):
    mistral = settings.mistral
    return {
        "status": "running",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(monitor.uptime, 3),
        "services": {
            "database": monitor.snapshot().model_dump(mode="json"),
            "mistral": {"configured": mistral.configured, "model": mistral.model_name},
        },
    }


@router.get(
    f"{API_PREFIX}/db-status",
    summary="Database Status",
    description="Connection state and the presence of every required table.",
)
async def db_status(monitor: MonitorDep):
    tables = {name: False for name in REQUIRED_TABLES}
    if monitor.connected:
        try:
            tables = await check_tables(monitor.engine)
        except SQLAlchemyError as e:
            logger.error(f"Failed to inspect database tables: {e}")
    return {"connected": monitor.connected, "uptime": round(monitor.uptime, 3), "tables": tables}
