"""Root API router: health checks plus every discovered module under /api/v1."""

from typing import Any

import structlog
from fastapi import APIRouter, Response, status
from pydantic import BaseModel
from sqlalchemy import func, select, text
from sqlalchemy.exc import SQLAlchemyError

from hireboard.api.dependencies import DBSession
from hireboard.config import settings
from hireboard.core.auth.routes import router as auth_router
from hireboard.core.permissions.catalog import PERMISSION_CATALOG
from hireboard.core.permissions.models import Permission
from hireboard.modules import discover_modules


logger = structlog.get_logger()

OK = "ok"


class HealthResponse(BaseModel):
    status: str


class ReadinessResponse(BaseModel):
    """``checks`` maps each dependency to "ok" or what is wrong with it."""

    status: str
    checks: dict[str, str]


async def _check_database(db: DBSession) -> str:
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        return str(exc)
    return OK


async def _check_catalog(db: DBSession) -> str:
    # Permission checks deny everything until the catalog has been synced
    stored = await db.scalar(select(func.count()).select_from(Permission))
    expected = len(PERMISSION_CATALOG)
    if (stored or 0) < expected:
        return f"not synced ({stored or 0} of {expected} permissions)"
    return OK


health_router = APIRouter(tags=["health"])


@health_router.get("/health/live", response_model=HealthResponse, summary="Liveness probe")
async def liveness() -> HealthResponse:
    """200 whenever the process can serve requests."""
    return HealthResponse(status="alive")


@health_router.get(
    "/health/ready",
    response_model=ReadinessResponse,
    summary="Readiness probe",
    description="Checks the database and that the permission catalog is synced.",
    responses={503: {"model": ReadinessResponse}},
)
async def readiness(db: DBSession, response: Response) -> ReadinessResponse:
    checks = {"database": await _check_database(db)}
    if checks["database"] == OK:
        checks["catalog"] = await _check_catalog(db)

    if all(result == OK for result in checks.values()):
        return ReadinessResponse(status="ready", checks=checks)

    logger.warning("readiness_failed", checks=checks)
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", checks=checks)


@health_router.get("/info", summary="Application info")
async def info() -> dict[str, Any]:
    return {
        "app": settings.app_name,
        "environment": settings.environment,
        "debug": settings.debug,
    }


v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(auth_router)
for module_router in discover_modules():
    v1_router.include_router(module_router)

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(v1_router)
