"""
Health Check Endpoints.

Liveness (``/health``), readiness against the database (``/health/ready``)
and version information, used by the deployment platform and monitoring.
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from pinknail.core.logging_config import get_logger
from pinknail.server.core.constant import API_VERSION, SCHEMA_VERSION
from pinknail.server.services.deps import SessionDep

logger = get_logger(__name__)

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    summary="Health Check",
    description="Check that the API process is up. Does not touch the database.",
    response_description="Status object.",
)
async def health_check():
    return {"status": "ok"}


@router.get(
    "/health/ready",
    summary="Readiness Check",
    description="Check that the API can reach its database.",
    responses={503: {"description": "Database unreachable"}},
)
async def readiness_check(session: SessionDep):
    """
    Readiness check endpoint.

    Runs ``SELECT 1`` on a pooled connection and reports 503 when it fails, so
    the platform stops routing traffic to an instance without a database.
    """
    try:
        await session.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Readiness check failed: {e}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unavailable", "database": "unreachable"},
        )
    return {"status": "ok", "database": "ok"}


@router.get(
    "/version",
    summary="Get Version",
    description="Retrieve the API version and the schema version of its JSON contract.",
    response_description="Version object.",
)
async def version():
    return {"version": API_VERSION, "schema_version": SCHEMA_VERSION}
