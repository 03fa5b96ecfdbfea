"""
Health check router for liveness and readiness probes.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, status

from giftshop.context import AppContext
from giftshop.dependencies.context import get_context

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """
    Basic health check endpoint.
    Returns 200 if the API is running.
    """
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check(context: Annotated[AppContext, Depends(get_context)]):
    """
    Readiness check that verifies the database connection.
    """
    checks = {
        "api": "healthy",
        "mongodb": "unknown",
    }

    try:
        await context.mongo_client.admin.command("ping")
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {str(e)}"

    all_healthy = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if all_healthy else "degraded",
        "checks": checks,
    }
