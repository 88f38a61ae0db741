"""Health check endpoints."""

from fastapi import APIRouter

from jsdoc_parser import __version__
from jsdoc_parser.api.schemas import HealthResponse
from jsdoc_parser.parsers.source import get_language

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Returns the status of the service and whether the JavaScript
    grammar could be loaded.
    """
    try:
        get_language()
        grammar_status = "healthy"
    except Exception as e:
        grammar_status = f"unhealthy: {e}"

    overall_status = "healthy" if grammar_status == "healthy" else "degraded"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        grammar=grammar_status,
    )


@router.get("/live")
def liveness_check() -> dict:
    """
    Liveness probe for Kubernetes.

    Returns 200 if the service is alive.
    """
    return {"alive": True}
