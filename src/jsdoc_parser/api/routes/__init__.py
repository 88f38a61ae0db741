"""API route modules."""

from jsdoc_parser.api.routes.health import router as health_router
from jsdoc_parser.api.routes.signatures import router as signatures_router

__all__ = [
    "health_router",
    "signatures_router",
]
