"""FastAPI dependency injection."""

from typing import Annotated

from fastapi import Depends

from jsdoc_parser.config import Settings, get_settings
from jsdoc_parser.services import SignatureService


def get_signature_service() -> SignatureService:
    """Dependency for SignatureService."""
    return SignatureService()


# Type aliases for injected dependencies
AppSettings = Annotated[Settings, Depends(get_settings)]
SignatureSvc = Annotated[SignatureService, Depends(get_signature_service)]
