"""Service layer - signature analysis orchestration."""

from jsdoc_parser.services.signature_service import SignatureService, parse

__all__ = [
    "SignatureService",
    "parse",
]
