"""Locate JavaScript functions and describe their signatures for JSDoc generation."""

__version__ = "0.1.0"

from jsdoc_parser.services.signature_service import SignatureService, parse  # noqa: E402

__all__ = ["SignatureService", "__version__", "parse"]
