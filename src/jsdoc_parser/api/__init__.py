"""HTTP API layer."""

from jsdoc_parser.api.app import create_app

__all__ = ["create_app"]
