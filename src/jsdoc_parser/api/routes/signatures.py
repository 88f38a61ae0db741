"""Function signature endpoints."""

import json
from typing import Any

from fastapi import APIRouter, HTTPException
from fastapi.responses import JSONResponse

from jsdoc_parser.api.dependencies import AppSettings, SignatureSvc
from jsdoc_parser.api.schemas import DescribeSignatureRequest, ErrorResponse
from jsdoc_parser.core import SignatureError
from jsdoc_parser.logging import get_logger
from jsdoc_parser.services import SignatureService

logger = get_logger(__name__)

router = APIRouter(prefix="/signatures", tags=["signatures"])


class DescriptorResponse(JSONResponse):
    """
    JSON response that escapes non-ASCII text.

    String defaults may hold lone surrogates (valid in JavaScript), which
    cannot be encoded as UTF-8 but can be written as \\u escapes.
    """

    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=True,
            allow_nan=False,
            separators=(",", ":"),
        ).encode("utf-8")


@router.post(
    "",
    response_class=DescriptorResponse,
    responses={
        200: {
            "description": "Descriptor of the located function, or null",
            "content": {
                "application/json": {
                    "example": {
                        "function": {
                            "name": "greet",
                            "location": {"line": 1, "column": 0},
                            "params": [
                                {"name": "name"},
                                {"name": "greeting", "type": "string", "defaultValue": "hi"},
                            ],
                            "returns": {"returns": False},
                        }
                    }
                }
            },
        },
        413: {"description": "Source too large"},
        422: {"model": ErrorResponse},
    },
)
def describe_signature(
    request: DescribeSignatureRequest,
    service: SignatureSvc,
    settings: AppSettings,
) -> DescriptorResponse:
    """
    Describe the function at a cursor line.

    Returns the function's name, the location where its JSDoc should be
    inserted and its simplified parameters. `function` is null when no
    function starts on the line or the one below it. Optional parameter
    fields are omitted rather than sent as null.
    """
    source_size = len(request.source.encode("utf-8"))
    if source_size > settings.max_source_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Source is {source_size} bytes; limit is {settings.max_source_bytes}",
        )

    if request.reuse_placeholder is not None:
        service = SignatureService(reuse_placeholder=request.reuse_placeholder)

    try:
        descriptor = service.describe(request.source, request.line)
    except SignatureError as e:
        logger.info("signature_request_rejected", error=e.error_name, message=e.message)
        raise HTTPException(
            status_code=422,
            detail=e.to_dict(),
        )

    return DescriptorResponse({"function": descriptor.to_dict() if descriptor else None})
