"""Redaction preview API endpoints.

Renders a submitted record exactly as it would appear in application logs.
Validation failures are reported without echoing the rejected values.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError

from safelog.core.config import Settings, get_settings
from safelog.schemas.classification import RedactionOutput, RedactionResult
from safelog.schemas.common import ErrorResponse
from safelog.services.classification_service import redact_payload, safe_validation_errors

redactions_router = APIRouter(
    prefix="/redactions",
    tags=["redactions"],
)


@redactions_router.post(
    "/{record_type}",
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def redact_record(
    record_type: str,
    payload: Annotated[dict[str, Any], Body()],
    settings: Annotated[Settings, Depends(get_settings)],
    output: Annotated[RedactionOutput, Query()] = RedactionOutput.TEXT,
) -> RedactionResult:
    """Render a record of the given type as a log-safe string or mapping."""
    try:
        return redact_payload(record_type, payload, output, max_fields=settings.max_payload_fields)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except ValidationError as e:
        logger.info(f"Rejected {record_type} payload with {e.error_count()} validation errors")
        error = ErrorResponse(
            detail=f"Payload is not a valid {record_type} record",
            code="VALIDATION_ERROR",
            errors=safe_validation_errors(e),
        )
        return JSONResponse(status_code=422, content=error.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
