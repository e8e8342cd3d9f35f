"""Classification catalog API endpoints."""

from fastapi import APIRouter, HTTPException, status

from safelog.schemas.classification import RecordClassification, RecordClassificationList
from safelog.services.classification_service import describe_record_type, list_classifications

classifications_router = APIRouter(
    prefix="/classifications",
    tags=["classifications"],
)


@classifications_router.get("")
async def list_all_classifications() -> RecordClassificationList:
    """List the classified fields of every registered record type."""
    return RecordClassificationList(items=list_classifications())


@classifications_router.get("/{record_type}")
async def get_classification(record_type: str) -> RecordClassification:
    """Return the classified fields of one record type."""
    try:
        return describe_record_type(record_type)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
