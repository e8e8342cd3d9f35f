"""Product review Pydantic v2 schemas.

Defines the stored review record and the request/response contracts shared
between the reviews service and the storefront.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from safelog.core.sensitivity import SensitivityLevel, sensitive
from safelog.schemas.common import SafeRecord


class ProductReview(SafeRecord):
    """A stored product review."""

    id: UUID
    product_id: int
    user_id: str = Field(default="", json_schema_extra=sensitive(SensitivityLevel.PII, "Reviewer identifier"))
    rating: int = Field(ge=1, le=5)
    title: str = ""
    content: str = ""
    created_at: datetime


class SubmitReviewRequest(SafeRecord):
    """Request to submit a review for a product."""

    product_id: int
    rating: int = Field(ge=1, le=5)
    title: str = Field(default="", max_length=200)
    content: str = Field(default="", max_length=4000)


class ReviewItemDto(SafeRecord):
    """A single review as returned to the storefront."""

    id: UUID
    product_id: int
    user_id: str = Field(default="", json_schema_extra=sensitive(SensitivityLevel.PII, "Reviewer identifier"))
    rating: int
    title: str = ""
    content: str = ""
    created_at: datetime


class ReviewAggregateDto(SafeRecord):
    """Average rating and review count for a product."""

    average_rating: float
    review_count: int
