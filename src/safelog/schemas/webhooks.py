"""Webhook subscription Pydantic v2 schemas."""

import enum
from datetime import datetime

from pydantic import Field

from safelog.core.sensitivity import SensitivityLevel, sensitive
from safelog.schemas.common import SafeRecord


class WebhookType(enum.StrEnum):
    """Events a webhook subscription can be registered for."""

    CATALOG_ITEM_PRICE_CHANGE = "catalog_item_price_change"
    ORDER_SHIPPED = "order_shipped"
    ORDER_PAID = "order_paid"


class WebhookSubscription(SafeRecord):
    """A user's registration of a callback URL for platform events."""

    id: int
    type: WebhookType
    date: datetime
    dest_url: str = Field(min_length=1)
    token: str | None = Field(
        default=None,
        json_schema_extra=sensitive(SensitivityLevel.CREDENTIAL, "Webhook authentication token - must never be logged"),
    )
    user_id: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "User identifier"))
