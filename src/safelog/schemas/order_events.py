"""Order status integration event Pydantic v2 schemas.

Events published on the event bus whenever an order moves to a new status.
Buyer name and identity are classified and masked whenever an event is logged.
"""

import uuid
from datetime import UTC, datetime

from pydantic import ConfigDict, Field

from safelog.core.sensitivity import SensitivityLevel, sensitive
from safelog.schemas.common import SafeRecord


class IntegrationEvent(SafeRecord):
    """Base event carrying an identifier and creation timestamp."""

    model_config = ConfigDict(frozen=True)

    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    creation_date: datetime = Field(default_factory=lambda: datetime.now(UTC))


class OrderStatusChangedIntegrationEvent(IntegrationEvent):
    """Common shape of all order status change events."""

    order_id: int
    order_status: str
    buyer_name: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "Buyer name"))
    buyer_identity_guid: str = Field(json_schema_extra=sensitive(SensitivityLevel.PII, "Buyer identity GUID"))


class OrderStatusChangedToAwaitingValidationIntegrationEvent(OrderStatusChangedIntegrationEvent):
    """Order is awaiting stock validation."""


class OrderStatusChangedToCancelledIntegrationEvent(OrderStatusChangedIntegrationEvent):
    """Order was cancelled."""


class OrderStatusChangedToPaidIntegrationEvent(OrderStatusChangedIntegrationEvent):
    """Order payment succeeded."""


class OrderStatusChangedToShippedIntegrationEvent(OrderStatusChangedIntegrationEvent):
    """Order was shipped."""


class OrderStatusChangedToStockConfirmedIntegrationEvent(OrderStatusChangedIntegrationEvent):
    """Stock for all order items was confirmed."""


class OrderStatusChangedToSubmittedIntegrationEvent(OrderStatusChangedIntegrationEvent):
    """Order was submitted by the buyer."""
