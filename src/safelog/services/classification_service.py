"""Classification service -- catalog of record types and redaction previews.

Maps registry names to the platform's classified record types, reports
which fields each one masks, and renders submitted payloads the way they
would appear in logs.
"""

from typing import Any

from loguru import logger
from pydantic import BaseModel, ValidationError

from safelog.lib.redaction import (
    classified_fields,
    describe_type,
    is_sensitive,
    render_safe_string,
    resolve_policy,
    to_safe_map,
)
from safelog.schemas.basket import BasketItem, CustomerBasket
from safelog.schemas.classification import (
    FieldClassification,
    RecordClassification,
    RedactionOutput,
    RedactionResult,
)
from safelog.schemas.identity import ApplicationUser
from safelog.schemas.order_events import (
    OrderStatusChangedToAwaitingValidationIntegrationEvent,
    OrderStatusChangedToCancelledIntegrationEvent,
    OrderStatusChangedToPaidIntegrationEvent,
    OrderStatusChangedToShippedIntegrationEvent,
    OrderStatusChangedToStockConfirmedIntegrationEvent,
    OrderStatusChangedToSubmittedIntegrationEvent,
)
from safelog.schemas.reviews import ProductReview, ReviewAggregateDto, ReviewItemDto, SubmitReviewRequest
from safelog.schemas.webhooks import WebhookSubscription

RECORD_TYPES: dict[str, type[BaseModel]] = {
    "application-user": ApplicationUser,
    "basket-item": BasketItem,
    "customer-basket": CustomerBasket,
    "order-awaiting-validation": OrderStatusChangedToAwaitingValidationIntegrationEvent,
    "order-cancelled": OrderStatusChangedToCancelledIntegrationEvent,
    "order-paid": OrderStatusChangedToPaidIntegrationEvent,
    "order-shipped": OrderStatusChangedToShippedIntegrationEvent,
    "order-stock-confirmed": OrderStatusChangedToStockConfirmedIntegrationEvent,
    "order-submitted": OrderStatusChangedToSubmittedIntegrationEvent,
    "product-review": ProductReview,
    "review-aggregate": ReviewAggregateDto,
    "review-item": ReviewItemDto,
    "submit-review-request": SubmitReviewRequest,
    "webhook-subscription": WebhookSubscription,
}


def list_record_types() -> list[str]:
    """Return all registered record type names in sorted order."""
    return sorted(RECORD_TYPES)


def get_record_type(record_type: str) -> type[BaseModel]:
    """Look up a record class by registry name.

    Args:
        record_type: Registry name, e.g. ``customer-basket``.

    Returns:
        The record class.

    Raises:
        LookupError: If no record type is registered under that name.
    """
    try:
        return RECORD_TYPES[record_type]
    except KeyError:
        msg = f"Unknown record type: {record_type}"
        raise LookupError(msg) from None


def describe_record_type(record_type: str) -> RecordClassification:
    """Build the classification report for one record type.

    Args:
        record_type: Registry name of the record type.

    Returns:
        RecordClassification listing every classified field.

    Raises:
        LookupError: If the record type is unknown.
    """
    model = get_record_type(record_type)
    fields = [
        FieldClassification(
            name=descriptor.name,
            level=descriptor.annotation.level,
            policy=resolve_policy(descriptor.annotation.level),
            notes=descriptor.annotation.notes,
            fully_redacted=is_sensitive(descriptor),
        )
        for descriptor in classified_fields(model)
        if descriptor.annotation is not None
    ]
    return RecordClassification(
        record_type=record_type,
        model=model.__name__,
        field_count=len(describe_type(model)),
        fields=fields,
    )


def list_classifications() -> list[RecordClassification]:
    """Build classification reports for every registered record type."""
    return [describe_record_type(name) for name in list_record_types()]


def safe_validation_errors(exc: ValidationError) -> list[dict[str, Any]]:
    """Return validation error details without the rejected input values."""
    return exc.errors(include_url=False, include_context=False, include_input=False)


def redact_payload(
    record_type: str,
    payload: Any,
    output: RedactionOutput = RedactionOutput.TEXT,
    *,
    max_fields: int = 200,
) -> RedactionResult:
    """Validate a raw payload as a record and render it log-safe.

    Args:
        record_type: Registry name of the record type.
        payload: Decoded JSON object holding the record's fields.
        output: ``text`` for a log line, ``map`` for a structured payload.
        max_fields: Maximum number of top-level keys accepted.

    Returns:
        RedactionResult carrying either the text or the field mapping.

    Raises:
        LookupError: If the record type is unknown.
        ValueError: If the payload is not an object or has too many keys.
        pydantic.ValidationError: If the payload does not match the record type.
    """
    model = get_record_type(record_type)
    if not isinstance(payload, dict):
        msg = "Redaction payload must be a JSON object"
        raise ValueError(msg)
    if len(payload) > max_fields:
        msg = f"Redaction payload has {len(payload)} fields, maximum is {max_fields}"
        raise ValueError(msg)

    record = model.model_validate(payload)
    logger.debug(f"Rendering {record_type} record as {output}")
    if output == RedactionOutput.MAP:
        return RedactionResult(record_type=record_type, output=output, fields=to_safe_map(record))
    return RedactionResult(record_type=record_type, output=output, text=render_safe_string(record))
