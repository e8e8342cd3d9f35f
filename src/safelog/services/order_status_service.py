"""Order status service -- handles order status integration events.

Each handler writes a redacted log line for the incoming event and then
notifies the buyer's connected clients.  Buyer name and identity never
reach the log unmasked.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol

from loguru import logger

from safelog.lib.redaction import render_safe_string
from safelog.schemas.order_events import (
    OrderStatusChangedIntegrationEvent,
    OrderStatusChangedToAwaitingValidationIntegrationEvent,
    OrderStatusChangedToCancelledIntegrationEvent,
    OrderStatusChangedToPaidIntegrationEvent,
    OrderStatusChangedToShippedIntegrationEvent,
    OrderStatusChangedToStockConfirmedIntegrationEvent,
    OrderStatusChangedToSubmittedIntegrationEvent,
)


class OrderStatusNotifier(Protocol):
    """Pushes order status changes to a buyer's connected clients."""

    async def notify_order_status_changed(self, buyer_identity_guid: str) -> None: ...


async def _handle(event: OrderStatusChangedIntegrationEvent, notifier: OrderStatusNotifier) -> None:
    logger.info("Handling integration event: {} - ({})", event.id, render_safe_string(event))
    await notifier.notify_order_status_changed(event.buyer_identity_guid)


async def handle_awaiting_validation(
    event: OrderStatusChangedToAwaitingValidationIntegrationEvent,
    notifier: OrderStatusNotifier,
) -> None:
    """Handle an order that is awaiting stock validation."""
    await _handle(event, notifier)


async def handle_cancelled(event: OrderStatusChangedToCancelledIntegrationEvent, notifier: OrderStatusNotifier) -> None:
    """Handle a cancelled order."""
    await _handle(event, notifier)


async def handle_paid(event: OrderStatusChangedToPaidIntegrationEvent, notifier: OrderStatusNotifier) -> None:
    """Handle a paid order."""
    await _handle(event, notifier)


async def handle_shipped(event: OrderStatusChangedToShippedIntegrationEvent, notifier: OrderStatusNotifier) -> None:
    """Handle a shipped order."""
    await _handle(event, notifier)


async def handle_stock_confirmed(
    event: OrderStatusChangedToStockConfirmedIntegrationEvent,
    notifier: OrderStatusNotifier,
) -> None:
    """Handle an order whose stock was confirmed."""
    await _handle(event, notifier)


async def handle_submitted(event: OrderStatusChangedToSubmittedIntegrationEvent, notifier: OrderStatusNotifier) -> None:
    """Handle a newly submitted order."""
    await _handle(event, notifier)


_HANDLERS: dict[type[OrderStatusChangedIntegrationEvent], Callable[..., Awaitable[None]]] = {
    OrderStatusChangedToAwaitingValidationIntegrationEvent: handle_awaiting_validation,
    OrderStatusChangedToCancelledIntegrationEvent: handle_cancelled,
    OrderStatusChangedToPaidIntegrationEvent: handle_paid,
    OrderStatusChangedToShippedIntegrationEvent: handle_shipped,
    OrderStatusChangedToStockConfirmedIntegrationEvent: handle_stock_confirmed,
    OrderStatusChangedToSubmittedIntegrationEvent: handle_submitted,
}


async def dispatch_order_status_event(
    event: OrderStatusChangedIntegrationEvent,
    notifier: OrderStatusNotifier,
) -> None:
    """Route an order status event to its handler.

    Args:
        event: The integration event received from the event bus.
        notifier: Client notification collaborator.

    Raises:
        LookupError: If no handler is registered for the event's type.
    """
    handler = _HANDLERS.get(type(event))
    if handler is None:
        msg = f"No handler registered for {type(event).__name__}"
        raise LookupError(msg)
    await handler(event, notifier)
