"""Unit tests for order status event handling."""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from safelog.schemas.order_events import (
    OrderStatusChangedIntegrationEvent,
    OrderStatusChangedToCancelledIntegrationEvent,
    OrderStatusChangedToShippedIntegrationEvent,
)
from safelog.services.order_status_service import dispatch_order_status_event, handle_shipped


@pytest.fixture
def notifier() -> AsyncMock:
    mock = AsyncMock()
    mock.notify_order_status_changed = AsyncMock()
    return mock


class TestHandlers:
    """Tests for the per-status handlers."""

    @pytest.mark.asyncio
    async def test_shipped_notifies_buyer(
        self,
        notifier: AsyncMock,
        shipped_event: OrderStatusChangedToShippedIntegrationEvent,
    ) -> None:
        await handle_shipped(shipped_event, notifier)
        notifier.notify_order_status_changed.assert_awaited_once_with("b7e3f1d2-9a8c-4e5f-b6a7-c8d9e0f1a2b3")

    @pytest.mark.asyncio
    async def test_log_line_is_redacted(
        self,
        notifier: AsyncMock,
        captured_logs: list[dict[str, Any]],
        shipped_event: OrderStatusChangedToShippedIntegrationEvent,
    ) -> None:
        await handle_shipped(shipped_event, notifier)
        message = captured_logs[-1]["message"]
        assert message.startswith(f"Handling integration event: {shipped_event.id} - (")
        assert "buyer_name = Al****" in message
        assert "buyer_identity_guid = b7****" in message
        assert "order_id = 1042" in message
        assert "Alice Johnson" not in message
        assert "b7e3f1d2-9a8c-4e5f-b6a7-c8d9e0f1a2b3" not in message


class TestDispatch:
    """Tests for dispatch_order_status_event."""

    @pytest.mark.asyncio
    async def test_routes_by_event_type(self, notifier: AsyncMock) -> None:
        event = OrderStatusChangedToCancelledIntegrationEvent(
            order_id=7, order_status="cancelled", buyer_name="Carol King", buyer_identity_guid="guid-0007"
        )
        await dispatch_order_status_event(event, notifier)
        notifier.notify_order_status_changed.assert_awaited_once_with("guid-0007")

    @pytest.mark.asyncio
    async def test_unsupported_event_raises(self, notifier: AsyncMock) -> None:
        event = OrderStatusChangedIntegrationEvent(
            order_id=7, order_status="unknown", buyer_name="Carol King", buyer_identity_guid="guid-0007"
        )
        with pytest.raises(LookupError, match="No handler registered"):
            await dispatch_order_status_event(event, notifier)
        notifier.notify_order_status_changed.assert_not_awaited()
