"""Shared test fixtures for settings, sample events and log capture."""

import uuid
from collections.abc import Generator
from datetime import UTC, datetime
from typing import Any

import pytest
from loguru import logger

from safelog.core.config import Settings
from safelog.core.logging import redact_extra
from safelog.schemas.order_events import OrderStatusChangedToShippedIntegrationEvent


@pytest.fixture
def settings() -> Settings:
    """Test application settings."""
    return Settings(_env_file=None, log_level="DEBUG")


@pytest.fixture
def shipped_event() -> OrderStatusChangedToShippedIntegrationEvent:
    return OrderStatusChangedToShippedIntegrationEvent(
        id=uuid.UUID("6f1c2a4e-0000-4000-8000-000000000001"),
        creation_date=datetime(2025, 1, 15, 12, 30, tzinfo=UTC),
        order_id=1042,
        order_status="shipped",
        buyer_name="Alice Johnson",
        buyer_identity_guid="b7e3f1d2-9a8c-4e5f-b6a7-c8d9e0f1a2b3",
    )


@pytest.fixture
def captured_logs() -> Generator[list[dict[str, Any]]]:
    """Capture Loguru records (message and extra) emitted during a test."""
    records: list[dict[str, Any]] = []
    logger.configure(patcher=redact_extra)
    handler_id = logger.add(
        lambda message: records.append({"message": message.record["message"], "extra": dict(message.record["extra"])}),
        level="DEBUG",
    )
    yield records
    logger.remove(handler_id)
