"""Unit tests for logging configuration and log redaction."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from loguru import logger

from safelog.core.logging import redact_extra, setup_logging
from safelog.core.sensitivity import SensitivityLevel, sensitive
from safelog.schemas.identity import ApplicationUser
from safelog.schemas.order_events import OrderStatusChangedToShippedIntegrationEvent


class TestLogging:
    """Tests for Loguru logging setup."""

    def test_setup_logging_does_not_raise(self) -> None:
        """setup_logging with valid log level does not raise."""
        setup_logging("DEBUG")
        setup_logging("INFO")
        setup_logging("WARNING")

    def test_setup_logging_case_insensitive(self) -> None:
        """setup_logging accepts case-insensitive log levels."""
        setup_logging("info")
        setup_logging("debug")

    def test_setup_logging_serialized(self) -> None:
        setup_logging("INFO", serialize=True)

    def test_setup_logging_file_sink(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        setup_logging("INFO", str(log_dir))
        logger.info("file sink ready")
        logger.complete()
        assert (log_dir / "safelog.log").exists()
        setup_logging("INFO")


class TestRedactExtra:
    """Tests for the redact_extra patcher."""

    def test_record_objects_become_safe_maps(self, shipped_event: OrderStatusChangedToShippedIntegrationEvent) -> None:
        record: dict[str, Any] = {"extra": {"event": shipped_event, "request_id": "abc"}}
        redact_extra(record)
        assert record["extra"]["request_id"] == "abc"
        assert record["extra"]["event"]["buyer_name"] == "Al****"
        assert record["extra"]["event"]["order_id"] == 1042

    def test_primitives_and_containers_untouched(self) -> None:
        payload = {"a": 1}
        record: dict[str, Any] = {"extra": {"n": 3, "flag": True, "none": None, "payload": payload, "ids": [1, 2]}}
        redact_extra(record)
        assert record["extra"] == {"n": 3, "flag": True, "none": None, "payload": payload, "ids": [1, 2]}

    def test_bound_event_reaches_sink_masked(
        self,
        captured_logs: list[dict[str, Any]],
        shipped_event: OrderStatusChangedToShippedIntegrationEvent,
    ) -> None:
        logger.bind(event=shipped_event).info("order shipped")
        entry = captured_logs[-1]
        assert entry["message"] == "order shipped"
        assert entry["extra"]["event"]["buyer_name"] == "Al****"
        assert entry["extra"]["event"]["buyer_identity_guid"] == "b7****"
        assert "Alice Johnson" not in str(entry["extra"])

    def test_bound_object_itself_not_mutated(
        self,
        captured_logs: list[dict[str, Any]],
        shipped_event: OrderStatusChangedToShippedIntegrationEvent,
    ) -> None:
        bound = logger.bind(event=shipped_event)
        bound.info("first")
        bound.info("second")
        assert captured_logs[-1]["extra"]["event"]["buyer_name"] == "Al****"
        assert shipped_event.buyer_name == "Alice Johnson"


def _card_holder() -> ApplicationUser:
    return ApplicationUser(
        id="u1",
        user_name="dana@example.com",
        email="dana@example.com",
        phone_number="+1 555 0199",
        card_number="4532123456789010",
        security_number="987",
        expiration="09/28",
        card_holder_name="Dana Reyes",
        card_type=2,
        street="1 Main St",
        city="Springfield",
        state="IL",
        country="U.S.",
        zip_code="62701",
        name="Dana",
        last_name="Reyes",
    )


@dataclass
class Payout:
    reference: str
    iban: str = field(metadata=sensitive(SensitivityLevel.FINANCIAL))


class TestRecordsInMessagesAndContainers:
    """Tests that records stay masked wherever they appear in a log call."""

    def test_keyword_argument_in_message_is_masked(self, captured_logs: list[dict[str, Any]]) -> None:
        logger.info("user {user}", user=_card_holder())
        entry = captured_logs[-1]
        assert entry["message"].startswith("user ApplicationUser { id = \"u1\", ")
        assert "card_number = ***REDACTED***" in entry["message"]
        assert "4532123456789010" not in entry["message"]
        assert "987" not in entry["message"]
        assert entry["extra"]["user"]["card_number"] == "***REDACTED***"

    def test_positional_argument_in_message_is_masked(self, captured_logs: list[dict[str, Any]]) -> None:
        logger.info("user {}", _card_holder())
        assert "4532123456789010" not in captured_logs[-1]["message"]

    def test_record_bound_inside_dict(self, captured_logs: list[dict[str, Any]]) -> None:
        logger.bind(ctx={"user": _card_holder(), "attempt": 2}).info("checkout")
        extra = captured_logs[-1]["extra"]
        assert extra["ctx"]["attempt"] == 2
        assert extra["ctx"]["user"]["card_number"] == "***REDACTED***"
        assert "4532123456789010" not in str(extra)

    def test_record_bound_inside_list(self, captured_logs: list[dict[str, Any]]) -> None:
        logger.bind(users=[_card_holder()]).info("batch")
        extra = captured_logs[-1]["extra"]
        assert extra["users"][0]["card_number"] == "***REDACTED***"
        assert "4532123456789010" not in str(extra)

    def test_dataclass_record_inside_tuple(self) -> None:
        record: dict[str, Any] = {"extra": {"payouts": (Payout("p-1", "DE89370400440532013000"),)}}
        redact_extra(record)
        assert record["extra"]["payouts"] == ({"reference": "p-1", "iban": "***REDACTED***"},)

    def test_deeply_nested_containers_are_cut_off(self) -> None:
        record: dict[str, Any] = {"extra": {"deep": [[[[[_card_holder()]]]]]}}
        redact_extra(record)
        assert "4532123456789010" not in str(record["extra"])
        assert record["extra"]["deep"] == [[[["***REDACTED***"]]]]

    def test_repr_of_record_is_masked(self) -> None:
        user = _card_holder()
        assert repr(user) == str(user)
        assert "4532123456789010" not in repr([user])
