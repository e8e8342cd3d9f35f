"""Classification catalog and redaction preview Pydantic v2 schemas."""

import enum
from typing import Any

from pydantic import BaseModel, Field

from safelog.core.sensitivity import SensitivityLevel
from safelog.lib.redaction import MaskingPolicy


class RedactionOutput(enum.StrEnum):
    """Shape of a redaction preview."""

    TEXT = "text"
    MAP = "map"


class FieldClassification(BaseModel):
    """Classification of a single field of a record type."""

    name: str
    level: SensitivityLevel
    policy: MaskingPolicy
    notes: str | None = None
    fully_redacted: bool = Field(description="True when no part of the value may ever be logged")


class RecordClassification(BaseModel):
    """All classified fields of a record type."""

    record_type: str = Field(description="Registry name of the record type")
    model: str = Field(description="Python class name of the record type")
    field_count: int = Field(description="Total number of fields, classified or not")
    fields: list[FieldClassification]


class RecordClassificationList(BaseModel):
    """Classification catalog for every registered record type."""

    items: list[RecordClassification]


class RedactionResult(BaseModel):
    """Log-safe rendering of a submitted record."""

    record_type: str
    output: RedactionOutput
    text: str | None = Field(default=None, description="Human-readable log line (output=text)")
    fields: dict[str, Any] | None = Field(default=None, description="Structured log payload (output=map)")
