"""Redaction library -- public API for log-safe rendering of records.

Provides the masking policy table, the per-type field metadata model and
the engine that produces log-safe strings and mappings.
"""

from safelog.lib.redaction.engine import (
    EMPTY_VALUE,
    MASKED_PATTERN,
    NULL_TEXT,
    REDACTED_TEXT,
    format_value,
    is_sensitive,
    mask_value,
    render_safe_string,
    to_safe_map,
)
from safelog.lib.redaction.fields import (
    DescribesFields,
    FieldDescriptor,
    FieldValue,
    classified_fields,
    describe_fields,
    describe_type,
)
from safelog.lib.redaction.policy import POLICY_TABLE, MaskingPolicy, is_fully_redacted, resolve_policy

__all__ = [
    "EMPTY_VALUE",
    "MASKED_PATTERN",
    "NULL_TEXT",
    "POLICY_TABLE",
    "REDACTED_TEXT",
    "DescribesFields",
    "FieldDescriptor",
    "FieldValue",
    "MaskingPolicy",
    "classified_fields",
    "describe_fields",
    "describe_type",
    "format_value",
    "is_fully_redacted",
    "is_sensitive",
    "mask_value",
    "render_safe_string",
    "resolve_policy",
    "to_safe_map",
]
