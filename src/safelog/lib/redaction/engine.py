"""Redaction engine: turns arbitrary records into log-safe text or mappings.

Every branch is total over its input.  Nothing here raises on ``None``,
empty strings, unannotated types or types without public fields, because
it runs inline on the logging path.

Nested record values are not traversed: an object-valued field is rendered
with its own ``str()`` unless the field itself is classified.
"""

import datetime
import uuid
from decimal import Decimal
from typing import Any

from pydantic import SecretBytes, SecretStr

from safelog.core.sensitivity import FieldAnnotation, SensitivityLevel
from safelog.lib.redaction.fields import FieldDescriptor, describe_fields
from safelog.lib.redaction.policy import is_fully_redacted

REDACTED_TEXT = "***REDACTED***"
MASKED_PATTERN = "****"
EMPTY_VALUE = '""'
NULL_TEXT = "null"

# Values with no fields to traverse; rendered with their default text
PRIMITIVE_TYPES: tuple[type, ...] = (
    str,
    bool,
    int,
    float,
    Decimal,
    datetime.datetime,
    datetime.date,
    datetime.time,
    uuid.UUID,
)

_VISIBLE_PREFIX = 2
_SHORT_VALUE_MAX = 4


def _stringify(value: Any) -> str:
    if isinstance(value, SecretStr):
        return value.get_secret_value()
    if isinstance(value, SecretBytes):
        return value.get_secret_value().decode("utf-8", errors="replace")
    return str(value)


def mask_value(value: Any, level: SensitivityLevel) -> str:
    """Mask a classified value according to its level's policy.

    Args:
        value: The raw field value.
        level: The field's sensitivity level.

    Returns:
        ``"null"`` for None, the redaction marker for fully redacted
        levels, otherwise a partial mask showing at most two characters.
    """
    if value is None:
        return NULL_TEXT
    if is_fully_redacted(level):
        return REDACTED_TEXT

    text = _stringify(value)
    if not text:
        return EMPTY_VALUE
    if len(text) <= _SHORT_VALUE_MAX:
        return MASKED_PATTERN
    return f"{text[:_VISIBLE_PREFIX]}{MASKED_PATTERN}"


def format_value(value: Any) -> str:
    """Format a non-sensitive value for display in a log line."""
    if value is None:
        return NULL_TEXT
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, datetime.datetime | datetime.date | datetime.time):
        return value.isoformat()
    return str(value)


def _render_field(value: Any, annotation: FieldAnnotation | None) -> str:
    if value is None:
        return NULL_TEXT
    if annotation is None:
        return format_value(value)
    return mask_value(value, annotation.level)


def render_safe_string(value: Any) -> str:
    """Render any value as a human-readable, log-safe string.

    Args:
        value: A record instance, a primitive scalar, or None.

    Returns:
        ``"null"`` for None, the default text of a primitive, otherwise
        ``"TypeName { field = value, ... }"`` with classified fields masked.
    """
    if value is None:
        return NULL_TEXT
    if isinstance(value, PRIMITIVE_TYPES):
        return str(value)

    rendered = ", ".join(f"{f.name} = {_render_field(f.value, f.annotation)}" for f in describe_fields(value))
    return f"{type(value).__name__} {{ {rendered} }}"


def to_safe_map(value: Any) -> dict[str, Any]:
    """Convert a record into a field mapping for structured log sinks.

    Classified fields hold their masked string (None stays None).
    Unclassified fields hold the raw value, unconverted.

    Args:
        value: A record instance or None.

    Returns:
        Mapping of field name to safe value, in field order.  Empty for None.
    """
    if value is None:
        return {}

    result: dict[str, Any] = {}
    for field in describe_fields(value):
        if field.annotation is None:
            result[field.name] = field.value
        elif field.value is None:
            result[field.name] = None
        else:
            result[field.name] = mask_value(field.value, field.annotation.level)
    return result


def is_sensitive(descriptor: FieldDescriptor | FieldAnnotation | None) -> bool:
    """Whether a field must be withheld entirely from external sinks.

    Args:
        descriptor: A field descriptor, a bare annotation, or None.

    Returns:
        True only for Financial and Credential fields.
    """
    annotation = descriptor.annotation if isinstance(descriptor, FieldDescriptor) else descriptor
    return annotation is not None and is_fully_redacted(annotation.level)
