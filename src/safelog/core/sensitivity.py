"""Data sensitivity classification system.

Defines the closed set of sensitivity levels and the field-level marker
used to tag record fields at declaration time.  Tagged fields are masked
or redacted wherever the record is logged.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

SENSITIVITY_LEVEL_KEY = "sensitivity_level"
SENSITIVITY_NOTES_KEY = "sensitivity_notes"


class SensitivityLevel(enum.StrEnum):
    """Data sensitivity classification levels."""

    PII = "pii"
    FINANCIAL = "financial"
    CREDENTIAL = "credential"
    REGULATED = "regulated"


@dataclass(frozen=True, slots=True)
class FieldAnnotation:
    """Sensitivity tag attached to a single field of a record type.

    Can be placed directly in ``Annotated[...]`` metadata, e.g.
    ``card: Annotated[str, FieldAnnotation(SensitivityLevel.FINANCIAL)]``.
    """

    level: SensitivityLevel
    notes: str | None = None

    @classmethod
    def from_metadata(cls, metadata: Any) -> "FieldAnnotation | None":
        """Build an annotation from a ``sensitive()`` marker mapping.

        Args:
            metadata: A mapping produced by ``sensitive()``, or anything else.

        Returns:
            The annotation, or None when the mapping carries no level.
        """
        if not isinstance(metadata, Mapping) or SENSITIVITY_LEVEL_KEY not in metadata:
            return None
        return cls(
            level=SensitivityLevel(metadata[SENSITIVITY_LEVEL_KEY]),
            notes=metadata.get(SENSITIVITY_NOTES_KEY),
        )


def sensitive(level: SensitivityLevel, notes: str | None = None) -> dict[str, Any]:
    """Field metadata marker for sensitivity classification.

    Use as Pydantic ``Field(json_schema_extra=...)`` or as
    ``dataclasses.field(metadata=...)`` to tag a field by its sensitivity
    level.

    Args:
        level: The sensitivity level for the field.
        notes: Optional human-readable handling note.

    Returns:
        A dict suitable for use as Pydantic or dataclass field metadata.
    """
    marker: dict[str, Any] = {SENSITIVITY_LEVEL_KEY: level.value}
    if notes is not None:
        marker[SENSITIVITY_NOTES_KEY] = notes
    return marker
