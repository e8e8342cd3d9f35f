"""Masking policy resolution for sensitivity levels.

The level-to-policy table is fixed. It is intentionally not exposed through
settings: changing it changes what may appear in logs.
"""

import enum
from types import MappingProxyType

from safelog.core.sensitivity import SensitivityLevel


class MaskingPolicy(enum.StrEnum):
    """How a classified value is rendered in log output."""

    FULL_REDACT = "full_redact"
    PARTIAL_MASK = "partial_mask"


POLICY_TABLE: MappingProxyType[SensitivityLevel, MaskingPolicy] = MappingProxyType(
    {
        SensitivityLevel.FINANCIAL: MaskingPolicy.FULL_REDACT,
        SensitivityLevel.CREDENTIAL: MaskingPolicy.FULL_REDACT,
        SensitivityLevel.PII: MaskingPolicy.PARTIAL_MASK,
        SensitivityLevel.REGULATED: MaskingPolicy.PARTIAL_MASK,
    }
)


def resolve_policy(level: SensitivityLevel) -> MaskingPolicy:
    """Return the masking policy for a sensitivity level.

    Args:
        level: The sensitivity level.

    Returns:
        The masking policy that applies to values at that level.
    """
    return POLICY_TABLE[level]


def is_fully_redacted(level: SensitivityLevel) -> bool:
    """Whether values at this level must never be disclosed, even partially."""
    return resolve_policy(level) is MaskingPolicy.FULL_REDACT
