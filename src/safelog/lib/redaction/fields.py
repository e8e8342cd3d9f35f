"""Field metadata model: which fields a record has and how each is classified.

Field descriptors are derived from the record's class, not from the
instance, and are memoized per class.  ``describe_fields`` pairs the
cached descriptors with the current instance values.
"""

import dataclasses
import functools
from collections.abc import Iterable
from typing import Any, NamedTuple, Protocol, runtime_checkable

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from safelog.core.sensitivity import FieldAnnotation


class FieldDescriptor(NamedTuple):
    """A field name and its sensitivity annotation, if any."""

    name: str
    annotation: FieldAnnotation | None


class FieldValue(NamedTuple):
    """A field name, its current value, and its sensitivity annotation."""

    name: str
    value: Any
    annotation: FieldAnnotation | None


@runtime_checkable
class DescribesFields(Protocol):
    """Records that enumerate their own loggable fields.

    Implement this for types that are neither Pydantic models nor
    dataclasses, or to override how a record exposes itself to logging.
    """

    def describe_fields(self) -> Iterable[FieldValue]: ...


def _pydantic_annotation(field_info: FieldInfo) -> FieldAnnotation | None:
    annotation = FieldAnnotation.from_metadata(field_info.json_schema_extra)
    if annotation is not None:
        return annotation
    for item in field_info.metadata:
        if isinstance(item, FieldAnnotation):
            return item
    return None


@functools.cache
def describe_type(cls: type) -> tuple[FieldDescriptor, ...]:
    """Return the ordered field descriptors for a record class.

    Pydantic models contribute ``model_fields`` and dataclasses their
    public ``dataclasses.fields``, both in declaration order.  Other
    classes have no type-level field list and yield an empty tuple.

    Args:
        cls: The record class.

    Returns:
        Tuple of descriptors in field declaration order.
    """
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return tuple(
            FieldDescriptor(name, _pydantic_annotation(field_info)) for name, field_info in cls.model_fields.items()
        )
    if dataclasses.is_dataclass(cls):
        return tuple(
            FieldDescriptor(f.name, FieldAnnotation.from_metadata(f.metadata))
            for f in dataclasses.fields(cls)
            if not f.name.startswith("_")
        )
    return ()


def describe_fields(record: Any) -> list[FieldValue]:
    """Return the ordered ``(name, value, annotation)`` triples of a record.

    Args:
        record: Any record instance.

    Returns:
        List of field values in declaration order.  Objects with no public
        instance data produce an empty list.
    """
    # Class objects are not records, even when they define describe_fields
    if isinstance(record, type):
        return []
    if isinstance(record, DescribesFields):
        return [FieldValue(*item) for item in record.describe_fields()]

    cls = type(record)
    if issubclass(cls, BaseModel) or dataclasses.is_dataclass(cls):
        return [FieldValue(d.name, getattr(record, d.name, None), d.annotation) for d in describe_type(cls)]

    # Plain objects carry no classification, only their public instance attributes
    attributes = getattr(record, "__dict__", None) or {}
    return [FieldValue(name, value, None) for name, value in attributes.items() if not name.startswith("_")]


def classified_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    """Return only the descriptors of a class that carry an annotation."""
    return tuple(d for d in describe_type(cls) if d.annotation is not None)
