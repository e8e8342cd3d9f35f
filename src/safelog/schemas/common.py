"""Common Pydantic v2 schemas shared across the API and the record catalog."""

from pydantic import BaseModel, Field

from safelog.lib.redaction import render_safe_string


class SafeRecord(BaseModel):
    """Base for classified records.

    ``str()`` and ``repr()`` both return the log-safe rendering, so a record
    formatted into a log message, or bound inside a dict or list, never
    shows a classified field in clear text.
    """

    def __str__(self) -> str:
        return render_safe_string(self)

    def __repr__(self) -> str:
        return render_safe_string(self)


class ErrorResponse(BaseModel):
    """Standard error response body."""

    detail: str = Field(description="Human-readable error message")
    code: str | None = Field(default=None, description="Machine-readable error code")
    errors: list[dict] | None = Field(default=None, description="Detailed validation errors")
