"""Shared pydantic building blocks for the persisted record formats.

Terms used in this file:
- Strict model: rejects unknown fields, so a stray key in a stored file is
  reported instead of silently dropped.
- Timestamp: ISO 8601 UTC with millisecond precision and a ``Z`` suffix
  (``2024-01-15T10:30:00.000Z``), the on-disk format of every time field.
"""

from __future__ import annotations

import re
from datetime import UTC, datetime
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic import ValidationError as PydanticValidationError

from task_status_checker.errors import SchemaViolationError

TIMESTAMP_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")
_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

ModelT = TypeVar("ModelT", bound=BaseModel)


def utc_now() -> datetime:
    """Current UTC time truncated to whole milliseconds."""
    now = datetime.now(tz=UTC)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)


def format_timestamp(value: datetime) -> str:
    value = value.astimezone(UTC)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise ValueError("timestamp must be timezone-aware")
        return value.astimezone(UTC)
    if not isinstance(value, str) or not TIMESTAMP_PATTERN.match(value):
        raise ValueError("must be an ISO 8601 UTC timestamp like 2024-01-15T10:30:00.000Z")
    return datetime.strptime(value, _TIMESTAMP_FORMAT).replace(tzinfo=UTC)


Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str),
]


class StrictModel(BaseModel):
    """Base model for strict schema validation."""

    model_config = ConfigDict(extra="forbid")


def decode_model(model: type[ModelT], raw: str | bytes, *, key: str) -> ModelT:
    """Parse ``raw`` JSON into ``model``, reporting the first offending field."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SchemaViolationError(key, None, f"payload is not valid UTF-8: {exc}") from exc
    try:
        return model.model_validate_json(raw)
    except PydanticValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise SchemaViolationError(key, field, first["msg"]) from exc
