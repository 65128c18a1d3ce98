"""Recognized metadata keys and the closed record they validate into."""

from collections.abc import Mapping
from datetime import UTC, date, datetime, time
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_timestamp(value: Any) -> datetime:
    """Coerce an ISO 8601 string, datetime or date into an aware datetime.

    Values without an offset are taken as UTC.
    """
    if isinstance(value, datetime):
        stamp = value
    elif isinstance(value, date):
        stamp = datetime.combine(value, time.min)
    elif isinstance(value, str):
        try:
            stamp = datetime.fromisoformat(value.strip())
        except ValueError as exc:
            raise ValueError(f"not a valid timestamp: {value!r}") from exc
    else:
        raise ValueError(f"not a valid timestamp: {value!r}")
    if stamp.tzinfo is None:
        stamp = stamp.replace(tzinfo=UTC)
    return stamp


class FrontMatter(BaseModel):
    """Validated metadata block. Unrecognized keys are preserved, not validated."""

    model_config = ConfigDict(extra="allow", frozen=True)

    title: str
    published_at: datetime = Field(alias="date")
    tags: tuple[str, ...] = ()
    draft: bool = False

    @field_validator("title", mode="before")
    @classmethod
    def _title_not_blank(cls, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError("title must be a non-empty string")
        return value.strip()

    @field_validator("published_at", mode="before")
    @classmethod
    def _date_is_timestamp(cls, value: Any) -> datetime:
        return parse_timestamp(value)

    @field_validator("tags", mode="before")
    @classmethod
    def _tags_are_labels(cls, value: Any) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("tags must be a list of strings")
        labels: set[str] = set()
        for tag in value:
            if not isinstance(tag, str) or not tag.strip():
                raise ValueError(f"invalid tag: {tag!r}")
            labels.add(tag.strip())
        return tuple(sorted(labels))


def normalize_extra(value: Any) -> Any:
    """Convert a decoded metadata value into plain JSON-compatible data."""
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, Mapping):
        return {str(k): normalize_extra(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [normalize_extra(v) for v in value]
    return str(value)
