"""Pydantic models for content collections."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict


# Written-out forms authors use besides ISO 8601, which pydantic already parses.
LONG_DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%d %b %Y", "%Y/%m/%d")


def coerce_date(value: Any) -> Any:
    """YAML gives dates or datetimes; schemas want plain dates.

    Strings such as "March 5, 2024" are parsed too. Anything unrecognised is
    returned unchanged for the schema to reject.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        text = value.strip()
        for fmt in LONG_DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).date()
            except ValueError:
                continue
    return value


class ContentMetadata(BaseModel):
    """Base for every front-matter schema. Unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore")

    reading_time: float = 0.0


MetadataT = TypeVar("MetadataT", bound=ContentMetadata)


class ContentItem(BaseModel, Generic[MetadataT]):
    """One loaded content file."""

    slug: str
    content: str
    metadata: MetadataT

