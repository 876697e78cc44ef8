"""Job history entries for the career page."""

from __future__ import annotations

import datetime
from typing import Any, Literal

from pydantic import field_validator

from juncodes.collection import (
    ContentItem,
    ContentMetadata,
    SortedCollection,
    by_date_descending,
    coerce_date,
    create_collection,
    with_sort,
)
from juncodes.config import SiteConfig, load_config

JOBS_DIRECTORY = "jobs"

JobType = Literal["full-time", "part-time", "contract", "internship"]


class JobMetadata(ContentMetadata):
    title: str
    company: str
    location: str
    begin: datetime.date
    end: datetime.date | Literal["present"]
    type: JobType
    highlights: list[str]
    skills: list[str]

    @field_validator("begin", "end", mode="before")
    @classmethod
    def _coerce_dates(cls, v: Any) -> Any:
        return coerce_date(v)


Job = ContentItem[JobMetadata]


def _jobs(config: SiteConfig) -> SortedCollection[JobMetadata]:
    return with_sort(
        create_collection(JOBS_DIRECTORY, JobMetadata, config),
        by_date_descending("begin"),
    )


def find_all_jobs(config: SiteConfig | None = None) -> list[Job]:
    """Every job, most recently started first."""
    return _jobs(config or load_config()).find_all()


def find_job_by_slug(slug: str, config: SiteConfig | None = None) -> Job | None:
    return _jobs(config or load_config()).find_by_slug(slug)
