"""Content collections: markdown files in one directory, validated against a schema."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable
from datetime import date
from functools import cmp_to_key
from pathlib import Path
from typing import Generic, Protocol

from pydantic import ValidationError

from juncodes.config import SiteConfig, load_config
from juncodes.render import TransformPipeline, create_pipeline, estimate_reading_time
from juncodes.render.reading_time import DEFAULT_WORDS_PER_MINUTE
from juncodes.errors import MetadataValidationError

from .models import ContentItem, MetadataT

logger = logging.getLogger(__name__)

Comparator = Callable[[ContentItem, ContentItem], int]


class ContentCollection(Protocol[MetadataT]):
    def find_all(self) -> list[ContentItem[MetadataT]]: ...

    def find_by_slug(self, slug: str) -> ContentItem[MetadataT] | None: ...


def _is_regular_file(path: Path) -> bool:
    """Regular file check that never follows symbolic links."""
    try:
        mode = os.lstat(path).st_mode
    except (OSError, ValueError):
        return False
    return stat.S_ISREG(mode)


def _read_text(path: Path) -> str:
    text = path.read_text(encoding="utf-8")
    return text.replace("\r\n", "\n").replace("\r", "\n").lstrip("\ufeff")


class Collection(Generic[MetadataT]):
    """Loads every markdown file of one content kind.

    Nothing is cached: each call lists the directory, reads, renders and
    validates from scratch.
    """

    def __init__(
        self,
        directory: str,
        schema: type[MetadataT],
        *,
        content_dir: str | Path,
        pipeline: TransformPipeline | None = None,
        extension: str = ".md",
        words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    ) -> None:
        self.directory = Path(content_dir) / directory
        self.schema = schema
        self.pipeline = pipeline or create_pipeline()
        self.extension = extension
        self.words_per_minute = words_per_minute

    # -- Public API ----------------------------------------------------------

    def find_by_slug(self, slug: str) -> ContentItem[MetadataT] | None:
        """Load one item by slug. Returns None if there is no such regular file."""
        if not slug or slug in (".", "..") or any(c in slug for c in "/\\\x00"):
            return None
        path = self.directory / f"{slug}{self.extension}"
        if not _is_regular_file(path):
            logger.debug("No content file for slug %r in %s", slug, self.directory)
            return None
        return self._load(path)

    def find_all(self) -> list[ContentItem[MetadataT]]:
        """Load every item in the directory. Any invalid file fails the whole call."""
        items: list[ContentItem[MetadataT]] = []
        for entry in sorted(os.listdir(self.directory)):
            if not entry.endswith(self.extension):
                continue
            path = self.directory / entry
            if not _is_regular_file(path):
                continue
            items.append(self._load(path))
        return items

    # -- Internals -----------------------------------------------------------

    def _load(self, path: Path) -> ContentItem[MetadataT]:
        logger.debug("Loading %s", path)
        result = self.pipeline.process(_read_text(path))

        try:
            metadata = self.schema.model_validate(result.frontmatter)
        except ValidationError as e:
            logger.error("Invalid metadata for %s: %s", path, result.frontmatter)
            raise MetadataValidationError(str(path), e.errors(), e) from e

        minutes = estimate_reading_time(result.html, self.words_per_minute)
        metadata = metadata.model_copy(update={"reading_time": minutes})
        return ContentItem[self.schema](
            slug=path.name[: -len(self.extension)],
            content=result.html,
            metadata=metadata,
        )


class SortedCollection(Generic[MetadataT]):
    """Wraps a collection so that find_all returns items in comparator order."""

    def __init__(self, base: ContentCollection[MetadataT], compare: Comparator) -> None:
        self.base = base
        self.compare = compare

    def find_all(self) -> list[ContentItem[MetadataT]]:
        return sorted(self.base.find_all(), key=cmp_to_key(self.compare))

    def find_by_slug(self, slug: str) -> ContentItem[MetadataT] | None:
        return self.base.find_by_slug(slug)


def with_sort(collection: ContentCollection[MetadataT], compare: Comparator) -> SortedCollection[MetadataT]:
    return SortedCollection(collection, compare)


def by_date_descending(field: str) -> Comparator:
    """Comparator on a metadata date field, newest first, ties broken by slug."""

    def compare(a: ContentItem, b: ContentItem) -> int:
        da: date = getattr(a.metadata, field)
        db: date = getattr(b.metadata, field)
        if da != db:
            return -1 if da > db else 1
        return (a.slug > b.slug) - (a.slug < b.slug)

    return compare


def create_collection(
    directory: str,
    schema: type[MetadataT],
    config: SiteConfig | None = None,
) -> Collection[MetadataT]:
    """Bind a content kind's directory and schema using site configuration."""
    config = config or load_config()
    return Collection(
        directory,
        schema,
        content_dir=config.content.base_dir,
        pipeline=create_pipeline(config.render),
        extension=config.content.extension,
        words_per_minute=config.render.words_per_minute,
    )
