"""Blog posts: schema and the lookups pages and feeds are allowed to call."""

from __future__ import annotations

import datetime
from typing import Any

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
from juncodes.config import SiteConfig, is_beta_mode, load_config

BLOG_DIRECTORY = "blog"


class PostMetadata(ContentMetadata):
    title: str
    description: str
    tags: list[str]
    published: bool
    date: datetime.date

    @field_validator("date", mode="before")
    @classmethod
    def _coerce_date(cls, v: Any) -> Any:
        return coerce_date(v)


Post = ContentItem[PostMetadata]


def _posts(config: SiteConfig) -> SortedCollection[PostMetadata]:
    return with_sort(
        create_collection(BLOG_DIRECTORY, PostMetadata, config),
        by_date_descending("date"),
    )


def is_visible(post: Post, include_unpublished: bool) -> bool:
    return post.metadata.published or include_unpublished


def find_all_blogs(
    include_unpublished: bool | None = None,
    config: SiteConfig | None = None,
) -> list[Post]:
    """All visible posts, newest first.

    include_unpublished defaults to whether this is a beta deployment.
    """
    config = config or load_config()
    if include_unpublished is None:
        include_unpublished = is_beta_mode(config)
    return [p for p in _posts(config).find_all() if is_visible(p, include_unpublished)]


def find_blog_by_slug(
    slug: str,
    include_unpublished: bool | None = None,
    config: SiteConfig | None = None,
) -> Post | None:
    config = config or load_config()
    if include_unpublished is None:
        include_unpublished = is_beta_mode(config)
    post = _posts(config).find_by_slug(slug)
    if post is None or not is_visible(post, include_unpublished):
        return None
    return post
