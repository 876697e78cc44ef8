"""Content collections over directories of markdown files."""

from juncodes.errors import ContentError, MetadataValidationError

from .collection import (
    Collection,
    ContentCollection,
    SortedCollection,
    by_date_descending,
    create_collection,
    with_sort,
)
from .models import ContentItem, ContentMetadata, coerce_date

__all__ = [
    "Collection",
    "ContentCollection",
    "ContentError",
    "ContentItem",
    "ContentMetadata",
    "MetadataValidationError",
    "SortedCollection",
    "by_date_descending",
    "coerce_date",
    "create_collection",
    "with_sort",
]
