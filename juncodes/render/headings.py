"""Assigns slugified ids to headings."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

from .pipeline import TreeTransform

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]


def slugify_heading(text: str) -> str:
    s = text.strip().lower()
    s = re.sub(r"[^\w\s-]", "", s)
    s = re.sub(r"\s", "-", s)
    return s or "section"


class HeadingSlugger(TreeTransform):
    name = "headings"

    def __init__(self, unique: bool = True) -> None:
        self.unique = unique

    def apply_tree(self, tree: BeautifulSoup) -> None:
        used: dict[str, int] = {}

        def unique_id(base: str) -> str:
            n = used.get(base, 0)
            used[base] = n + 1
            return base if n == 0 else f"{base}-{n}"

        for heading in tree.find_all(HEADING_TAGS):
            if heading.get("id"):
                used.setdefault(heading["id"], 1)
                continue
            slug = slugify_heading(heading.get_text())
            heading["id"] = unique_id(slug) if self.unique else slug
