"""Detaches and parses the leading YAML front-matter block."""

from __future__ import annotations

import re

import yaml

from .pipeline import Document, RenderError, Transform

_FRONTMATTER_RE = re.compile(r"\A---[ \t]*\n(.*?)^---[ \t]*$\n?", re.DOTALL | re.MULTILINE)


def split_frontmatter(content: str) -> tuple[str | None, str]:
    """Split a markdown file into YAML front-matter and body.

    Returns (yaml_str, body). yaml_str is None if no front-matter found.
    """
    match = _FRONTMATTER_RE.match(content)
    if match is None:
        return None, content
    return match.group(1), content[match.end():]


class FrontmatterExtractor(Transform):
    name = "frontmatter"

    def apply(self, document: Document) -> None:
        yaml_str, body = split_frontmatter(document.body)
        document.body = body
        if yaml_str is None:
            document.frontmatter = {}
            return

        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise RenderError(self.name, f"invalid YAML: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise RenderError(self.name, f"expected a mapping, got {type(data).__name__}")
        document.frontmatter = data
