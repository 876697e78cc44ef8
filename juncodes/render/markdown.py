"""Markdown to HTML tree, with GFM-style and math extensions."""

from __future__ import annotations

import markdown
from bs4 import BeautifulSoup

from .pipeline import Document, Transform

MARKDOWN_EXTENSIONS = [
    "tables",
    "fenced_code",
    "pymdownx.tilde",
    "pymdownx.magiclink",
    "pymdownx.tasklist",
    "pymdownx.arithmatex",
]

EXTENSION_CONFIGS = {
    # ~~strike~~ only; GFM has no ~subscript~
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.tasklist": {"custom_checkbox": False},
    "pymdownx.arithmatex": {"generic": True},
}


class MarkdownConverter(Transform):
    name = "markdown"

    def apply(self, document: Document) -> None:
        # markdown.markdown builds a fresh Markdown instance per call
        html = markdown.markdown(
            document.body,
            extensions=MARKDOWN_EXTENSIONS,
            extension_configs=EXTENSION_CONFIGS,
        )
        document.tree = BeautifulSoup(html, "html.parser")
