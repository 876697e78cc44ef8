"""Pygments highlighting for fenced code blocks in an allow-listed set of languages."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag
from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .pipeline import TreeTransform

logger = logging.getLogger(__name__)

_LANGUAGE_PREFIX = "language-"


def code_language(code: Tag) -> str | None:
    """Language tag of a fenced block, taken from its `language-*` class."""
    for cls in code.get("class") or []:
        if cls.startswith(_LANGUAGE_PREFIX):
            return cls[len(_LANGUAGE_PREFIX):].lower()
    return None


class SyntaxHighlighter(TreeTransform):
    name = "highlight"

    def __init__(self, languages: list[str], style: str = "default") -> None:
        self.languages = {lang.lower() for lang in languages}
        self.formatter = HtmlFormatter(style=style, noclasses=True, cssclass="highlight")

    def apply_tree(self, tree: BeautifulSoup) -> None:
        for pre in tree.find_all("pre"):
            code = pre.find("code", recursive=False)
            if code is None:
                continue
            lang = code_language(code)
            if lang is None or lang not in self.languages:
                continue
            try:
                lexer = get_lexer_by_name(lang)
            except ClassNotFound:
                logger.debug("No Pygments lexer for %s, leaving block plain", lang)
                continue

            rendered = highlight(code.get_text(), lexer, self.formatter)
            block = BeautifulSoup(rendered, "html.parser").find("div")
            block["data-language"] = lang
            pre.replace_with(block)
