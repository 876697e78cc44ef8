"""Renders math nodes to MathML."""

from __future__ import annotations

import logging

from bs4 import BeautifulSoup, Tag
from latex2mathml.converter import convert as latex_to_mathml

from .pipeline import RenderError, TreeTransform

logger = logging.getLogger(__name__)

_DELIMITERS = {
    "inline": ("\\(", "\\)"),
    "block": ("\\[", "\\]"),
}


def _strip_delimiters(text: str, display: str) -> str:
    opening, closing = _DELIMITERS[display]
    text = text.strip()
    if text.startswith(opening) and text.endswith(closing):
        text = text[len(opening):-len(closing)]
    return text.strip()


class MathRenderer(TreeTransform):
    name = "math"

    def __init__(self, on_error: str = "raise") -> None:
        if on_error not in ("raise", "source"):
            raise ValueError(f"Unknown math error policy: {on_error!r}")
        self.on_error = on_error

    def apply_tree(self, tree: BeautifulSoup) -> None:
        for node in tree.select("span.arithmatex, div.arithmatex"):
            display = "block" if node.name == "div" else "inline"
            self._render_node(node, display)

    def _render_node(self, node: Tag, display: str) -> None:
        latex = _strip_delimiters(node.get_text(), display)
        try:
            mathml = latex_to_mathml(latex, display=display)
        except Exception as e:
            if self.on_error == "raise":
                raise RenderError(self.name, f"cannot render {latex!r}: {e}") from e
            logger.warning("Leaving malformed math as source: %r (%s)", latex, e)
            node["class"] = ["math-error"]
            return

        math = BeautifulSoup(mathml, "html.parser").find("math")
        node.clear()
        if math is not None:
            node.append(math)
        kind = "math-display" if display == "block" else "math-inline"
        node["class"] = ["math", kind]
