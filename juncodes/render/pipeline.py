"""TransformPipeline: runs ordered transforms from markdown source to HTML."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from bs4 import BeautifulSoup
from pydantic import BaseModel

from juncodes.errors import RenderError


class RenderResult(BaseModel):
    """Parsed front-matter plus the rendered HTML body."""

    frontmatter: dict[str, Any]
    html: str


@dataclass
class Document:
    """Working state handed from one transform to the next."""

    source: str
    frontmatter: dict[str, Any] = field(default_factory=dict)
    body: str = ""
    tree: BeautifulSoup | None = None


class Transform(ABC):
    name = "transform"

    @abstractmethod
    def apply(self, document: Document) -> None:
        """Mutate the document in place."""
        ...


class TreeTransform(Transform):
    """A transform that only runs once the body has been parsed into a tree."""

    def apply(self, document: Document) -> None:
        if document.tree is None:
            raise RenderError(self.name, "document has no HTML tree yet")
        self.apply_tree(document.tree)

    @abstractmethod
    def apply_tree(self, tree: BeautifulSoup) -> None: ...


class TransformPipeline:
    def __init__(self, transforms: list[Transform]):
        self.transforms = transforms

    def process(self, source: str) -> RenderResult:
        document = Document(source=source, body=source)
        for t in self.transforms:
            t.apply(document)
        html = str(document.tree) if document.tree is not None else document.body
        return RenderResult(frontmatter=document.frontmatter, html=html)
