"""Markdown rendering pipeline: front-matter, GFM, math, highlighting, heading ids."""

from __future__ import annotations

from juncodes.config.models import RenderConfig

from .frontmatter import FrontmatterExtractor, split_frontmatter
from .headings import HeadingSlugger, slugify_heading
from .highlight import SyntaxHighlighter
from .markdown import MarkdownConverter
from .math import MathRenderer
from .pipeline import Document, RenderError, RenderResult, Transform, TransformPipeline
from .reading_time import estimate_reading_time


def create_pipeline(config: RenderConfig | None = None) -> TransformPipeline:
    """Build the render chain. Stage order matters: later stages read the tree
    produced by the markdown stage."""
    config = config or RenderConfig()
    return TransformPipeline([
        FrontmatterExtractor(),
        MarkdownConverter(),
        MathRenderer(on_error=config.math_errors),
        SyntaxHighlighter(config.languages, style=config.highlight_style),
        HeadingSlugger(unique=config.unique_heading_ids),
    ])


__all__ = [
    "Document",
    "FrontmatterExtractor",
    "HeadingSlugger",
    "MarkdownConverter",
    "MathRenderer",
    "RenderError",
    "RenderResult",
    "SyntaxHighlighter",
    "Transform",
    "TransformPipeline",
    "create_pipeline",
    "estimate_reading_time",
    "slugify_heading",
    "split_frontmatter",
]
