"""Errors raised while loading content."""

from __future__ import annotations

from typing import Any


class ContentError(Exception):
    """Base class for errors loading content."""


class RenderError(ContentError):
    """Raised when a render stage cannot handle its input."""

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        super().__init__(f"{stage}: {message}")


class MetadataValidationError(ContentError):
    """Front-matter of a content file does not match its schema."""

    def __init__(self, path: str, errors: list[dict[str, Any]], cause: Exception) -> None:
        self.path = path
        self.errors = errors
        fields = ", ".join(".".join(str(p) for p in e.get("loc", ())) for e in errors)
        super().__init__(f"Invalid metadata in {path}: {fields or cause}")
        self.__cause__ = cause
