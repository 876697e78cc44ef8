"""juncodes: markdown content collections for jun.codes."""

__version__ = "0.1.0"
