"""Run command pipelines between files, with here-document input and small text helpers."""

__version__ = "0.1.0"

__all__ = ["cli", "lines", "printf", "resolve", "textops"]