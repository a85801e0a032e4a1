"""Domain models and text helpers."""

from . import html_text, models

__all__ = ["html_text", "models"]
