"""Data models for ydt."""

from .translation import NO_RESULTS, ExtractionResult

__all__ = ["ExtractionResult", "NO_RESULTS"]
