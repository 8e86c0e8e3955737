"""Business logic services for ydt."""

from .extractor import extract_translation
from .fetcher import YoudaoFetcher
from .selectors import CachedSelector
from .translation_service import TranslationService, get_translation, parse_translation_from_html

__all__ = [
    "YoudaoFetcher",
    "TranslationService",
    "CachedSelector",
    "extract_translation",
    "get_translation",
    "parse_translation_from_html",
]
