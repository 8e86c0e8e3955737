"""Custom exceptions for ydt."""

from .base import YdtError
from .network import (
    BuildRequestUrlError,
    CreateHttpClientError,
    FetchTranslationError,
    HttpStatusError,
    ReadResponseError,
)
from .parsing import ParseCssSelectorError

__all__ = [
    "YdtError",
    "CreateHttpClientError",
    "BuildRequestUrlError",
    "FetchTranslationError",
    "HttpStatusError",
    "ReadResponseError",
    "ParseCssSelectorError",
]
