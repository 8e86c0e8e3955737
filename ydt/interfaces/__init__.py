"""Interface protocols for ydt."""

from .presenter import PresenterProtocol
from .translation_provider import TranslationProvider

__all__ = ["PresenterProtocol", "TranslationProvider"]
