"""Service for looking words up on Youdao."""

import logging

from ydt.config import YdtConfig, create_default_config

from . import extractor
from .fetcher import YoudaoFetcher

logger = logging.getLogger(__name__)


class TranslationService:
    """Fetch a result page and turn it into display text.

    Implements TranslationProvider protocol.
    """

    def __init__(self, config: YdtConfig, fetcher: YoudaoFetcher | None = None):
        """Initialize the translation service.

        Args:
            config: Configuration for lookups
            fetcher: Page fetcher (defaults to a YoudaoFetcher built from config)
        """
        self.config = config
        self.fetcher = fetcher or YoudaoFetcher(config)

    @property
    def name(self) -> str:
        return "Youdao"

    def get_translation(self, word: str) -> str:
        """Look up a word and return its phonetics and translations.

        Args:
            word: Word to look up

        Returns:
            Display text, or "No results." if the page had no entry

        Raises:
            YdtError: If fetching or parsing fails
        """
        logger.info("Looking up %r on %s", word, self.name)
        html = self.fetcher.fetch(word)
        return self.parse_translation_from_html(word, html)

    def parse_translation_from_html(self, word: str, html: str) -> str:
        """Turn an already fetched result page into display text."""
        return extractor.parse_translation_from_html(word, html)


def get_translation(word: str) -> str:
    """Look up a word with the default configuration.

    Args:
        word: Word to look up

    Returns:
        Display text

    Raises:
        YdtError: If fetching or parsing fails
    """
    return TranslationService(create_default_config()).get_translation(word)


def parse_translation_from_html(word: str, html: str) -> str:
    """Turn a result page into display text without network I/O."""
    return extractor.parse_translation_from_html(word, html)
