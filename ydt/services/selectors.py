"""Lazily compiled CSS selectors for the Youdao result page."""

import logging
import threading

import soupsieve

from ydt.exceptions import ParseCssSelectorError

logger = logging.getLogger(__name__)


class CachedSelector:
    """A CSS selector compiled at most once per process.

    The first call to get() compiles the selector; later calls reuse it.
    A compilation failure is remembered and raised again on every call.
    """

    def __init__(self, css: str):
        """Initialize with the selector source.

        Args:
            css: CSS selector text
        """
        self.css = css
        self._lock = threading.Lock()
        self._compiled: soupsieve.SoupSieve | None = None
        self._failed = False
        self._initialized = False

    def get(self) -> soupsieve.SoupSieve:
        """Return the compiled selector.

        Returns:
            Compiled soupsieve pattern

        Raises:
            ParseCssSelectorError: If the selector does not compile
        """
        if not self._initialized:
            with self._lock:
                if not self._initialized:
                    try:
                        self._compiled = soupsieve.compile(self.css)
                    except soupsieve.SelectorSyntaxError:
                        logger.error("Invalid CSS selector: %s", self.css, exc_info=True)
                        self._failed = True
                    self._initialized = True

        if self._failed:
            raise ParseCssSelectorError(self.css)
        return self._compiled

    def __repr__(self) -> str:
        return f"CachedSelector({self.css!r})"


# CJK query: one list item per English rendering
WORD_EXP_CE = CachedSelector("li.word-exp-ce.mcols-layout")
POINT = CachedSelector("a.point")

# Latin query: first container holds phonetics, second holds translations
TRANS_CONTAINER = CachedSelector("div.trans-container")
PER_PHONE = CachedSelector("div.per-phone")
SPAN = CachedSelector("span")
PHONETIC = CachedSelector("span.phonetic")
WORD_EXP = CachedSelector("li.word-exp")
POS = CachedSelector("span.pos")
TRANS = CachedSelector("span.trans")
