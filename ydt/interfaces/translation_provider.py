"""Protocol for translation lookup providers."""

from typing import Protocol


class TranslationProvider(Protocol):
    """Interface for a backend that turns a word into display text.

    Any source (the Youdao web page, a canned HTML fixture, etc.)
    implements this protocol so the CLI can stay unaware of where
    results come from.
    """

    @property
    def name(self) -> str:
        """Human-readable name for this provider (e.g., 'Youdao')."""
        ...

    def get_translation(self, word: str) -> str:
        """Look up a single word.

        Args:
            word: Word in any script

        Returns:
            Display text, or "No results." if nothing was found

        Raises:
            YdtError: If the lookup fails
        """
        ...
