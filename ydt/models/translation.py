"""Data models for extracted dictionary entries."""

from dataclasses import dataclass, field

NO_RESULTS = "No results."


@dataclass
class ExtractionResult:
    """Phonetic and translation entries pulled from one result page."""

    phonetics: list[str] = field(default_factory=list)  # e.g. "英 /həˈləʊ/"
    translations: list[str] = field(default_factory=list)  # e.g. "int.: 你好"

    @property
    def is_empty(self) -> bool:
        """Check if nothing was extracted."""
        return not self.phonetics and not self.translations

    def render(self) -> str:
        """Join the entries into the display string.

        Phonetics share one line; each translation gets its own line.

        Returns:
            The display text, or "No results." if both lists are empty
        """
        if self.is_empty:
            return NO_RESULTS

        phonetics_line = " ".join(self.phonetics)
        translations_block = "\n".join(self.translations)
        if not phonetics_line:
            return translations_block
        if not translations_block:
            return phonetics_line
        return f"{phonetics_line}\n{translations_block}"

    def __str__(self) -> str:
        return self.render()
