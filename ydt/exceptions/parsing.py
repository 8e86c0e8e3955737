"""HTML parsing exceptions."""

from .base import YdtError


class ParseCssSelectorError(YdtError):
    """Raised when a built-in CSS selector fails to compile."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Failed to parse CSS selector: {selector}")
