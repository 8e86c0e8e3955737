"""Recording presenter for testing (no output)."""


class NullPresenter:
    """Present output to nowhere, keeping it for assertions (testing implementation)."""

    def __init__(self):
        self.results: list[str] = []
        self.errors: list[str] = []

    def show_result(self, text: str) -> None:
        """Record a lookup result."""
        self.results.append(text)

    def show_error(self, message: str) -> None:
        """Record an error message."""
        self.errors.append(message)
