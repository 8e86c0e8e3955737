"""Console presenter for CLI output."""

import sys


class ConsolePresenter:
    """Present output to console (CLI implementation).

    Results go to stdout; errors go to stderr.
    """

    def show_result(self, text: str) -> None:
        """Display a lookup result."""
        print(text)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(message, file=sys.stderr)
