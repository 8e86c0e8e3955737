"""Presenter protocol for output abstraction."""

from typing import Protocol


class PresenterProtocol(Protocol):
    """Interface for presenting lookup output to the user.

    Keeps the CLI command independent of where output ends up.
    """

    def show_result(self, text: str) -> None:
        """Display a lookup result.

        Args:
            text: The rendered translation text
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...
