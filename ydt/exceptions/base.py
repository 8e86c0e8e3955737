"""Base exception classes for ydt."""


class YdtError(Exception):
    """Base exception for all ydt errors.

    Every failure raised by the fetch and extraction layers inherits
    from this class, so callers can catch a single type.
    """

    pass
