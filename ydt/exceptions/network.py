"""Network and HTTP related exceptions."""

from .base import YdtError


class CreateHttpClientError(YdtError):
    """Raised when the HTTP client cannot be set up."""

    def __init__(self, reason: object):
        super().__init__(f"Failed to create HTTP client: {reason}")


class BuildRequestUrlError(YdtError):
    """Raised when the request URL cannot be assembled."""

    def __init__(self, reason: object):
        super().__init__(f"Failed to build request URL: {reason}")


class FetchTranslationError(YdtError):
    """Raised on transport failures (connection, DNS, TLS, timeout)."""

    def __init__(self, reason: object):
        super().__init__(f"Failed to fetch translation: {reason}")


class HttpStatusError(YdtError):
    """Raised when the server answers with a non-success status."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"Request failed with status: {status_code}")


class ReadResponseError(YdtError):
    """Raised when the response body cannot be read or decoded."""

    def __init__(self, reason: object):
        super().__init__(f"Failed to read response: {reason}")
