"""Fetch Youdao result pages with a browser identity fallback."""

import logging

import requests

from ydt.config import YdtConfig
from ydt.exceptions import (
    BuildRequestUrlError,
    CreateHttpClientError,
    FetchTranslationError,
    HttpStatusError,
    ReadResponseError,
)

logger = logging.getLogger(__name__)


class YoudaoFetcher:
    """Download the result page for a word (stateless service).

    The first attempt identifies as ydt. If it fails at the transport
    level, or the server answers with one of the configured blocking
    statuses, the request is repeated once with a browser user agent.
    """

    def __init__(self, config: YdtConfig):
        """Initialize the fetcher.

        Args:
            config: Endpoint, timeout and identity settings
        """
        self.config = config

    def fetch(self, word: str) -> str:
        """Fetch the result page HTML for a word.

        Args:
            word: Word to look up (any script, not validated)

        Returns:
            Response body text

        Raises:
            CreateHttpClientError: If the HTTP session cannot be created
            BuildRequestUrlError: If the request URL cannot be built
            FetchTranslationError: If both attempts fail at the transport level
            HttpStatusError: If the final response is not a success
            ReadResponseError: If the body cannot be read
        """
        with self._build_session() as session:
            response = self._fetch_with_fallback(session, word)
            return self._read_body(response)

    def _fetch_with_fallback(self, session: requests.Session, word: str) -> requests.Response:
        try:
            response = self._send(session, word, self.config.project_user_agent)
        except FetchTranslationError as e:
            logger.warning("Request for %r failed (%s), retrying with browser identity", word, e)
            return self._ensure_success(
                self._send(session, word, self.config.browser_user_agent)
            )

        if response.status_code in self.config.fallback_statuses:
            logger.warning(
                "Request for %r blocked with status %d, retrying with browser identity",
                word,
                response.status_code,
            )
            response.close()
            return self._ensure_success(
                self._send(session, word, self.config.browser_user_agent)
            )

        return self._ensure_success(response)

    def _send(self, session: requests.Session, word: str, user_agent: str) -> requests.Response:
        """Send one GET request under the given identity."""
        try:
            request = session.prepare_request(
                requests.Request(
                    "GET",
                    self.config.result_url,
                    params={"word": word, "lang": self.config.target_lang},
                    headers={"User-Agent": user_agent},
                )
            )
        except (requests.RequestException, ValueError) as e:
            raise BuildRequestUrlError(e) from e

        logger.debug("GET %s (User-Agent: %s)", request.url, user_agent)
        try:
            return session.send(request, timeout=self.config.request_timeout, stream=True)
        except requests.RequestException as e:
            raise FetchTranslationError(e) from e

    @staticmethod
    def _build_session() -> requests.Session:
        try:
            return requests.Session()
        except (requests.RequestException, ValueError, TypeError) as e:
            raise CreateHttpClientError(e) from e

    @staticmethod
    def _ensure_success(response: requests.Response) -> requests.Response:
        status = response.status_code
        if 200 <= status < 300:
            return response
        response.close()
        raise HttpStatusError(status)

    @staticmethod
    def _read_body(response: requests.Response) -> str:
        # Pages without a charset are UTF-8, not the HTTP default ISO-8859-1
        content_type = response.headers.get("Content-Type") or ""
        if "charset" not in content_type.lower():
            response.encoding = "utf-8"
        try:
            return response.text
        except (requests.RequestException, UnicodeDecodeError, LookupError) as e:
            raise ReadResponseError(e) from e
        finally:
            response.close()
