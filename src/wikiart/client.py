"""
A compact HTTP client that turns WikiArt pages into parsed documents.
"""

import io
import logging
from typing import BinaryIO
import urllib.parse

import requests
from bs4 import BeautifulSoup
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .exceptions import FetchError, raise_for_fetch_error

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.wikiart.org"
DEFAULT_USER_AGENT = "wikiart-client/0.1 (+https://www.wikiart.org)"


class WikiArtClient:
    """
    Document fetcher for the WikiArt site.

    Every method blocks until the remote answers or the timeout expires.
    Failures are raised as `FetchError` subclasses; a 404 is always a
    `NotFoundError`.

    Args:
        base_url: Site root (default: 'https://www.wikiart.org')
        verify_tls: Whether to verify SSL/TLS certificates (default: True)
        default_timeout: Request timeout in seconds (default: 30.0)
        pool_connections: Number of connection pools to cache (default: 3)
        pool_maxsize: Maximum number of connections kept in a pool (default: 10)
        user_agent: Value of the User-Agent header sent with every request
        max_retries: Transport-level retries on 429/5xx (default: 0)
        parser: BeautifulSoup tree builder (default: 'lxml')

    Example:
        >>> client = WikiArtClient()
        >>> doc = client.fetch(client.endpoint('/en/claude-monet'))
        >>> doc.title.get_text()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        verify_tls: bool = True,
        default_timeout: float = 30.0,
        pool_connections: int = 3,
        pool_maxsize: int = 10,
        user_agent: str = DEFAULT_USER_AGENT,
        max_retries: int = 0,
        parser: str = "lxml",
    ) -> None:

        self.base_url = base_url.rstrip("/")
        self.verify_tls = verify_tls
        self.default_timeout = default_timeout
        self.parser = parser

        self._session = requests.Session()
        self._session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            }
        )

        # Configure connection pooling
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
            raise_on_status=False,
        )
        adapter = HTTPAdapter(
            pool_connections=pool_connections,
            pool_maxsize=pool_maxsize,
            max_retries=retry_strategy,
        )
        self._session.mount("http://", adapter)
        self._session.mount("https://", adapter)

    # ------------------------------------------------------------------
    # URL helpers
    # ------------------------------------------------------------------

    def _join(self, base: str, path: str) -> str:
        """Join base and path cleanly without stripping segments."""
        return urllib.parse.urljoin(base.rstrip("/") + "/", path.lstrip("/"))

    def endpoint(self, path: str) -> str:
        """
        Return the absolute URL for a site path.

        Absolute URLs (e.g. an href pointing at an image CDN) are
        returned unchanged.
        """
        if urllib.parse.urlparse(path).scheme:
            return path
        return self._join(self.base_url, path)

    def is_site_url(self, url: str) -> bool:
        """Whether `url` is on the configured site host (not a shop or ad link)."""
        site_host = urllib.parse.urlparse(self.base_url).netloc.lower()
        return urllib.parse.urlparse(self.endpoint(url)).netloc.lower() == site_host

    # ------------------------------------------------------------------
    # Low-level request
    # ------------------------------------------------------------------

    def request(
        self,
        method: str,
        url: str,
        *,
        timeout=None,
        headers=None,
        **kwargs,
    ) -> requests.Response:
        """
        Send one request and raise on transport failure or error status.

        Args:
            method: HTTP method (GET or HEAD in practice)
            url: Absolute URL or site path
            timeout: Request timeout in seconds (uses default_timeout if None)
            headers: Extra HTTP headers
            **kwargs: Passed through to `requests.Session.request`

        Raises:
            FetchError: on connection errors, timeouts and non-2xx answers
        """
        url = self.endpoint(url)
        logger.debug("%s %s", method.upper(), url)

        try:
            resp = self._session.request(
                method.upper(),
                url,
                headers=headers,
                verify=self.verify_tls,
                timeout=self.default_timeout if timeout is None else timeout,
                **kwargs,
            )
        except requests.RequestException as exc:
            raise FetchError(url=url, detail=str(exc)) from exc

        raise_for_fetch_error(resp)
        return resp

    # ------------------------------------------------------------------
    # Document fetcher contract
    # ------------------------------------------------------------------

    def fetch(self, url: str) -> BeautifulSoup:
        """GET a page and return its parsed tree."""
        resp = self.request("GET", url)
        return BeautifulSoup(resp.text, self.parser)

    def check(self, url: str) -> None:
        """
        Lightweight existence check (HEAD, redirects followed).

        Raises:
            NotFoundError: if the page does not exist
            FetchError: for any other failure
        """
        self.request("HEAD", url, allow_redirects=True)

    def open_stream(self, url: str) -> BinaryIO:
        """Download a binary resource (an image) and return it as a stream."""
        resp = self.request("GET", url)
        return io.BytesIO(resp.content)

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "WikiArtClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} base_url='{self.base_url}'>"
