import json
import logging
import threading
import time
from http.cookiejar import Cookie
from typing import Any, Mapping, Optional
from urllib.parse import urlparse

import httpx
from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from lxml import etree

from wishlist.core.config import settings
from wishlist.utils.content_type import detect_content_type, safe_xml_parser
from .exceptions import (
    FetchFailedError,
    FetchTimeoutError,
    ParseFailedError,
    ResponseConsumedError,
)
from .url_validator import URLValidator, URLValidatorInterface

logger = logging.getLogger(__name__)


class FetchResponse:
    """
    A response whose body has not been read yet.

    The body is a single-use stream: exactly one of ``text()``, ``json()``,
    ``xml()`` or ``html()`` may be called. Any later read raises
    ``ResponseConsumedError``. The underlying connection is released after the
    first read, on ``close()``, or when leaving a ``with`` block, whichever
    happens first.
    """

    def __init__(self, response: httpx.Response):
        self.response = response
        self._consumed = False

    @property
    def status_code(self) -> int:
        return self.response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.response.headers

    @property
    def url(self) -> str:
        return str(self.response.url)

    def _read(self) -> bytes:
        if self._consumed:
            raise ResponseConsumedError(self.url)
        self._consumed = True

        try:
            return self.response.read()
        except httpx.TimeoutException as e:
            raise FetchTimeoutError(self.url, _read_timeout(self.response)) from e
        except httpx.HTTPError as e:
            raise FetchFailedError(self.url, f"error while reading body: {e}") from e
        finally:
            self.response.close()

    def text(self) -> str:
        """Read the body as text, decoded with the charset the server declared."""
        self._read()
        return self.response.text

    def json(self) -> Any:
        data = self._read()
        try:
            return json.loads(data)
        except ValueError as e:
            raise ParseFailedError("JSON", str(e)) from e

    def xml(self) -> etree._Element:
        data = self._read()
        try:
            return etree.fromstring(data, parser=safe_xml_parser())
        except etree.XMLSyntaxError as e:
            raise ParseFailedError("XML", str(e)) from e

    def html(self) -> BeautifulSoup:
        """
        Parse the body into a BeautifulSoup tree.

        Markup errors are tolerated by the lxml tree builder; only bodies that
        cannot be decoded at all fail. Multi-valued attributes such as ``rel``
        keep their raw string value.
        """
        data = self._read()
        try:
            return BeautifulSoup(
                data,
                "lxml",
                from_encoding=self.response.charset_encoding,
                multi_valued_attributes=None,
            )
        except (ParserRejectedMarkup, ValueError) as e:
            raise ParseFailedError("HTML", str(e)) from e

    def close(self) -> None:
        self.response.close()

    def __enter__(self) -> "FetchResponse":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def _read_timeout(response: httpx.Response) -> Optional[float]:
    timeout = response.request.extensions.get("timeout", {})
    return timeout.get("read")


class FetchClient:
    """
    HTTP client with a persistent identity.

    Default headers and cookies live on the client and apply to every request
    it sends. They may be changed at any time from any thread: configuration
    is guarded by a lock and each request is assembled from a consistent
    snapshot before it goes on the wire.
    """

    def __init__(
        self,
        url_validator: Optional[URLValidatorInterface] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
        follow_redirects: Optional[bool] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.url_validator = url_validator or URLValidator(settings.fetch_block_private_hosts)
        self.timeout = settings.fetch_timeout if timeout is None else timeout
        if follow_redirects is None:
            follow_redirects = settings.fetch_follow_redirects

        self._lock = threading.Lock()
        self._headers = httpx.Headers({"User-Agent": settings.fetch_user_agent})
        if headers:
            self._headers.update(headers)
        self._client = httpx.Client(
            timeout=self.timeout,
            follow_redirects=follow_redirects,
            transport=transport,
            event_hooks={"request": [self._check_hop]},
        )

    @property
    def headers(self) -> httpx.Headers:
        """A copy of the default headers."""
        with self._lock:
            return self._headers.copy()

    @property
    def cookies(self) -> httpx.Cookies:
        """A copy of the cookie jar."""
        with self._lock:
            return httpx.Cookies(self._client.cookies)

    def add_header(self, name: str, value: str) -> None:
        """Set a default header, sent with every request until removed."""
        with self._lock:
            self._headers[name] = value

    def remove_header(self, name: str) -> None:
        with self._lock:
            self._headers.pop(name, None)

    def add_cookie(self, url: str, name: str, value: str, max_age: Optional[int] = None) -> None:
        """
        Store a cookie scoped to the host and path of ``url``.

        The cookie is only sent with requests whose URL matches that scope. A
        ``max_age`` of None or 0 keeps it for the client's lifetime, a positive
        value expires it after that many seconds and a negative one removes it.
        """
        host, path = self._cookie_scope(url)
        if max_age is not None and max_age < 0:
            self.remove_cookie(url, name)
            return

        expires = int(time.time()) + max_age if max_age else None
        cookie = Cookie(
            version=0,
            name=name,
            value=value,
            port=None,
            port_specified=False,
            domain=host,
            domain_specified=True,
            domain_initial_dot=False,
            path=path,
            path_specified=True,
            secure=False,
            expires=expires,
            discard=expires is None,
            comment=None,
            comment_url=None,
            rest={},
        )
        with self._lock:
            self._client.cookies.jar.set_cookie(cookie)
        logger.debug(f"Stored cookie '{name}' for {host}{path}")

    def remove_cookie(self, url: str, name: str) -> None:
        """Remove the cookie ``name`` stored for the host of ``url``, if any."""
        host, _ = self._cookie_scope(url)
        with self._lock:
            self._client.cookies.delete(name, domain=host)

    def fetch(
        self,
        method: str,
        url: str,
        body: str = "",
        headers: Optional[Mapping[str, str]] = None,
    ) -> FetchResponse:
        """
        Send a request and return its response with the body still unread.

        A non-empty ``body`` gets a Content-Type inferred from its contents
        (JSON, then XML, then plain text). ``headers`` take precedence over
        the client's default headers for this request only.

        Raises:
            FetchFailedError: The URL is malformed or unsafe, or the request failed
            FetchTimeoutError: The server did not answer within the timeout
        """
        if not self.url_validator.validate(url):
            logger.warning(f"Invalid or unsafe URL provided: {url}")
            raise FetchFailedError(url, "invalid or unsafe URL")

        request_headers = httpx.Headers()
        if body:
            request_headers["Content-Type"] = detect_content_type(body)
        if headers:
            request_headers.update(headers)

        with self._lock:
            merged_headers = self._headers.copy()
            merged_headers.update(request_headers)
            try:
                request = self._client.build_request(
                    method,
                    url,
                    content=body.encode("utf-8") if body else None,
                    headers=merged_headers,
                )
            except httpx.InvalidURL as e:
                raise FetchFailedError(url, str(e)) from e

        logger.info(f"{method} {url}")
        try:
            response = self._client.send(request, stream=True)
        except httpx.TimeoutException as e:
            logger.error(f"Request to {url} timed out after {self.timeout}s")
            raise FetchTimeoutError(url, self.timeout) from e
        except httpx.HTTPError as e:
            logger.error(f"Request error occurred while fetching URL {url}: {str(e)}")
            raise FetchFailedError(url, str(e)) from e

        if response.status_code >= 400:
            logger.warning(f"{method} {url} answered with HTTP {response.status_code}")
        return FetchResponse(response)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "FetchClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _check_hop(self, request: httpx.Request) -> None:
        # Runs for the first request and for every redirect it follows
        url = str(request.url)
        if not self.url_validator.validate(url):
            logger.warning(f"Refusing to follow request to invalid or unsafe URL: {url}")
            raise FetchFailedError(url, "invalid or unsafe URL")

    @staticmethod
    def _cookie_scope(url: str):
        parsed = urlparse(url)
        if not parsed.scheme or not parsed.hostname:
            raise FetchFailedError(url, "cannot scope a cookie to a URL without a host")
        return parsed.hostname, parsed.path or "/"
