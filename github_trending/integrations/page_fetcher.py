"""HTTP page fetcher.

Issues single-shot requests through httpx and maps failures onto the
package error taxonomy. No retries: the first failure propagates.
"""

import gzip
import logging
import zlib
from typing import Any, Optional

import httpx

from github_trending.errors import DecodeError, HttpError, NetworkError

logger = logging.getLogger(__name__)

COMPRESSED_ENCODINGS = "gzip, deflate"
GZIP_MAGIC = b"\x1f\x8b"


def decode_body(content: bytes, charset: Optional[str]) -> str:
    """Decode raw body bytes to text.

    A payload still carrying the gzip magic number (server compressed it
    without declaring Content-Encoding) is decompressed first.

    Args:
        content: Raw response bytes
        charset: Declared character encoding, UTF-8 when None or unknown

    Returns:
        Decoded text

    Raises:
        DecodeError: If the gzip payload is corrupt
    """
    if content.startswith(GZIP_MAGIC):
        try:
            content = gzip.decompress(content)
        except (OSError, EOFError, zlib.error) as e:
            raise DecodeError(f"Corrupt gzip body: {e}") from e

    try:
        return content.decode(charset or "utf-8", errors="replace")
    except LookupError:
        return content.decode("utf-8", errors="replace")


class PageFetcher:
    """Fetches pages over HTTP with optional proxy and compression.

    Args:
        proxy: Upstream proxy URL
        use_compression: Request gzip/deflate transfer for page bodies
        timeout: Per-request timeout in seconds
        user_agent: User-Agent sent with every request
        transport: Custom httpx transport (tests use httpx.MockTransport)
    """

    def __init__(
        self,
        proxy: Optional[str] = None,
        use_compression: bool = True,
        timeout: float = 30.0,
        user_agent: str = "github-trending-python",
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.proxy = proxy
        self.use_compression = use_compression
        self.timeout = timeout
        self.user_agent = user_agent
        self.transport = transport

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        params: Optional[dict[str, Any]] = None,
    ) -> httpx.Response:
        """Send one request and return the successful response.

        Args:
            method: HTTP method (GET, HEAD, ...)
            url: Absolute URL
            headers: Extra headers; User-Agent is always set
            params: Query parameters

        Returns:
            Response with a 2xx status

        Raises:
            NetworkError: If the URL is malformed or no response was received
            HttpError: If the status is not 2xx
            DecodeError: If the transfer encoding could not be undone
        """
        request_headers = {"User-Agent": self.user_agent}
        if headers:
            request_headers.update(headers)

        logger.debug(f"{method} {url} params={params}")

        try:
            async with httpx.AsyncClient(
                proxy=self.proxy,
                timeout=self.timeout,
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                response = await client.request(
                    method,
                    url,
                    headers=request_headers,
                    params=params,
                )
        except httpx.DecodingError as e:
            raise DecodeError(f"Could not decode response body: {e}", url=url) from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise NetworkError(f"{type(e).__name__}: {e}", url=url) from e
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {type(e).__name__}: {e}", url=url) from e

        if not response.is_success:
            raise HttpError(
                f"Invalid status: {response.status_code}",
                status_code=response.status_code,
                url=str(response.url),
            )

        return response

    async def fetch(self, url: str, params: Optional[dict[str, Any]] = None) -> str:
        """GET a page and return its body as text.

        Raises:
            NetworkError, HttpError, DecodeError: See request()
        """
        accept_encoding = COMPRESSED_ENCODINGS if self.use_compression else "identity"
        response = await self.request(
            "GET",
            url,
            headers={"Accept-Encoding": accept_encoding},
            params=params,
        )

        if self.use_compression:
            return decode_body(response.content, response.charset_encoding)
        return response.text
