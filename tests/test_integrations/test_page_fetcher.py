"""Tests for the HTTP page fetcher."""

import gzip
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from github_trending.errors import DecodeError, HttpError, NetworkError
from github_trending.integrations.page_fetcher import PageFetcher, decode_body

URL = "https://github.com/trending"


@pytest.mark.asyncio
async def test_fetch_requests_compression_by_default(recorded_transport):
    transport, requests = recorded_transport(
        lambda request: httpx.Response(200, text="<html>ok</html>")
    )

    text = await PageFetcher(transport=transport, user_agent="trend-bot").fetch(URL)

    assert text == "<html>ok</html>"
    assert requests[0].headers["Accept-Encoding"] == "gzip, deflate"
    assert requests[0].headers["User-Agent"] == "trend-bot"


@pytest.mark.asyncio
async def test_fetch_without_compression_asks_for_identity(recorded_transport):
    transport, requests = recorded_transport(
        lambda request: httpx.Response(200, text="plain")
    )

    text = await PageFetcher(use_compression=False, transport=transport).fetch(URL)

    assert text == "plain"
    assert requests[0].headers["Accept-Encoding"] == "identity"


@pytest.mark.asyncio
async def test_fetch_decodes_gzip_transfer():
    body = "<html>trending ★</html>"
    transport = httpx.MockTransport(
        lambda request: httpx.Response(
            200,
            headers={"Content-Encoding": "gzip", "Content-Type": "text/html; charset=utf-8"},
            content=gzip.compress(body.encode("utf-8")),
        )
    )

    assert await PageFetcher(transport=transport).fetch(URL) == body


@pytest.mark.asyncio
async def test_fetch_uses_declared_charset():
    transport = httpx.MockTransport(
        lambda request: httpx.Response(
            200,
            headers={"Content-Type": "text/html; charset=iso-8859-1"},
            content="café".encode("iso-8859-1"),
        )
    )

    assert await PageFetcher(transport=transport).fetch(URL) == "café"


@pytest.mark.asyncio
async def test_fetch_passes_query_params(recorded_transport):
    transport, requests = recorded_transport(lambda request: httpx.Response(200, text=""))

    await PageFetcher(transport=transport).fetch(URL, params={"l": "c++"})

    assert requests[0].url.params["l"] == "c++"


@pytest.mark.asyncio
async def test_non_success_status_raises_http_error():
    transport = httpx.MockTransport(lambda request: httpx.Response(503))

    with pytest.raises(HttpError) as exc_info:
        await PageFetcher(transport=transport).fetch(URL)

    assert exc_info.value.status_code == 503
    assert "Invalid status: 503" in str(exc_info.value)
    assert URL in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_failure_raises_network_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    transport = httpx.MockTransport(refuse)

    with pytest.raises(NetworkError) as exc_info:
        await PageFetcher(transport=transport).fetch(URL)

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.url == URL


@pytest.mark.asyncio
async def test_malformed_url_raises_network_error(recorded_transport):
    transport, requests = recorded_transport(lambda request: httpx.Response(200))
    url = "https://github.com/a/b\x00/blob/main/README.md"

    with pytest.raises(NetworkError) as exc_info:
        await PageFetcher(transport=transport).request("HEAD", url)

    assert isinstance(exc_info.value.__cause__, httpx.InvalidURL)
    assert requests == []


@pytest.mark.asyncio
async def test_other_httpx_errors_raise_network_error():
    def fail(request: httpx.Request) -> httpx.Response:
        raise httpx.HTTPError("stream closed unexpectedly")

    transport = httpx.MockTransport(fail)

    with pytest.raises(NetworkError, match="stream closed unexpectedly"):
        await PageFetcher(transport=transport).fetch(URL)


@pytest.mark.asyncio
async def test_corrupt_compressed_body_raises_decode_error():
    transport = httpx.MockTransport(
        lambda request: httpx.Response(
            200, headers={"Content-Encoding": "gzip"}, content=b"definitely not gzip"
        )
    )

    with pytest.raises(DecodeError):
        await PageFetcher(transport=transport).fetch(URL)


@pytest.mark.asyncio
async def test_head_request_returns_response(recorded_transport):
    transport, requests = recorded_transport(lambda request: httpx.Response(200))

    response = await PageFetcher(transport=transport).request("HEAD", URL)

    assert response.status_code == 200
    assert requests[0].method == "HEAD"


@pytest.mark.asyncio
async def test_proxy_and_timeout_reach_the_client():
    with patch("httpx.AsyncClient") as mock_client:
        mock_instance = mock_client.return_value.__aenter__.return_value
        mock_instance.request = AsyncMock(
            return_value=httpx.Response(200, text="ok", request=httpx.Request("GET", URL))
        )

        fetcher = PageFetcher(proxy="http://proxy.local:3128", timeout=7.5)
        text = await fetcher.fetch(URL)

    assert text == "ok"
    kwargs = mock_client.call_args.kwargs
    assert kwargs["proxy"] == "http://proxy.local:3128"
    assert kwargs["timeout"] == 7.5
    assert kwargs["follow_redirects"] is True


class TestDecodeBody:
    """Test raw body decoding."""

    def test_plain_utf8(self):
        assert decode_body("日本語".encode("utf-8"), None) == "日本語"

    def test_undeclared_gzip_payload(self):
        assert decode_body(gzip.compress(b"<html></html>"), "utf-8") == "<html></html>"

    def test_unknown_charset_falls_back_to_utf8(self):
        assert decode_body(b"abc", "x-no-such-charset") == "abc"

    def test_truncated_gzip_raises_decode_error(self):
        with pytest.raises(DecodeError):
            decode_body(gzip.compress(b"<html></html>")[:12], None)
