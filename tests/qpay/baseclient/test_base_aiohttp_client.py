"""
Unit tests for BaseAioHttpClient.

Tests cover:
- Client initialization with various configurations
- _send request building and RawResponse mapping
- Proxy configuration
- Transport error mapping to QPay exceptions
- Context manager usage
"""

import asyncio

import pytest
from unittest.mock import AsyncMock, Mock, patch
import aiohttp

from qpay.baseclient import BaseAioHttpClient, RawResponse
from qpay.exceptions import (
    ConfigurationError,
    ProxyError,
    RequestTimeoutError,
    TransportError,
)


class _AioHttpAPIClient(BaseAioHttpClient):
    """Test implementation of BaseAioHttpClient (not collected by pytest)."""

    BASE_URL = "https://api.test.com"


def _mock_response(status=200, body=b"{}", headers=None):
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.headers = headers or {"Content-Type": "application/json"}
    mock_response.read = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)
    return mock_response


class TestBaseAioHttpClientInitialization:
    """Tests for BaseAioHttpClient initialization."""

    @pytest.mark.asyncio
    async def test_init_with_defaults(self):
        """Test client initialization with default values."""
        client = _AioHttpAPIClient()

        assert client.base_url == "https://api.test.com"
        assert client.proxy is None
        assert client._proxy_url is None
        assert isinstance(client.session, aiohttp.ClientSession)
        assert client.session.headers["Accept"] == "application/json"
        assert "qpay-python" in client.session.headers["User-Agent"]

        await client.close()

    @pytest.mark.asyncio
    async def test_init_with_custom_base_url(self):
        """Test client initialization with custom base URL."""
        client = _AioHttpAPIClient(base_url="https://custom.api.com/")

        assert client.base_url == "https://custom.api.com"

        await client.close()

    @pytest.mark.asyncio
    async def test_init_with_proxy(self):
        """Test client initialization with proxy."""
        client = _AioHttpAPIClient(proxy="proxy.example.com:8080")

        assert client.proxy == "proxy.example.com:8080"
        assert client._proxy_url == "http://proxy.example.com:8080"

        await client.close()

    @pytest.mark.asyncio
    async def test_init_with_proxy_http_prefix(self):
        """Test client initialization with proxy that has http prefix."""
        client = _AioHttpAPIClient(proxy="http://proxy.example.com:8080")

        assert client._proxy_url == "http://proxy.example.com:8080"

        await client.close()

    @pytest.mark.asyncio
    async def test_init_with_proxy_invalid(self):
        """Test client initialization with invalid proxy."""
        with pytest.raises(ConfigurationError):
            _AioHttpAPIClient(proxy=1)  # type: ignore

    @pytest.mark.asyncio
    async def test_init_with_custom_timeout(self):
        """Test client initialization with custom timeout."""
        client = _AioHttpAPIClient(timeout=60.0)

        assert client.session.timeout.total == 60.0

        await client.close()

    @pytest.mark.asyncio
    async def test_init_with_custom_headers(self):
        """Test client initialization with custom headers."""
        client = _AioHttpAPIClient(headers={"X-Merchant": "m1"})

        assert client.session.headers["X-Merchant"] == "m1"
        assert client.session.headers["Accept"] == "application/json"

        await client.close()


class TestBaseAioHttpClientSendMethod:
    """Tests for the _send method."""

    @pytest.mark.asyncio
    async def test_send_get_success(self):
        """Test a GET request is built and mapped to RawResponse."""
        client = _AioHttpAPIClient()
        mock_response = _mock_response(body=b'{"id": 1}')

        with patch.object(
            client.session, "request", return_value=mock_response
        ) as mock_request:
            result = await client._send("GET", "/users/1")

            assert isinstance(result, RawResponse)
            assert result.status_code == 200
            assert result.body == b'{"id": 1}'
            mock_request.assert_called_once_with(
                "GET",
                "https://api.test.com/users/1",
                headers=None,
                data=None,
            )

        await client.close()

    @pytest.mark.asyncio
    async def test_send_post_with_content(self):
        """Test the encoded body is sent as raw data."""
        client = _AioHttpAPIClient()
        mock_response = _mock_response(status=201)
        headers = {"Content-Type": "application/json"}

        with patch.object(
            client.session, "request", return_value=mock_response
        ) as mock_request:
            result = await client._send(
                "POST", "/users", headers=headers, content=b'{"name": "x"}'
            )

            assert result.status_code == 201
            mock_request.assert_called_once_with(
                "POST",
                "https://api.test.com/users",
                headers=headers,
                data=b'{"name": "x"}',
            )

        await client.close()

    @pytest.mark.asyncio
    async def test_send_returns_error_status_without_raising(self):
        """Test non-2xx responses are returned for the caller to classify."""
        client = _AioHttpAPIClient()
        mock_response = _mock_response(status=404, body=b"not here")

        with patch.object(client.session, "request", return_value=mock_response):
            result = await client._send("GET", "/missing")

            assert result.status_code == 404
            assert result.text == "not here"

        await client.close()

    @pytest.mark.asyncio
    async def test_send_with_proxy(self):
        """Test request uses proxy when configured."""
        client = _AioHttpAPIClient(proxy="proxy.example.com:8080")
        mock_response = _mock_response()

        with patch.object(
            client.session, "request", return_value=mock_response
        ) as mock_request:
            await client._send("GET", "/data")

            call_kwargs = mock_request.call_args[1]
            assert call_kwargs["proxy"] == "http://proxy.example.com:8080"

        await client.close()


class TestBaseAioHttpClientExceptions:
    """Tests for transport error mapping."""

    @pytest.mark.asyncio
    async def test_proxy_error(self):
        """Test ProxyError raised on proxy connection failure."""
        client = _AioHttpAPIClient()
        error = aiohttp.ClientProxyConnectionError(Mock(), OSError("refused"))

        with patch.object(client.session, "request", side_effect=error):
            with pytest.raises(ProxyError) as exc_info:
                await client._send("GET", "/data")

            assert "Proxy connection failed" in exc_info.value.message

        await client.close()

    @pytest.mark.asyncio
    async def test_timeout_error(self):
        """Test RequestTimeoutError raised on timeout."""
        client = _AioHttpAPIClient()

        with patch.object(
            client.session, "request", side_effect=aiohttp.ServerTimeoutError()
        ):
            with pytest.raises(RequestTimeoutError):
                await client._send("GET", "/data")

        await client.close()

    @pytest.mark.asyncio
    async def test_total_timeout_error(self):
        """Test an expired ClientTimeout surfaces as RequestTimeoutError."""
        client = _AioHttpAPIClient()

        with patch.object(
            client.session, "request", side_effect=asyncio.TimeoutError()
        ):
            with pytest.raises(RequestTimeoutError) as exc_info:
                await client._send("GET", "/data")

            assert isinstance(exc_info.value, TransportError)
            assert isinstance(exc_info.value.__cause__, asyncio.TimeoutError)

        await client.close()

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Test TransportError raised when the connection fails."""
        client = _AioHttpAPIClient()

        with patch.object(
            client.session,
            "request",
            side_effect=aiohttp.ClientConnectionError("Connection refused"),
        ):
            with pytest.raises(TransportError) as exc_info:
                await client._send("GET", "/data")

            assert "Connection refused" in exc_info.value.message
            assert not isinstance(exc_info.value, ProxyError)

        await client.close()


class TestBaseAioHttpClientContextManager:
    """Tests for async context manager functionality."""

    @pytest.mark.asyncio
    async def test_context_manager_closes_session(self):
        """Test session is closed when exiting context."""
        async with _AioHttpAPIClient() as client:
            session = client.session

        assert session.closed
