"""
Unit tests for BaseClient (httpx).

Tests cover:
- Client initialization with various configurations
- _send request building and RawResponse mapping
- Transport error mapping to QPay exceptions
- Context manager usage
"""

import pytest
from unittest.mock import AsyncMock, Mock, patch
import httpx

from qpay.baseclient import Client as BaseClient, RawResponse
from qpay.exceptions import (
    ConfigurationError,
    ProxyError,
    RequestTimeoutError,
    TransportError,
)


class _APIClient(BaseClient):
    """Test implementation of BaseClient (not collected by pytest)."""

    BASE_URL = "https://api.test.com"


def _mock_response(status_code=200, content=b"{}", headers=None):
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.headers = headers or {"content-type": "application/json"}
    return response


class TestBaseClientInitialization:
    """Tests for BaseClient initialization."""

    def test_init_with_defaults(self):
        """Test client initialization with default values."""
        client = _APIClient()

        assert client.base_url == "https://api.test.com"
        assert client.proxy is None
        assert isinstance(client.client, httpx.AsyncClient)
        assert client.client.headers["Accept"] == "application/json"
        assert "qpay-python" in client.client.headers["User-Agent"]

    def test_init_with_custom_base_url(self):
        """Test client initialization with custom base URL."""
        client = _APIClient(base_url="https://custom.api.com")

        assert client.base_url == "https://custom.api.com"

    def test_init_strips_trailing_slash(self):
        """Test trailing slash on the base URL is removed."""
        client = _APIClient(base_url="https://custom.api.com/")

        assert client.base_url == "https://custom.api.com"

    def test_init_with_proxy(self):
        """Test client initialization with proxy."""
        client = _APIClient(proxy="proxy.example.com:8080")

        assert client.proxy == "proxy.example.com:8080"

    def test_init_with_proxy_invalid(self):
        """Test client initialization with invalid proxy."""
        with pytest.raises(ConfigurationError):
            _APIClient(proxy=1)  # type: ignore

    def test_init_with_custom_timeout(self):
        """Test client initialization with custom timeout."""
        client = _APIClient(timeout=60.0)

        assert client.client.timeout.read == 60.0

    def test_init_with_custom_headers(self):
        """Test user headers are kept alongside the defaults."""
        client = _APIClient(headers={"X-Merchant": "m1", "Accept": "text/plain"})

        assert client.client.headers["X-Merchant"] == "m1"
        assert client.client.headers["Accept"] == "text/plain"


class TestBaseClientSendMethod:
    """Tests for the _send method."""

    @pytest.mark.asyncio
    async def test_send_get_success(self):
        """Test a GET request is built and mapped to RawResponse."""
        client = _APIClient()

        with patch.object(
            client.client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = _mock_response(content=b'{"id": 1}')

            result = await client._send("GET", "/users/1")

            assert isinstance(result, RawResponse)
            assert result.status_code == 200
            assert result.body == b'{"id": 1}'
            assert result.headers["content-type"] == "application/json"
            mock_request.assert_called_once_with(
                "GET",
                "https://api.test.com/users/1",
                headers=None,
                content=None,
            )

        await client.close()

    @pytest.mark.asyncio
    async def test_send_post_with_content_and_headers(self):
        """Test request body and per-request headers are passed through."""
        client = _APIClient()
        headers = {"Content-Type": "application/json"}

        with patch.object(
            client.client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = _mock_response(status_code=201)

            result = await client._send(
                "POST", "/users", headers=headers, content=b'{"name": "x"}'
            )

            assert result.status_code == 201
            mock_request.assert_called_once_with(
                "POST",
                "https://api.test.com/users",
                headers=headers,
                content=b'{"name": "x"}',
            )

        await client.close()

    @pytest.mark.asyncio
    async def test_send_returns_error_status_without_raising(self):
        """Test non-2xx responses are returned for the caller to classify."""
        client = _APIClient()

        with patch.object(
            client.client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.return_value = _mock_response(
                status_code=500, content=b"Internal Server Error"
            )

            result = await client._send("GET", "/users")

            assert result.status_code == 500
            assert not result.is_success
            assert result.text == "Internal Server Error"
            assert result.reason_phrase == "Internal Server Error"

        await client.close()

    @pytest.mark.asyncio
    async def test_send_with_mock_transport(self):
        """Test a full round trip through httpx.MockTransport."""

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/echo"
            assert request.headers["User-Agent"].startswith("qpay-python")
            return httpx.Response(202, content=request.content)

        client = _APIClient(transport=httpx.MockTransport(handler))

        result = await client._send("POST", "/echo", content=b"ping")

        assert result.status_code == 202
        assert result.body == b"ping"

        await client.close()


class TestBaseClientExceptions:
    """Tests for transport error mapping."""

    @pytest.mark.asyncio
    async def test_proxy_error(self):
        """Test ProxyError raised on proxy connection failure."""
        client = _APIClient()

        with patch.object(
            client.client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.side_effect = httpx.ProxyError("Proxy connection failed")

            with pytest.raises(ProxyError) as exc_info:
                await client._send("GET", "/users")

            assert "Proxy connection failed" in exc_info.value.message
            assert isinstance(exc_info.value, TransportError)

        await client.close()

    @pytest.mark.asyncio
    async def test_timeout_error(self):
        """Test RequestTimeoutError raised on timeout."""
        client = _APIClient()

        with patch.object(
            client.client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.side_effect = httpx.ReadTimeout("Request timed out")

            with pytest.raises(RequestTimeoutError) as exc_info:
                await client._send("GET", "/users")

            assert "timed out" in exc_info.value.message.lower()

        await client.close()

    @pytest.mark.asyncio
    async def test_connection_error(self):
        """Test TransportError raised when the connection fails."""
        client = _APIClient()

        with patch.object(
            client.client, "request", new_callable=AsyncMock
        ) as mock_request:
            mock_request.side_effect = httpx.ConnectError("Connection refused")

            with pytest.raises(TransportError) as exc_info:
                await client._send("GET", "/users")

            assert "Connection refused" in exc_info.value.message
            assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

        await client.close()


class TestBaseClientContextManager:
    """Tests for async context manager functionality."""

    @pytest.mark.asyncio
    async def test_context_manager_closes_client(self):
        """Test client is closed when exiting context."""
        client = _APIClient()

        with patch.object(client, "close", new_callable=AsyncMock) as mock_close:
            async with client as ctx_client:
                assert ctx_client is client

            mock_close.assert_called_once()

    @pytest.mark.asyncio
    async def test_close(self):
        """Test close() closes the underlying httpx client."""
        client = _APIClient()

        await client.close()

        assert client.client.is_closed
