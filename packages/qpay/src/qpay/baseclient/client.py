"""
Base HTTP client for building API clients.

This module provides an abstract base class for creating async HTTP clients
using httpx. It includes support for proxies, custom headers and timeouts, and
hands every response back untouched so subclasses decide what a status code
means.
"""

from abc import ABC
from typing import Any
import logging

import httpx

from qpay.exceptions import (
    ConfigurationError,
    ProxyError,
    RequestTimeoutError,
    TransportError,
)
from .response import RawResponse


logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "qpay-python/0.1.0"


def normalize_proxy(proxy: str) -> str:
    """Return ``proxy`` as a URL, prefixing ``http://`` to bare "host:port"."""
    return proxy if proxy.startswith("http") else f"http://{proxy}"


class BaseClient(ABC):
    """
    Abstract base class for building HTTP API clients.

    This class provides a foundation for creating async HTTP clients with
    built-in support for:
    - Proxy configuration
    - Custom headers
    - Transport error mapping
    - Proper resource cleanup

    Attributes:
        BASE_URL (str): Default base URL for API requests. Should be overridden
                       by subclasses or via constructor.
        client (httpx.AsyncClient): The underlying httpx async client.

    Example:
        >>> class MyAPIClient(BaseClient):
        ...     BASE_URL = "https://api.example.com"
        ...
        ...     async def get_user(self, user_id: int):
        ...         return await self._send("GET", f"/users/{user_id}")
        ...
        >>> async with MyAPIClient(proxy="proxy.example.com:8080") as client:
        ...     response = await client.get_user(123)
    """

    BASE_URL: str = "https://api.example.com"

    def __init__(
        self,
        base_url: str | None = None,
        proxy: str | None = None,
        timeout: float = 30.0,
        **kwargs: Any,
    ):
        """
        Initialize the base client.

        Args:
            base_url: Custom base URL to override the class BASE_URL attribute.
            proxy: Proxy URL in format "host:port" or "http://host:port".
            timeout: Request timeout in seconds. Defaults to 30.0.
            **kwargs: Additional arguments passed to httpx.AsyncClient.
                     Common options include:
                     - headers: Custom headers dict
                     - verify: SSL verification (bool or path to cert)
                     - transport: Custom transport (e.g. httpx.MockTransport)

        Raises:
            ConfigurationError: If proxy format is invalid.
        """
        self.proxy = proxy
        self.base_url = (base_url or self.BASE_URL).rstrip("/")

        if self.proxy is not None:
            try:
                proxy_url = normalize_proxy(self.proxy)
                kwargs["proxy"] = proxy_url
                logger.debug(f"Proxy configured: {proxy_url}")
            except Exception as e:
                raise ConfigurationError(f"Invalid proxy configuration: {e}") from e

        if "timeout" not in kwargs:
            kwargs["timeout"] = timeout

        self.client = httpx.AsyncClient(**kwargs)

        default_headers = {
            "Accept": "application/json",
            "User-Agent": DEFAULT_USER_AGENT,
        }
        for name, value in default_headers.items():
            self.client.headers.setdefault(name, value)

        logger.info(f"Client initialized with base URL: {self.base_url}")

    async def _send(
        self,
        method: str,
        endpoint: str = "",
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> RawResponse:
        """
        Perform an HTTP request and return the raw response.

        Non-2xx responses are returned, not raised: only failures where no
        response arrived become exceptions.

        Args:
            method: HTTP method (GET, POST, DELETE, ...).
            endpoint: API endpoint path (appended to the base URL).
            headers: Additional headers for this specific request.
            content: Already-encoded request body, or None for no body.

        Returns:
            RawResponse with status, headers and body bytes.

        Raises:
            ProxyError: If there's a proxy-related connection issue.
            RequestTimeoutError: If the request timed out.
            TransportError: For any other failure to obtain a response.
        """
        url = f"{self.base_url}{endpoint}"

        try:
            logger.debug(f"{method} {url}")
            response = await self.client.request(
                method,
                url,
                headers=headers,
                content=content,
            )
            logger.debug(f"Response status: {response.status_code}")
            return RawResponse(
                status_code=response.status_code,
                headers=dict(response.headers),
                body=response.content,
            )

        except httpx.ProxyError as e:
            logger.error(f"Proxy error: {e}")
            raise ProxyError(f"Proxy connection failed: {e}") from e
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {e}")
            raise RequestTimeoutError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"Connection error: {e}")
            raise TransportError(f"Request failed: {e}") from e

    async def close(self) -> None:
        """
        Close the HTTP client and release resources.

        Example:
            >>> client = MyAPIClient()
            >>> try:
            ...     await client.get_data()
            ... finally:
            ...     await client.close()
        """
        await self.client.aclose()
        logger.info("Client closed")

    async def __aenter__(self):
        """Enable use as async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Ensure client is closed when exiting context."""
        await self.close()
