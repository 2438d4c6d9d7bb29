"""
Base HTTP client for building API clients using aiohttp.

Same contract as ``qpay.baseclient.client.BaseClient`` (``_send`` returns a
``RawResponse`` and only raises when no response arrived) for applications
that already run on aiohttp.
"""

from abc import ABC
import asyncio
from typing import Any
import logging

import aiohttp
from aiohttp import ClientTimeout

from qpay.exceptions import (
    ConfigurationError,
    ProxyError,
    RequestTimeoutError,
    TransportError,
)
from .client import DEFAULT_USER_AGENT, normalize_proxy
from .response import RawResponse


logger = logging.getLogger(__name__)


class BaseAioHttpClient(ABC):
    """
    Abstract base class for building HTTP API clients using aiohttp.

    The session is created in ``__init__``, so instances must be constructed
    while an event loop is running.

    Attributes:
        BASE_URL (str): Default base URL for API requests.
        session (aiohttp.ClientSession): The underlying aiohttp client session.
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
        Initialize the base aiohttp client.

        Args:
            base_url: Custom base URL to override the class BASE_URL attribute.
            proxy: Proxy URL in format "host:port" or "http://host:port".
            timeout: Request timeout in seconds. Defaults to 30.0.
            **kwargs: Additional arguments passed to aiohttp.ClientSession
                     (headers, connector, trust_env, ...).

        Raises:
            ConfigurationError: If proxy configuration is invalid.
        """
        self.proxy = proxy
        self.base_url = (base_url or self.BASE_URL).rstrip("/")

        proxy_url = None
        if self.proxy is not None:
            try:
                proxy_url = normalize_proxy(self.proxy)
                logger.debug(f"Proxy configured: {proxy_url}")
            except Exception as e:
                raise ConfigurationError(f"Invalid proxy configuration: {e}") from e

        default_headers = {
            "Accept": "application/json",
            "User-Agent": DEFAULT_USER_AGENT,
        }
        user_headers = kwargs.pop("headers", {})
        headers = {**default_headers, **user_headers}

        self.session = aiohttp.ClientSession(
            headers=headers,
            timeout=ClientTimeout(total=timeout),
            **kwargs,
        )
        self._proxy_url = proxy_url

        logger.info(f"AioHttp client initialized with base URL: {self.base_url}")

    async def _send(
        self,
        method: str,
        endpoint: str = "",
        headers: dict[str, str] | None = None,
        content: bytes | None = None,
    ) -> RawResponse:
        """
        Perform an HTTP request and return the raw response.

        Raises:
            ProxyError: If there's a proxy-related connection issue.
            RequestTimeoutError: If the request timed out.
            TransportError: For any other failure to obtain a response.
        """
        url = f"{self.base_url}{endpoint}"

        kwargs: dict[str, Any] = {}
        if self._proxy_url:
            kwargs["proxy"] = self._proxy_url

        try:
            logger.debug(f"{method} {url}")
            async with self.session.request(
                method,
                url,
                headers=headers,
                data=content,
                **kwargs,
            ) as response:
                body = await response.read()
                logger.debug(f"Response status: {response.status}")
                return RawResponse(
                    status_code=response.status,
                    headers=dict(response.headers),
                    body=body,
                )

        except aiohttp.ClientProxyConnectionError as e:
            logger.error(f"Proxy error: {e}")
            raise ProxyError(f"Proxy connection failed: {e}") from e
        except (aiohttp.ServerTimeoutError, asyncio.TimeoutError, TimeoutError) as e:
            logger.error(f"Request timeout: {e}")
            raise RequestTimeoutError(f"Request timed out: {e}") from e
        except aiohttp.ClientError as e:
            logger.error(f"Connection error: {e}")
            raise TransportError(f"Request failed: {e}") from e

    async def close(self) -> None:
        """Close the aiohttp session and release resources."""
        await self.session.close()
        logger.info("AioHttp client closed")

    async def __aenter__(self):
        """Enable use as async context manager."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Ensure client is closed when exiting context."""
        await self.close()
