"""Concrete QPay clients for httpx and aiohttp."""

import time
from typing import Any, Callable

from qpay.api import QPayAPI
from qpay.baseclient import BaseAioHttpClient, Client
from qpay.config import QPayConfig
from qpay.urls import QPayBaseUrls


class QPayClient(QPayAPI, Client):
    """
    QPay V2 API client with automatic token management, backed by httpx.

    Safe to share between concurrent tasks: token refresh is serialized, so
    only one authentication round trip happens when the token expires.

    Attributes:
        BASE_URL: Production QPay merchant API.
        config: The QPayConfig the client was built with.
        token_manager: Owner of the access/refresh token state.

    Example:
        >>> config = QPayConfig.from_env()
        >>> async with QPayClient(config) as client:
        ...     invoice = await client.create_simple_invoice(
        ...         CreateSimpleInvoiceRequest(
        ...             invoice_code=config.invoice_code,
        ...             sender_invoice_no="INV-001",
        ...             invoice_receiver_code="terminal",
        ...             invoice_description="Test payment",
        ...             amount=100,
        ...             callback_url=config.callback_url,
        ...         )
        ...     )
        ...     print(invoice.qpay_short_url)
    """

    BASE_URL = QPayBaseUrls.PRODUCTION

    def __init__(
        self,
        config: QPayConfig,
        timeout: float = 30.0,
        clock: Callable[[], float] = time.time,
        **kwargs: Any,
    ):
        """
        Initialize the QPay client.

        Args:
            config: Credentials, base URL and merchant defaults.
            timeout: Request timeout in seconds. Defaults to 30.0.
            clock: Source of the current Unix time for token expiry checks.
            **kwargs: Passed to the base client (proxy, headers, transport, ...).
        """
        super().__init__(base_url=config.base_url, timeout=timeout, **kwargs)
        self._setup_auth(config, clock)


class QPayAioHttpClient(QPayAPI, BaseAioHttpClient):
    """
    QPay V2 API client backed by aiohttp.

    Same operations as ``QPayClient``. Must be created inside a running
    event loop.

    Example:
        >>> async with QPayAioHttpClient(QPayConfig.from_env()) as client:
        ...     payment = await client.get_payment("pay_001")
    """

    BASE_URL = QPayBaseUrls.PRODUCTION

    def __init__(
        self,
        config: QPayConfig,
        timeout: float = 30.0,
        clock: Callable[[], float] = time.time,
        **kwargs: Any,
    ):
        super().__init__(base_url=config.base_url, timeout=timeout, **kwargs)
        self._setup_auth(config, clock)
