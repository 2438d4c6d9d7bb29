"""
Base HTTP clients used by the QPay SDK.

Both classes expose the same ``_send`` capability over a different HTTP
library: httpx for ``Client`` and aiohttp for ``BaseAioHttpClient``.
"""

from .client import BaseClient as Client
from .aiohttp_client import BaseAioHttpClient
from .response import RawResponse

__all__ = [
    "Client",
    "BaseAioHttpClient",
    "RawResponse",
]
