"""
# Token Lifecycle Manager for the QPay API

Decides, before every API call, whether the cached access token can be reused,
should be refreshed, or must be replaced by a full credential exchange.

## Key Features:
- **Zero-I/O fast path**: a valid cached access token is returned immediately
- **Refresh before re-authenticate**: refresh tokens outlive access tokens, so a
  refresh is tried first and full authentication is the fallback
- **Serialized updates**: an `asyncio.Lock` guards the read-decide-write sequence,
  so concurrent callers trigger a single auth round trip

## Usage:
```python
manager = TokenManager(credentials, send=client._send)
access_token = await manager.ensure_valid()
```
"""

import asyncio
import base64
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable

from qpay.baseclient.response import RawResponse
from qpay.codec import decode_body
from qpay.exceptions import QPayError
from qpay.models.token import TokenResponse
from qpay.urls import QPayApiUrls

from .token_state import TokenState

# send(method, endpoint, headers) -> RawResponse
SendFunc = Callable[[str, str, dict[str, str]], Awaitable[RawResponse]]


@dataclass(frozen=True)
class Credentials:
    """Merchant username and password used for Basic authentication."""

    username: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(username={self.username!r}, password='***')"

    def basic_auth_header(self) -> str:
        raw = f"{self.username}:{self.password}".encode("utf-8")
        return f"Basic {base64.b64encode(raw).decode('ascii')}"


class TokenManager:
    """
    # Token Manager

    Owns the `TokenState` of one client and keeps it fresh.

    ## Token Management Strategy:
    1. Access token valid (with 30 s buffer)? → return it, no network call
    2. Refresh token valid? → refresh; on any failure fall through
    3. Authenticate with credentials → store and return; failures propagate

    ## Design Decisions:
    - The transport is injected as a `send` coroutine so the manager works
      with any base client
    - `clock` is injectable to make expiry decisions testable
    - State is replaced, never mutated: `self._state` is only ever assigned a
      complete `TokenState`
    """

    def __init__(
        self,
        credentials: Credentials,
        send: SendFunc,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.credentials = credentials
        self._send = send
        self._clock = clock
        self._state = TokenState.empty()
        self._lock = asyncio.Lock()
        self.logger = logging.getLogger(__name__)

    @property
    def state(self) -> TokenState:
        """Current token snapshot."""
        return self._state

    async def ensure_valid(self) -> str:
        """
        Return an access token valid for at least the safety buffer.

        ## Returns:
        - `str`: The access token to send as `Authorization: Bearer ...`

        ## Raises:
        - `QPayError`: Only when the final authentication attempt fails.
          Refresh failures are never raised.
        """
        async with self._lock:
            now = self._clock()
            state = self._state

            if state.access_valid(now):
                return state.access_token

            if state.refresh_valid(now):
                try:
                    await self._refresh(state.refresh_token)
                    return self._state.access_token
                except QPayError as e:
                    self.logger.debug(
                        f"Token refresh failed, falling back to authentication: {e}"
                    )

            await self._authenticate()
            return self._state.access_token

    async def authenticate(self) -> TokenResponse:
        """Exchange the credentials for a new token pair and store it."""
        async with self._lock:
            return await self._authenticate()

    async def refresh(self, refresh_token: str | None = None) -> TokenResponse:
        """
        Exchange a refresh token for a new token pair and store it.

        ## Args:
        - `refresh_token` (str, optional): Defaults to the one currently held.
        """
        async with self._lock:
            token = refresh_token if refresh_token is not None else self._state.refresh_token
            return await self._refresh(token)

    async def _authenticate(self) -> TokenResponse:
        self.logger.info("Requesting new access token")
        response = await self._send(
            "POST",
            QPayApiUrls.AUTH_TOKEN,
            {"Authorization": self.credentials.basic_auth_header()},
        )
        token = decode_body(response, TokenResponse)
        self._store(token)
        return token

    async def _refresh(self, refresh_token: str) -> TokenResponse:
        self.logger.info("Refreshing access token")
        response = await self._send(
            "POST",
            QPayApiUrls.AUTH_REFRESH,
            {"Authorization": f"Bearer {refresh_token}"},
        )
        token = decode_body(response, TokenResponse)
        self._store(token)
        return token

    def _store(self, token: TokenResponse) -> None:
        self._state = TokenState.from_response(token)
        self.logger.debug("Token state updated")
