from dataclasses import dataclass

from qpay.models.token import TokenResponse

# Tokens are treated as expired this many seconds before the server says so
TOKEN_BUFFER_SECONDS = 30


@dataclass(frozen=True)
class TokenState:
    """
    # Token State Container

    Immutable snapshot of the credentials currently held by a client.

    ## Attributes:
    - `access_token` (str): Bearer token for business API calls
    - `refresh_token` (str): Token used only to mint a new access token
    - `access_expiry` (float): Unix timestamp when the access token expires
    - `refresh_expiry` (float): Unix timestamp when the refresh token expires

    ## Design Decisions:
    - Frozen dataclass: a new state replaces the old one in a single assignment,
      so an access token is never paired with a stale refresh token
    - `TokenState.empty()` is the "never authenticated" sentinel
    - Both expiry checks subtract `TOKEN_BUFFER_SECONDS` so a token that is
      about to lapse is not sent on a request that may outlive it

    ## Example:
    ```python
    state = TokenState.from_response(token_response)
    if state.access_valid(time.time()):
        headers = {"Authorization": f"Bearer {state.access_token}"}
    ```
    """

    access_token: str = ""
    refresh_token: str = ""
    access_expiry: float = 0
    refresh_expiry: float = 0

    @classmethod
    def empty(cls) -> "TokenState":
        return cls()

    @classmethod
    def from_response(cls, token: TokenResponse) -> "TokenState":
        """Build a state from a token endpoint response."""
        return cls(
            access_token=token.access_token,
            refresh_token=token.refresh_token,
            access_expiry=token.expires_in,
            refresh_expiry=token.refresh_expires_in,
        )

    def access_valid(self, now: float) -> bool:
        """True if the access token can be used for at least the buffer period."""
        return bool(self.access_token) and now < self.access_expiry - TOKEN_BUFFER_SECONDS

    def refresh_valid(self, now: float) -> bool:
        """True if the refresh token can still mint a new access token."""
        return (
            bool(self.refresh_token)
            and now < self.refresh_expiry - TOKEN_BUFFER_SECONDS
        )
