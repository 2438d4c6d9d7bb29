from pydantic import Field

from .base import APIBaseModel


class TokenResponse(APIBaseModel):
    """
    Response of ``/v2/auth/token`` and ``/v2/auth/refresh``.

    ``expires_in`` and ``refresh_expires_in`` are absolute Unix timestamps
    (seconds), not durations.
    """

    token_type: str
    refresh_expires_in: int
    refresh_token: str
    access_token: str
    expires_in: int
    scope: str
    not_before_policy: str | int | None = Field(default=None, alias="not-before-policy")
    session_state: str
