from dataclasses import dataclass, field
from http import HTTPStatus


@dataclass(frozen=True)
class RawResponse:
    """
    Transport-neutral view of an HTTP response.

    Both the httpx and the aiohttp base clients return this from ``_send`` so
    that response classification does not depend on the HTTP library in use.

    Attributes:
        status_code: HTTP status code.
        headers: Response headers (last value wins for repeated names).
        body: Raw response body bytes.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.body.decode("utf-8", errors="replace")

    @property
    def reason_phrase(self) -> str:
        try:
            return HTTPStatus(self.status_code).phrase
        except ValueError:
            return ""
