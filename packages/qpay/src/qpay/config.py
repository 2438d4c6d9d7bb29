import logging
import os
from dataclasses import dataclass

from qpay.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_BASE_URL = "QPAY_BASE_URL"
ENV_USERNAME = "QPAY_USERNAME"
ENV_PASSWORD = "QPAY_PASSWORD"
ENV_INVOICE_CODE = "QPAY_INVOICE_CODE"
ENV_CALLBACK_URL = "QPAY_CALLBACK_URL"


@dataclass(frozen=True)
class QPayConfig:
    """
    Settings for a QPay client.

    Attributes:
        base_url: QPay API base URL (e.g. "https://merchant.qpay.mn").
        username: Merchant username.
        password: Merchant password.
        invoice_code: Default invoice code for new invoices.
        callback_url: URL QPay calls when a payment is made.
    """

    base_url: str
    username: str
    password: str
    invoice_code: str
    callback_url: str

    def __repr__(self) -> str:
        return (
            f"QPayConfig(base_url={self.base_url!r}, username={self.username!r}, "
            f"password='***', invoice_code={self.invoice_code!r}, "
            f"callback_url={self.callback_url!r})"
        )

    @classmethod
    def from_env(cls) -> "QPayConfig":
        """
        Load configuration from environment variables.

        Required variables: QPAY_BASE_URL, QPAY_USERNAME, QPAY_PASSWORD,
        QPAY_INVOICE_CODE, QPAY_CALLBACK_URL.

        Raises:
            ConfigurationError: naming the first variable that is unset or empty.
        """
        keys = [
            ENV_BASE_URL,
            ENV_USERNAME,
            ENV_PASSWORD,
            ENV_INVOICE_CODE,
            ENV_CALLBACK_URL,
        ]

        values: dict[str, str] = {}
        for key in keys:
            value = os.getenv(key)
            if not value:
                raise ConfigurationError.missing(key)
            values[key] = value

        logger.debug("Loaded QPay configuration from environment")
        return cls(
            base_url=values[ENV_BASE_URL],
            username=values[ENV_USERNAME],
            password=values[ENV_PASSWORD],
            invoice_code=values[ENV_INVOICE_CODE],
            callback_url=values[ENV_CALLBACK_URL],
        )
