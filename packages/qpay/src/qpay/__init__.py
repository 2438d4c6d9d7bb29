"""
qpay - Async client for the QPay V2 payment gateway API.

Create invoices, check and list payments, cancel or refund card payments and
issue electronic tax receipts, with access tokens obtained and refreshed
automatically.
"""

from qpay.auth import TokenManager, TokenState
from qpay.client import QPayAioHttpClient, QPayClient
from qpay.config import QPayConfig
from qpay.logging import setup_logging
from qpay.exceptions import (
    APIError,
    ConfigurationError,
    DecodingError,
    EncodingError,
    ProxyError,
    QPayError,
    RequestTimeoutError,
    TransportError,
)
from qpay.models import (
    Account,
    Address,
    CardTransaction,
    CreateEbarimtInvoiceRequest,
    CreateEbarimtRequest,
    CreateInvoiceRequest,
    CreateSimpleInvoiceRequest,
    Deeplink,
    EbarimtHistory,
    EbarimtInvoiceLine,
    EbarimtItem,
    EbarimtResponse,
    InvoiceLine,
    InvoiceReceiverData,
    InvoiceResponse,
    Offset,
    P2PTransaction,
    PaymentCancelRequest,
    PaymentCheckRequest,
    PaymentCheckResponse,
    PaymentCheckRow,
    PaymentDetail,
    PaymentListItem,
    PaymentListRequest,
    PaymentListResponse,
    PaymentRefundRequest,
    SenderBranchData,
    SenderStaffData,
    TaxEntry,
    TokenResponse,
    Transaction,
)

__version__ = "0.1.0"

__all__ = [
    # Clients
    "QPayClient",
    "QPayAioHttpClient",
    "QPayConfig",
    "TokenManager",
    "TokenState",
    "setup_logging",
    # Exceptions
    "QPayError",
    "ConfigurationError",
    "TransportError",
    "ProxyError",
    "RequestTimeoutError",
    "APIError",
    "EncodingError",
    "DecodingError",
    # Models
    "Account",
    "Address",
    "CardTransaction",
    "CreateEbarimtInvoiceRequest",
    "CreateEbarimtRequest",
    "CreateInvoiceRequest",
    "CreateSimpleInvoiceRequest",
    "Deeplink",
    "EbarimtHistory",
    "EbarimtInvoiceLine",
    "EbarimtItem",
    "EbarimtResponse",
    "InvoiceLine",
    "InvoiceReceiverData",
    "InvoiceResponse",
    "Offset",
    "P2PTransaction",
    "PaymentCancelRequest",
    "PaymentCheckRequest",
    "PaymentCheckResponse",
    "PaymentCheckRow",
    "PaymentDetail",
    "PaymentListItem",
    "PaymentListRequest",
    "PaymentListResponse",
    "PaymentRefundRequest",
    "SenderBranchData",
    "SenderStaffData",
    "TaxEntry",
    "TokenResponse",
    "Transaction",
]
