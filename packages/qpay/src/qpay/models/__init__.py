from qpay.models.base import APIBaseModel
from qpay.models.common import (
    Account,
    Address,
    Deeplink,
    EbarimtInvoiceLine,
    InvoiceLine,
    InvoiceReceiverData,
    Offset,
    SenderBranchData,
    SenderStaffData,
    TaxEntry,
    Transaction,
)
from qpay.models.ebarimt import (
    CreateEbarimtRequest,
    EbarimtHistory,
    EbarimtItem,
    EbarimtResponse,
)
from qpay.models.invoice import (
    CreateEbarimtInvoiceRequest,
    CreateInvoiceRequest,
    CreateSimpleInvoiceRequest,
    InvoiceResponse,
)
from qpay.models.payment import (
    CardTransaction,
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
)
from qpay.models.token import TokenResponse

__all__ = [
    "APIBaseModel",
    # Common
    "Account",
    "Address",
    "Deeplink",
    "EbarimtInvoiceLine",
    "InvoiceLine",
    "InvoiceReceiverData",
    "Offset",
    "SenderBranchData",
    "SenderStaffData",
    "TaxEntry",
    "Transaction",
    # Auth
    "TokenResponse",
    # Invoice
    "CreateInvoiceRequest",
    "CreateSimpleInvoiceRequest",
    "CreateEbarimtInvoiceRequest",
    "InvoiceResponse",
    # Payment
    "CardTransaction",
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
    # Ebarimt
    "CreateEbarimtRequest",
    "EbarimtHistory",
    "EbarimtItem",
    "EbarimtResponse",
]
