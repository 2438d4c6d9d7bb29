"""Models for ``/v2/invoice``: three request flavours and a shared response."""

from pydantic import Field

from .base import APIBaseModel
from .common import (
    Deeplink,
    EbarimtInvoiceLine,
    InvoiceLine,
    InvoiceReceiverData,
    SenderBranchData,
    SenderStaffData,
    Transaction,
)


class CreateInvoiceRequest(APIBaseModel):
    """Full invoice creation request with every optional feature."""

    invoice_code: str
    sender_invoice_no: str
    sender_branch_code: str | None = None
    sender_branch_data: SenderBranchData | None = None
    sender_staff_data: SenderStaffData | None = None
    sender_staff_code: str | None = None
    invoice_receiver_code: str
    invoice_receiver_data: InvoiceReceiverData | None = None
    invoice_description: str
    enable_expiry: str | None = None
    allow_partial: bool | None = None
    minimum_amount: float | None = None
    allow_exceed: bool | None = None
    maximum_amount: float | None = None
    amount: float
    callback_url: str
    sender_terminal_code: str | None = None
    allow_subscribe: bool | None = None
    subscription_interval: str | None = None
    subscription_webhook: str | None = None
    note: str | None = None
    transactions: list[Transaction] | None = None
    lines: list[InvoiceLine] | None = None


class CreateSimpleInvoiceRequest(APIBaseModel):
    invoice_code: str
    sender_invoice_no: str
    invoice_receiver_code: str
    invoice_description: str
    sender_branch_code: str | None = None
    amount: float
    callback_url: str


class CreateEbarimtInvoiceRequest(APIBaseModel):
    """Invoice carrying tax receipt (ebarimt) line information."""

    invoice_code: str
    sender_invoice_no: str
    sender_branch_code: str | None = None
    sender_staff_data: SenderStaffData | None = None
    sender_staff_code: str | None = None
    invoice_receiver_code: str
    invoice_receiver_data: InvoiceReceiverData | None = None
    invoice_description: str
    tax_type: str
    district_code: str
    callback_url: str
    lines: list[EbarimtInvoiceLine]


class InvoiceResponse(APIBaseModel):
    invoice_id: str
    qr_text: str
    qr_image: str
    qpay_short_url: str = Field(alias="qPay_shortUrl")
    urls: list[Deeplink]
