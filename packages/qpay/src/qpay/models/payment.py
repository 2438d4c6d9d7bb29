from .base import APIBaseModel
from .common import Offset


class PaymentCheckRequest(APIBaseModel):
    object_type: str
    object_id: str
    offset: Offset | None = None


class CardTransaction(APIBaseModel):
    card_merchant_code: str | None = None
    card_terminal_code: str | None = None
    card_number: str | None = None
    card_type: str
    is_cross_border: bool
    amount: str | None = None
    transaction_amount: str | None = None
    currency: str | None = None
    transaction_currency: str | None = None
    date: str | None = None
    transaction_date: str | None = None
    status: str | None = None
    transaction_status: str | None = None
    settlement_status: str
    settlement_status_date: str


class P2PTransaction(APIBaseModel):
    transaction_bank_code: str
    account_bank_code: str
    account_bank_name: str
    account_number: str
    status: str
    amount: str
    currency: str
    settlement_status: str


class PaymentCheckRow(APIBaseModel):
    payment_id: str
    payment_status: str
    payment_amount: str
    trx_fee: str
    payment_currency: str
    payment_wallet: str
    payment_type: str
    next_payment_date: str | None = None
    next_payment_datetime: str | None = None
    card_transactions: list[CardTransaction]
    p2p_transactions: list[P2PTransaction]


class PaymentCheckResponse(APIBaseModel):
    count: int
    paid_amount: float | None = None
    rows: list[PaymentCheckRow]


class PaymentDetail(APIBaseModel):
    """Payment as returned by ``GET /v2/payment/{id}``."""

    payment_id: str
    payment_status: str
    payment_fee: str
    payment_amount: str
    payment_currency: str
    payment_date: str
    payment_wallet: str
    transaction_type: str
    object_type: str
    object_id: str
    next_payment_date: str | None = None
    next_payment_datetime: str | None = None
    card_transactions: list[CardTransaction]
    p2p_transactions: list[P2PTransaction]


class PaymentListRequest(APIBaseModel):
    object_type: str
    object_id: str
    start_date: str
    end_date: str
    offset: Offset


class PaymentListItem(APIBaseModel):
    payment_id: str
    payment_date: str
    payment_status: str
    payment_fee: str
    payment_amount: str
    payment_currency: str
    payment_wallet: str
    payment_name: str
    payment_description: str
    qr_code: str
    paid_by: str
    object_type: str
    object_id: str


class PaymentListResponse(APIBaseModel):
    count: int
    rows: list[PaymentListItem]


class PaymentCancelRequest(APIBaseModel):
    """Optional body for card payment cancellation."""

    callback_url: str | None = None
    note: str | None = None


class PaymentRefundRequest(APIBaseModel):
    """Optional body for card payment refunds."""

    callback_url: str | None = None
    note: str | None = None
