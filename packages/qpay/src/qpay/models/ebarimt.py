"""Models for electronic tax receipts (ebarimt v3)."""

from pydantic import JsonValue

from .base import APIBaseModel


class CreateEbarimtRequest(APIBaseModel):
    payment_id: str
    ebarimt_receiver_type: str
    ebarimt_receiver: str | None = None
    district_code: str | None = None
    classification_code: str | None = None


class EbarimtItem(APIBaseModel):
    id: str
    barimt_id: str
    merchant_product_code: str | None = None
    tax_product_code: str
    bar_code: str | None = None
    name: str
    unit_price: str
    quantity: str
    amount: str
    city_tax_amount: str
    vat_amount: str
    note: str | None = None
    created_by: str
    created_date: str
    updated_by: str
    updated_date: str
    status: bool


class EbarimtHistory(APIBaseModel):
    id: str
    barimt_id: str
    ebarimt_receiver_type: str
    ebarimt_receiver: str
    ebarimt_register_no: str | None = None
    ebarimt_bill_id: str
    ebarimt_date: str
    ebarimt_mac_address: str
    ebarimt_internal_code: str
    ebarimt_bill_type: str
    ebarimt_qr_data: str
    ebarimt_lottery: str
    ebarimt_lottery_msg: str | None = None
    ebarimt_error_code: str | None = None
    ebarimt_error_msg: str | None = None
    ebarimt_response_code: str | None = None
    ebarimt_response_msg: str | None = None
    note: str | None = None
    barimt_status: str
    barimt_status_date: str
    ebarimt_sent_email: str | None = None
    ebarimt_receiver_phone: str
    tax_type: str
    created_by: str
    created_date: str
    updated_by: str
    updated_date: str
    status: bool


class EbarimtResponse(APIBaseModel):
    """
    Tax receipt as returned by create and cancel.

    ``barimt_transactions`` has no fixed schema; each element is any JSON
    value (null, bool, number, string, list or object, nested freely).
    """

    id: str
    ebarimt_by: str
    g_wallet_id: str
    g_wallet_customer_id: str
    ebarimt_receiver_type: str
    ebarimt_receiver: str
    ebarimt_district_code: str
    ebarimt_bill_type: str
    g_merchant_id: str
    merchant_branch_code: str
    merchant_terminal_code: str | None = None
    merchant_staff_code: str | None = None
    merchant_register_no: str
    g_payment_id: str
    paid_by: str
    object_type: str
    object_id: str
    amount: str
    vat_amount: str
    city_tax_amount: str
    ebarimt_qr_data: str
    ebarimt_lottery: str
    note: str | None = None
    barimt_status: str
    barimt_status_date: str
    ebarimt_sent_email: str | None = None
    ebarimt_receiver_phone: str
    tax_type: str
    merchant_tin: str | None = None
    ebarimt_receipt_id: str | None = None
    created_by: str
    created_date: str
    updated_by: str
    updated_date: str
    status: bool
    barimt_items: list[EbarimtItem] | None = None
    barimt_transactions: list[JsonValue] | None = None
    barimt_histories: list[EbarimtHistory] | None = None
