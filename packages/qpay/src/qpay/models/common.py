"""Building blocks shared by invoice, payment and ebarimt models."""

from pydantic import Field

from .base import APIBaseModel


class Address(APIBaseModel):
    city: str | None = None
    district: str | None = None
    street: str | None = None
    building: str | None = None
    address: str | None = None
    zipcode: str | None = None
    longitude: str | None = None
    latitude: str | None = None


class SenderBranchData(APIBaseModel):
    register_no: str | None = Field(default=None, alias="register")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: Address | None = None


class SenderStaffData(APIBaseModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None


class InvoiceReceiverData(APIBaseModel):
    register_no: str | None = Field(default=None, alias="register")
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: Address | None = None


class Account(APIBaseModel):
    """Bank account that receives a share of an invoice transaction."""

    account_bank_code: str
    account_number: str
    iban_number: str
    account_name: str
    account_currency: str
    is_default: bool


class Transaction(APIBaseModel):
    description: str
    amount: str
    accounts: list[Account] | None = None


class TaxEntry(APIBaseModel):
    """A tax, discount or surcharge applied to an invoice line."""

    tax_code: str | None = None
    discount_code: str | None = None
    surcharge_code: str | None = None
    description: str
    amount: float
    note: str | None = None


class InvoiceLine(APIBaseModel):
    tax_product_code: str | None = None
    line_description: str
    line_quantity: str
    line_unit_price: str
    note: str | None = None
    discounts: list[TaxEntry] | None = None
    surcharges: list[TaxEntry] | None = None
    taxes: list[TaxEntry] | None = None


class EbarimtInvoiceLine(APIBaseModel):
    tax_product_code: str | None = None
    line_description: str
    barcode: str | None = None
    line_quantity: str
    line_unit_price: str
    note: str | None = None
    classification_code: str | None = None
    taxes: list[TaxEntry] | None = None


class Deeplink(APIBaseModel):
    """Bank app deeplink returned with a created invoice."""

    name: str
    description: str
    logo: str
    link: str


class Offset(APIBaseModel):
    page_number: int
    page_limit: int
