"""QPay V2 operations on top of any base client that provides ``_send``."""

import time
from typing import Awaitable, Callable, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from qpay.auth import Credentials, TokenManager
from qpay.baseclient.response import RawResponse
from qpay.codec import decode_body, encode_body, raise_for_status
from qpay.config import QPayConfig
from qpay.models import (
    APIBaseModel,
    CreateEbarimtInvoiceRequest,
    CreateEbarimtRequest,
    CreateInvoiceRequest,
    CreateSimpleInvoiceRequest,
    EbarimtResponse,
    InvoiceResponse,
    PaymentCancelRequest,
    PaymentCheckRequest,
    PaymentCheckResponse,
    PaymentDetail,
    PaymentListRequest,
    PaymentListResponse,
    PaymentRefundRequest,
    TokenResponse,
)
from qpay.urls import QPayApiUrls

ModelT = TypeVar("ModelT", bound=BaseModel)


def _path_id(value: str) -> str:
    return quote(value, safe="")


class QPayAPI:
    """
    Mixin implementing the QPay V2 API.

    Concrete clients combine it with a base client (httpx or aiohttp) that
    supplies ``_send`` and call ``_setup_auth`` from their ``__init__``.

    Every operation runs through ``_call``: ensure a valid token, send the
    authenticated request once, then return a typed model (or ``None``) or
    raise a ``QPayError`` subclass. Nothing is retried.
    """

    config: QPayConfig
    token_manager: TokenManager
    # Supplied by the base client listed after this mixin
    _send: Callable[..., Awaitable[RawResponse]]

    def _setup_auth(
        self,
        config: QPayConfig,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self.token_manager = TokenManager(
            Credentials(config.username, config.password),
            send=self._send_unauthenticated,
            clock=clock,
        )

    async def _send_unauthenticated(
        self, method: str, endpoint: str, headers: dict[str, str]
    ) -> RawResponse:
        return await self._send(method, endpoint, headers=headers)

    async def _call(
        self,
        method: str,
        path: str,
        body: APIBaseModel | None = None,
        response_model: type[ModelT] | None = None,
    ) -> ModelT | None:
        """
        Perform one authenticated API call end to end.

        Args:
            method: HTTP method.
            path: Endpoint path relative to the base URL.
            body: Request model to send as JSON, or None for no payload.
            response_model: Model to parse a 2xx body into. None means the
                operation has no response content.

        Returns:
            The parsed model, or None when ``response_model`` is None.

        Raises:
            TransportError: If no response was received.
            APIError: If the status is not 2xx.
            EncodingError: If ``body`` cannot be serialized; nothing is sent.
            DecodingError: If a 2xx body does not match ``response_model``.
        """
        access_token = await self.token_manager.ensure_valid()

        headers = {"Authorization": f"Bearer {access_token}"}
        content = None
        if body is not None:
            content = encode_body(body)
            headers["Content-Type"] = "application/json"

        response = await self._send(method, path, headers=headers, content=content)

        if response_model is None:
            raise_for_status(response)
            return None
        return decode_body(response, response_model)

    # ------------------------------------------------------------------ auth

    async def get_token(self) -> TokenResponse:
        """
        Authenticate with Basic auth and store the new token pair.

        Normally unnecessary: every operation obtains a token on demand.
        """
        return await self.token_manager.authenticate()

    async def refresh_token(self) -> TokenResponse:
        """Use the stored refresh token to obtain and store a new token pair."""
        return await self.token_manager.refresh()

    # --------------------------------------------------------------- invoice

    async def create_invoice(self, request: CreateInvoiceRequest) -> InvoiceResponse:
        """
        Create a detailed invoice with full options.

        Args:
            request: The full invoice creation request.

        Returns:
            InvoiceResponse with the invoice id, QR code and bank deeplinks.

        Example:
            >>> invoice = await client.create_invoice(
            ...     CreateInvoiceRequest(
            ...         invoice_code=client.config.invoice_code,
            ...         sender_invoice_no="INV-001",
            ...         invoice_receiver_code="terminal",
            ...         invoice_description="Order #1",
            ...         amount=100,
            ...         callback_url=client.config.callback_url,
            ...     )
            ... )
        """
        return await self._call(
            "POST", QPayApiUrls.INVOICE, body=request, response_model=InvoiceResponse
        )

    async def create_simple_invoice(
        self, request: CreateSimpleInvoiceRequest
    ) -> InvoiceResponse:
        """Create an invoice with the minimal set of fields."""
        return await self._call(
            "POST", QPayApiUrls.INVOICE, body=request, response_model=InvoiceResponse
        )

    async def create_ebarimt_invoice(
        self, request: CreateEbarimtInvoiceRequest
    ) -> InvoiceResponse:
        """Create an invoice carrying tax receipt (ebarimt) lines."""
        return await self._call(
            "POST", QPayApiUrls.INVOICE, body=request, response_model=InvoiceResponse
        )

    async def cancel_invoice(self, invoice_id: str) -> None:
        """Cancel an unpaid invoice."""
        await self._call(
            "DELETE", QPayApiUrls.INVOICE_BY_ID.format(invoice_id=_path_id(invoice_id))
        )

    # --------------------------------------------------------------- payment

    async def get_payment(self, payment_id: str) -> PaymentDetail:
        """Retrieve payment details by payment ID."""
        return await self._call(
            "GET",
            QPayApiUrls.PAYMENT_BY_ID.format(payment_id=_path_id(payment_id)),
            response_model=PaymentDetail,
        )

    async def check_payment(self, request: PaymentCheckRequest) -> PaymentCheckResponse:
        """
        Check whether an invoice (or other object) has been paid.

        Args:
            request: Object type/id to check, with optional paging.

        Returns:
            PaymentCheckResponse with the paid amount and matching payments.
        """
        return await self._call(
            "POST",
            QPayApiUrls.PAYMENT_CHECK,
            body=request,
            response_model=PaymentCheckResponse,
        )

    async def list_payments(self, request: PaymentListRequest) -> PaymentListResponse:
        """List payments for an object within a date range."""
        return await self._call(
            "POST",
            QPayApiUrls.PAYMENT_LIST,
            body=request,
            response_model=PaymentListResponse,
        )

    async def cancel_payment(
        self, payment_id: str, request: PaymentCancelRequest | None = None
    ) -> None:
        """
        Cancel a card payment.

        Args:
            payment_id: The payment to cancel.
            request: Optional callback URL and note. When omitted the request
                carries no body at all.
        """
        await self._call(
            "DELETE",
            QPayApiUrls.PAYMENT_CANCEL.format(payment_id=_path_id(payment_id)),
            body=request,
        )

    async def refund_payment(
        self, payment_id: str, request: PaymentRefundRequest | None = None
    ) -> None:
        """
        Refund a card payment.

        Args:
            payment_id: The payment to refund.
            request: Optional callback URL and note. When omitted the request
                carries no body at all.
        """
        await self._call(
            "DELETE",
            QPayApiUrls.PAYMENT_REFUND.format(payment_id=_path_id(payment_id)),
            body=request,
        )

    # --------------------------------------------------------------- ebarimt

    async def create_ebarimt(self, request: CreateEbarimtRequest) -> EbarimtResponse:
        """Issue an electronic tax receipt for a payment."""
        return await self._call(
            "POST",
            QPayApiUrls.EBARIMT_CREATE,
            body=request,
            response_model=EbarimtResponse,
        )

    async def cancel_ebarimt(self, payment_id: str) -> EbarimtResponse:
        """Cancel the tax receipt issued for ``payment_id``."""
        return await self._call(
            "DELETE",
            QPayApiUrls.EBARIMT_BY_ID.format(payment_id=_path_id(payment_id)),
            response_model=EbarimtResponse,
        )
