class QPayBaseUrls:
    PRODUCTION = "https://merchant.qpay.mn"


class QPayApiUrls:
    AUTH_TOKEN = "/v2/auth/token"
    AUTH_REFRESH = "/v2/auth/refresh"
    INVOICE = "/v2/invoice"
    INVOICE_BY_ID = "/v2/invoice/{invoice_id}"
    PAYMENT_BY_ID = "/v2/payment/{payment_id}"
    PAYMENT_CHECK = "/v2/payment/check"
    PAYMENT_LIST = "/v2/payment/list"
    PAYMENT_CANCEL = "/v2/payment/cancel/{payment_id}"
    PAYMENT_REFUND = "/v2/payment/refund/{payment_id}"
    EBARIMT_CREATE = "/v2/ebarimt_v3/create"
    EBARIMT_BY_ID = "/v2/ebarimt_v3/{payment_id}"
