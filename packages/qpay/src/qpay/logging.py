import logging


def setup_logging(level: int = logging.INFO):
    """
    Configure root logging for scripts using the SDK.

    The library itself installs no handlers; applications call this (or their
    own setup) once at startup. HTTP library loggers are capped at WARNING so
    ``qpay`` request traces are not drowned out.
    """
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("qpay").setLevel(level)
