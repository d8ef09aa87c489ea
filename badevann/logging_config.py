"""Console logging setup with a switchable debug level."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Chatty at INFO; only shown in debug mode
THIRD_PARTY_LOGGERS = ("httpx", "httpcore")


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    set_debug(debug)


def set_debug(enabled: bool) -> None:
    """Switch between DEBUG and WARNING for our loggers and the HTTP stack."""
    level = logging.DEBUG if enabled else logging.WARNING
    logging.getLogger().setLevel(level)
    for name in THIRD_PARTY_LOGGERS:
        logging.getLogger(name).setLevel(level)
