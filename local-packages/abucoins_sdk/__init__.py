"""
Abucoins Python SDK - A Python SDK for the Abucoins Exchange REST API.
"""

from loguru import logger

from .client import Client
from .errors import AbucoinsError, ApplicationError, RequestTimeoutError, TransportError
from .history.types import (
    HistoryParams,
    Fill,
    DepositHistory,
    WithdrawalHistory,
    parse_fills,
    parse_deposits,
    parse_withdrawals
)
from .internal.hmac_signing_adapter import HmacSigningAdapter
from .internal.options import ClientOptions
from .internal.query import url_with_parameters
from .internal.signing_adapter import SigningAdapter, build_signature_content

# Silent unless the application opts in with logger.enable("abucoins_sdk")
logger.disable(__name__)

__version__ = "0.1.0"
__all__ = [
    "Client",
    "ClientOptions",
    "AbucoinsError",
    "ApplicationError",
    "RequestTimeoutError",
    "TransportError",
    "HistoryParams",
    "Fill",
    "DepositHistory",
    "WithdrawalHistory",
    "parse_fills",
    "parse_deposits",
    "parse_withdrawals",
    "SigningAdapter",
    "HmacSigningAdapter",
    "build_signature_content",
    "url_with_parameters"
]
