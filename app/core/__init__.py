"""Core module for base interfaces and abstractions."""

from app.core.address_source import get_address_list
from app.core.exceptions import (
    BalanceLookupError,
    ConfigurationMissingError,
    FetchFailedError,
    ForwardFailedError,
    MonitorError,
)
from app.core.provider import BalanceProvider, TransactionProvider

__all__ = [
    "BalanceLookupError",
    "BalanceProvider",
    "ConfigurationMissingError",
    "FetchFailedError",
    "ForwardFailedError",
    "MonitorError",
    "TransactionProvider",
    "get_address_list",
]
