"""Monitored address list loaded from the environment."""

import logging
import os
from collections.abc import Mapping

from app.constants import ADDRESS_LIST_SUFFIX
from app.core.exceptions import ConfigurationMissingError

logger = logging.getLogger(__name__)


def address_list_key(currency_code: str) -> str:
    """Environment key holding the address list for a currency."""
    return f"{currency_code.upper()}{ADDRESS_LIST_SUFFIX}"


def get_address_list(
    currency_code: str, environ: Mapping[str, str] | None = None
) -> list[str]:
    """
    Get the comma-separated list of addresses configured for a currency.

    Args:
        currency_code: Currency symbol, case-insensitive (e.g. 'ltc').
        environ: Mapping to read from. Defaults to the process environment.

    Returns:
        Addresses in configured order, each stripped of surrounding whitespace.

    Raises:
        ConfigurationMissingError: If the key is unset or empty.
    """
    env = os.environ if environ is None else environ
    raw = env.get(address_list_key(currency_code))
    if not raw:
        raise ConfigurationMissingError(currency_code)

    addresses = [address.strip() for address in raw.split(",")]
    logger.debug(f"Loaded {len(addresses)} {currency_code.upper()} addresses")
    return addresses
