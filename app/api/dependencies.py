"""Dependency injection for FastAPI."""

import logging
from typing import Annotated

from fastapi import Depends

from app.config import Settings, get_settings
from app.constants import CURRENCY_CODE
from app.core.address_source import address_list_key, get_address_list
from app.core.provider import BalanceProvider, TransactionProvider
from app.providers.blockchain_info import BlockchainInfoProvider
from app.providers.chain_so import ChainSoProvider
from app.services.forwarder import WebhookForwarder
from app.services.updater import TransactionUpdateService

logger = logging.getLogger(__name__)

_deposit_addresses: list[str] | None = None
_transaction_provider: TransactionProvider | None = None
_balance_provider: BalanceProvider | None = None
_forwarder: WebhookForwarder | None = None


def load_deposit_addresses(settings: Settings | None = None) -> list[str]:
    """
    Load the monitored address list once per process.

    The list is read through Settings so .env files are honored.
    An unset list leaves the service running with nothing to monitor.
    """
    global _deposit_addresses

    if _deposit_addresses is None:
        settings = settings or get_settings()
        if settings.ltc_address_list:
            _deposit_addresses = get_address_list(
                CURRENCY_CODE,
                {address_list_key(CURRENCY_CODE): settings.ltc_address_list},
            )
        else:
            logger.warning(
                f"{address_list_key(CURRENCY_CODE)} is not set; no addresses will be monitored"
            )
            _deposit_addresses = []

    return _deposit_addresses


def get_deposit_addresses(
    settings: Annotated[Settings, Depends(get_settings)]
) -> list[str]:
    """Get the monitored address list."""
    return load_deposit_addresses(settings)


def get_transaction_provider(
    settings: Annotated[Settings, Depends(get_settings)]
) -> TransactionProvider:
    """Get or create the received-transactions provider."""
    global _transaction_provider

    if _transaction_provider is None:
        _transaction_provider = ChainSoProvider(
            base_url=settings.explorer_base_url,
            timeout=settings.http_timeout,
        )

    return _transaction_provider


def get_balance_provider(
    settings: Annotated[Settings, Depends(get_settings)]
) -> BalanceProvider:
    """Get or create the balance lookup provider."""
    global _balance_provider

    if _balance_provider is None:
        _balance_provider = BlockchainInfoProvider(
            base_url=settings.balance_base_url,
            timeout=settings.http_timeout,
        )

    return _balance_provider


def get_forwarder(
    settings: Annotated[Settings, Depends(get_settings)]
) -> WebhookForwarder:
    """Get or create the webhook forwarder."""
    global _forwarder

    if _forwarder is None:
        _forwarder = WebhookForwarder(
            webhook_url=settings.api_update_url,
            timeout=settings.http_timeout,
        )

    return _forwarder


def get_update_service(
    provider: Annotated[TransactionProvider, Depends(get_transaction_provider)],
    forwarder: Annotated[WebhookForwarder, Depends(get_forwarder)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TransactionUpdateService:
    """Get transaction update service instance."""
    return TransactionUpdateService(
        provider=provider,
        forwarder=forwarder,
        max_concurrent_requests=settings.max_concurrent_requests,
    )


async def cleanup_dependencies() -> None:
    """Cleanup dependency instances on shutdown."""
    global _deposit_addresses, _transaction_provider, _balance_provider, _forwarder

    if _transaction_provider:
        await _transaction_provider.close()
        _transaction_provider = None

    if _balance_provider:
        await _balance_provider.close()
        _balance_provider = None

    if _forwarder:
        await _forwarder.close()
        _forwarder = None

    _deposit_addresses = None
