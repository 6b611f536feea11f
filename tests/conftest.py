"""Test configuration and fixtures."""

from typing import Any, Callable

import httpx
import pytest

from app.config import Settings

EXPLORER_URL = "https://explorer.test/api/v2/get_tx_received/LTC"
BALANCE_URL = "https://balance.test/balance"
WEBHOOK_URL = "https://webhook.test/transactions"

Handler = Callable[[httpx.Request], httpx.Response]


def explorer_body(address: str, *txs: dict[str, Any]) -> dict[str, Any]:
    """Explorer response listing received transactions."""
    return {
        "status": "success",
        "data": {"network": "LTC", "address": address, "txs": list(txs)},
    }


def raw_tx(txid: str, value: int, script_hex: str | None = None) -> dict[str, Any]:
    """Explorer transaction entry."""
    return {
        "txid": txid,
        "output_no": 0,
        "script_asm": "OP_DUP OP_HASH160",
        "script_hex": script_hex or f"{txid}-script",
        "value": value,
        "confirmations": 6,
        "time": 1700000000,
    }


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at test URLs, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        HEROKU_APP_NAME="LTC-Test-Monitor",
        HEROKU_RELEASE_VERSION="v1.0.0-test",
        api_update_url=WEBHOOK_URL,
        ltc_addr="LTC-BALANCE-ADDR",
        explorer_base_url=EXPLORER_URL,
        balance_base_url=BALANCE_URL,
        http_timeout=5.0,
    )


@pytest.fixture
def make_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Build httpx clients whose requests are answered by a handler."""

    def _make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
