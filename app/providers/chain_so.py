"""chain.so explorer provider for received transactions."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from app.constants import DEFAULT_EXPLORER_BASE_URL
from app.core.exceptions import FetchFailedError
from app.core.provider import TransactionProvider
from app.models.transaction import RawTransaction
from app.providers.base import HTTPProvider

logger = logging.getLogger(__name__)


class ChainSoProvider(HTTPProvider, TransactionProvider):
    """
    Lists transactions received by an address via chain.so.

    Expects ``{"data": {"txs": [{"txid", "script_hex", "value"}, ...]}}``.
    A successful response without ``data.txs`` is treated as malformed.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_EXPLORER_BASE_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout, client=client)

    @property
    def name(self) -> str:
        """Provider name identifier."""
        return "chain.so"

    def transactions_url(self, address: str) -> str:
        """Explorer URL listing the transactions received by an address."""
        return f"{self._base_url}/{address}"

    async def get_received_transactions(self, address: str) -> list[RawTransaction]:
        """Fetch received transactions for an address."""
        logger.info(f"Checking address {self.transactions_url(address)}")

        try:
            body = await self._get_json(address)
        except httpx.HTTPStatusError as e:
            raise FetchFailedError(
                address, f"status {e.response.status_code} from {self.name}"
            ) from e
        except httpx.HTTPError as e:
            raise FetchFailedError(address, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise FetchFailedError(address, "response body is not valid JSON") from e

        txs = self._extract_txs(address, body)
        try:
            return [RawTransaction.model_validate(txn) for txn in txs]
        except ValidationError as e:
            raise FetchFailedError(
                address, f"malformed transaction entry ({e.error_count()} errors)"
            ) from e

    @staticmethod
    def _extract_txs(address: str, body: Any) -> list[Any]:
        """Pull ``data.txs`` out of the response body."""
        data = body.get("data") if isinstance(body, dict) else None
        txs = data.get("txs") if isinstance(data, dict) else None
        if not isinstance(txs, list):
            raise FetchFailedError(address, "response is missing data.txs")
        return txs
