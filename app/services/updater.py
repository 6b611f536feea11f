"""Transaction update service: fetch, normalize and forward received transactions."""

import asyncio
import logging
from contextlib import AbstractAsyncContextManager, nullcontext
from typing import Sequence

from app.constants import UNKNOWN_STATUS
from app.core.exceptions import FetchFailedError, ForwardFailedError
from app.core.provider import TransactionProvider
from app.models.transaction import (
    NormalizedTransactionPayload,
    RawTransaction,
    UpdateResult,
)
from app.services.forwarder import WebhookForwarder

logger = logging.getLogger(__name__)


class TransactionUpdateService:
    """
    Runs one update pass over the monitored addresses.

    All addresses are fetched concurrently. As soon as an address's fetch
    settles, each of its transactions is forwarded concurrently. A transaction
    is counted and summed when it is dispatched, whether or not the webhook
    later accepts it. Fetch and forward failures are recorded as strings and
    never abort sibling work.
    """

    def __init__(
        self,
        provider: TransactionProvider,
        forwarder: WebhookForwarder,
        max_concurrent_requests: int = 0,
    ) -> None:
        """
        Initialize the update service.

        Args:
            provider: Explorer listing received transactions.
            forwarder: Webhook forwarder.
            max_concurrent_requests: Upper bound on in-flight outbound calls.
                0 leaves the fan-out unbounded.
        """
        self._provider = provider
        self._forwarder = forwarder
        self._semaphore = (
            asyncio.Semaphore(max_concurrent_requests)
            if max_concurrent_requests > 0
            else None
        )

    def _slot(self) -> AbstractAsyncContextManager:
        """Concurrency slot for one outbound call."""
        return self._semaphore if self._semaphore is not None else nullcontext()

    async def run_update(self, addresses: Sequence[str]) -> UpdateResult:
        """
        Fetch and forward the received transactions of every address.

        Args:
            addresses: Monitored addresses.

        Returns:
            UpdateResult with the dispatched count/total and every error seen.
        """
        result = UpdateResult()
        await asyncio.gather(
            *(self._process_address(address, result) for address in addresses)
        )

        logger.info(
            f"Update finished: {len(addresses)} addresses, {result.count} transactions, "
            f"total {result.total}, {len(result.errors)} errors"
        )
        return result

    async def _process_address(self, address: str, result: UpdateResult) -> None:
        """Fetch one address and forward each of its transactions."""
        try:
            async with self._slot():
                txs = await self._provider.get_received_transactions(address)
        except FetchFailedError as e:
            logger.error(e.message)
            result.errors.append(e.message)
            return
        except Exception as e:
            error = FetchFailedError(address, f"{type(e).__name__}: {e}")
            logger.exception(error.message)
            result.errors.append(error.message)
            return

        await asyncio.gather(*(self._dispatch(txn, result) for txn in txs))

    async def _dispatch(self, txn: RawTransaction, result: UpdateResult) -> None:
        """Count one transaction and forward it."""
        payload = NormalizedTransactionPayload.from_raw(txn)

        # Counted on dispatch; a failed forward below does not undo this.
        result.count += 1
        result.total += txn.value

        try:
            async with self._slot():
                await self._forwarder.forward(payload)
        except ForwardFailedError as e:
            result.errors.append(e.message)
        except Exception:
            error = ForwardFailedError(payload.tx_id, UNKNOWN_STATUS)
            logger.exception(f"Update of txn {payload.tx_id} failed unexpectedly")
            result.errors.append(error.message)
