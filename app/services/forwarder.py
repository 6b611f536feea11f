"""Webhook forwarder for normalized transactions."""

import logging

import httpx

from app.constants import UNKNOWN_STATUS, WEBHOOK_SUCCESS_STATUS
from app.core.exceptions import ForwardFailedError
from app.models.transaction import NormalizedTransactionPayload
from app.providers.base import HTTPClient

logger = logging.getLogger(__name__)


class WebhookForwarder(HTTPClient):
    """
    Posts normalized transactions to the configured webhook.

    Each payload gets exactly one attempt. Only HTTP 200 counts as delivered.
    """

    def __init__(
        self,
        webhook_url: str,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize the forwarder.

        Args:
            webhook_url: Endpoint receiving the payloads.
            timeout: Request timeout in seconds.
            client: Pre-built client, mainly for tests. Created on first use otherwise.
        """
        super().__init__(timeout=timeout, client=client)
        self._webhook_url = webhook_url

    async def forward(self, payload: NormalizedTransactionPayload) -> None:
        """
        Post one payload to the webhook.

        Raises:
            ForwardFailedError: With the observed status, or "unknown" when no
                response was obtained.
        """
        if not self._webhook_url:
            logger.warning(f"Update of txn {payload.tx_id} skipped: no webhook URL configured")
            raise ForwardFailedError(payload.tx_id, UNKNOWN_STATUS)

        client = await self._get_client()
        try:
            response = await client.post(self._webhook_url, json=payload.model_dump())
        except httpx.HTTPError as e:
            logger.warning(f"Update of txn {payload.tx_id} failed: {type(e).__name__}: {e}")
            raise ForwardFailedError(payload.tx_id, UNKNOWN_STATUS) from e

        if response.status_code != WEBHOOK_SUCCESS_STATUS:
            logger.warning(
                f"Update of txn {payload.tx_id} failed. Status was {response.status_code}"
            )
            raise ForwardFailedError(payload.tx_id, response.status_code)

        logger.info(f"Updated {payload.tx_id} successfully")
