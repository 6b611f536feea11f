"""blockchain.info balance lookup provider."""

import logging

import httpx

from app.constants import DEFAULT_BALANCE_BASE_URL
from app.core.exceptions import BalanceLookupError
from app.core.provider import BalanceProvider
from app.providers.base import HTTPProvider

logger = logging.getLogger(__name__)


class BlockchainInfoProvider(HTTPProvider, BalanceProvider):
    """Reads the ``result`` field of the balance endpoint for one address."""

    def __init__(
        self,
        base_url: str = DEFAULT_BALANCE_BASE_URL,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout, client=client)

    @property
    def name(self) -> str:
        """Provider name identifier."""
        return "blockchain.info"

    async def get_balance(self, address: str) -> int | float:
        """Fetch the balance of an address."""
        if not address:
            raise BalanceLookupError(address, "no address configured")

        try:
            body = await self._get_json(address, params={"format": "json"})
        except httpx.HTTPError as e:
            raise BalanceLookupError(address, f"{type(e).__name__}: {e}") from e
        except ValueError as e:
            raise BalanceLookupError(address, "response body is not valid JSON") from e

        total = body.get("result") if isinstance(body, dict) else None
        # bool is an int subclass but never a balance
        if isinstance(total, bool) or not isinstance(total, (int, float)):
            raise BalanceLookupError(address, "response is missing a numeric result")

        logger.debug(f"Balance for {address}: {total}")
        return total
