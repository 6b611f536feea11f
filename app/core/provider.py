"""Abstract explorer provider interfaces."""

from abc import ABC, abstractmethod

from app.models.transaction import RawTransaction


class TransactionProvider(ABC):
    """Abstract base class for explorers listing received transactions."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def get_received_transactions(self, address: str) -> list[RawTransaction]:
        """
        Fetch the transactions currently known to have been received by an address.

        Args:
            address: Monitored address.

        Returns:
            Raw transactions as reported by the explorer.

        Raises:
            FetchFailedError: On transport errors, non-2xx statuses or a
                malformed response body.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the provider and release resources."""
        ...


class BalanceProvider(ABC):
    """Abstract base class for balance lookup services."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name identifier."""
        ...

    @abstractmethod
    async def get_balance(self, address: str) -> int | float:
        """
        Fetch the balance of an address in the smallest currency unit.

        Raises:
            BalanceLookupError: On any failure.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close the provider and release resources."""
        ...
