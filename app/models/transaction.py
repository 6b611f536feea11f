"""Transaction domain models."""

from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict

from app.constants import CURRENCY_CODE, WALLET_ADDRESS_PLACEHOLDER


class RawTransaction(BaseModel):
    """A received transaction as reported by the explorer."""

    model_config = ConfigDict(extra="ignore")

    txid: str
    script_hex: str
    value: int


class NormalizedTransactionPayload(BaseModel):
    """Payload posted to the downstream webhook."""

    model_config = ConfigDict(frozen=True)

    wallet_address: str = WALLET_ADDRESS_PLACEHOLDER
    tx_id: str
    tx_hash: str
    amount: int
    currency: str = CURRENCY_CODE

    @classmethod
    def from_raw(cls, txn: RawTransaction) -> "NormalizedTransactionPayload":
        """Build the payload for a raw transaction."""
        return cls(
            wallet_address=WALLET_ADDRESS_PLACEHOLDER,
            tx_id=txn.txid,
            tx_hash=txn.script_hex,
            amount=txn.value,
            currency=CURRENCY_CODE,
        )


@dataclass
class UpdateResult:
    """Aggregated outcome of one update run."""

    count: int = 0
    total: int = 0
    errors: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        """True when every fetch and every forward succeeded."""
        return not self.errors
