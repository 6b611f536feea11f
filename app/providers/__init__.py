"""Explorer provider implementations."""

from app.providers.blockchain_info import BlockchainInfoProvider
from app.providers.chain_so import ChainSoProvider

__all__ = [
    "BlockchainInfoProvider",
    "ChainSoProvider",
]
