"""Domain models package."""

from app.models.responses import (
    BalanceResponse,
    ErrorResponse,
    HealthResponse,
    UpdateFailureResponse,
    UpdateSuccessResponse,
)
from app.models.transaction import (
    NormalizedTransactionPayload,
    RawTransaction,
    UpdateResult,
)

__all__ = [
    "BalanceResponse",
    "ErrorResponse",
    "HealthResponse",
    "NormalizedTransactionPayload",
    "RawTransaction",
    "UpdateFailureResponse",
    "UpdateResult",
    "UpdateSuccessResponse",
]
