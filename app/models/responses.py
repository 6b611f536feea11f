"""HTTP response models."""

from typing import Literal

from pydantic import BaseModel

from app.constants import CURRENCY_CODE


class HealthResponse(BaseModel):
    """Health check response model."""

    name: str
    version: str


class UpdateSuccessResponse(BaseModel):
    """Update run in which every fetch and forward succeeded."""

    status: Literal[200] = 200
    count: int
    total: int


class UpdateFailureResponse(BaseModel):
    """Update run with at least one error."""

    status: Literal[500] = 500
    error: list[str]


class BalanceResponse(BaseModel):
    """Balance of the configured address."""

    currency: str = CURRENCY_CODE
    total: int | float
    timestamp: int


class ErrorResponse(BaseModel):
    """Generic error body."""

    error: str
