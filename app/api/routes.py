"""API route definitions."""

import logging
import time
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import (
    get_balance_provider,
    get_deposit_addresses,
    get_update_service,
)
from app.config import Settings, get_settings
from app.constants import BALANCE_FAILURE_MESSAGE, CURRENCY_CODE
from app.core.exceptions import BalanceLookupError
from app.core.provider import BalanceProvider
from app.models.responses import (
    BalanceResponse,
    ErrorResponse,
    HealthResponse,
    UpdateFailureResponse,
    UpdateSuccessResponse,
)
from app.services.updater import TransactionUpdateService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health Check",
    description="Application name and release version.",
)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Return the configured application name and version."""
    return HealthResponse(name=settings.app_name, version=settings.app_version)


@router.post(
    "/transaction/update",
    tags=["transactions"],
    summary="Forward Received Transactions",
    description=(
        "Retrieve the transactions received by every monitored address and "
        "forward each one to the configured webhook."
    ),
    responses={
        200: {"model": UpdateSuccessResponse},
        500: {"model": UpdateFailureResponse},
    },
)
async def update_transactions(
    updater: Annotated[TransactionUpdateService, Depends(get_update_service)],
    addresses: Annotated[list[str], Depends(get_deposit_addresses)],
) -> JSONResponse:
    """
    Run one update pass.

    Any single fetch or forward error turns the whole response into a 500
    carrying every error; count and total are only reported on full success.
    """
    try:
        result = await updater.run_update(addresses)
    except Exception as e:
        logger.exception(f"Error processing transactions: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=UpdateFailureResponse(error=[str(e)]).model_dump(),
        )

    if not result.succeeded:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=UpdateFailureResponse(error=result.errors).model_dump(),
        )

    return JSONResponse(
        content=UpdateSuccessResponse(count=result.count, total=result.total).model_dump()
    )


@router.get(
    "/transaction/total",
    tags=["transactions"],
    summary="Balance Lookup",
    description="Current balance of the configured address.",
    responses={
        200: {"model": BalanceResponse},
        500: {"model": ErrorResponse},
    },
)
async def transaction_total(
    provider: Annotated[BalanceProvider, Depends(get_balance_provider)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> JSONResponse:
    """Look up the balance of the configured address."""
    try:
        total = await provider.get_balance(settings.ltc_addr)
    except BalanceLookupError as e:
        logger.error(f"Error fetching transaction total: {e.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=BALANCE_FAILURE_MESSAGE).model_dump(),
        )
    except Exception as e:
        logger.exception(f"Unexpected error fetching transaction total: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=BALANCE_FAILURE_MESSAGE).model_dump(),
        )

    timestamp = int(time.time() * 1000)
    return JSONResponse(
        content=BalanceResponse(
            currency=CURRENCY_CODE, total=total, timestamp=timestamp
        ).model_dump()
    )
