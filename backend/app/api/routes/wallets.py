"""Wallet processing endpoints."""
from typing import Any, AsyncIterator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.config import settings
from app.models.wallet import ErrorResponse, ProcessWalletsResponse
from app.services.airdrop_service import AirdropBalanceService
from app.services.wallet_processor import process_wallets
from app.utils.addresses import is_valid_wallet, parse_wallet_input
from app.utils.errors import WalletInputError
from app.utils.logging import get_logger

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def get_request_logger() -> Any:
    """Logger handed to the handler and the balance service."""
    return get_logger("app.wallets")


async def get_airdrop_service(
    logger: Any = Depends(get_request_logger),
) -> AsyncIterator[AirdropBalanceService]:
    """Balance service scoped to a single request."""
    service = AirdropBalanceService(
        settings.airdrop_api_url,
        logger=logger,
        timeout=settings.airdrop_request_timeout,
        max_concurrency=settings.max_concurrent_lookups,
    )
    async with service:
        yield service


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def _run(wallets: Any, service: AirdropBalanceService, logger: Any):
    try:
        result = await process_wallets(wallets, service)
    except WalletInputError as e:
        return _error(400, e.message)
    except Exception:
        logger.exception("process_wallets_failed")
        return _error(500, "Internal server error")
    
    logger.info(
        "process_wallets_completed",
        matched=len(result.filtered_wallets),
        total_balance=result.total_balance,
    )
    return result


@router.post("/process-wallets", response_model=ProcessWalletsResponse, responses=ERROR_RESPONSES)
async def process_wallets_endpoint(
    request: Request,
    service: AirdropBalanceService = Depends(get_airdrop_service),
    logger: Any = Depends(get_request_logger),
):
    """
    Find wallets that still hold an unclaimed airdrop balance.
    
    Expects a JSON body ``{"wallets": [...]}``. This endpoint will:
    1. Drop entries that are not valid wallet addresses
    2. Look up every remaining wallet concurrently
    3. Keep wallets with a balance above 1 that has not been claimed
    4. Return them with the total of their balances
    """
    try:
        body = await request.json()
    except Exception:
        logger.exception("process_wallets_failed")
        return _error(500, "Internal server error")
    
    wallets = body.get("wallets") if isinstance(body, dict) else None
    return await _run(wallets, service, logger)


@router.post("/process-wallets/text", response_model=ProcessWalletsResponse, responses=ERROR_RESPONSES)
async def process_wallets_text(
    request: Request,
    service: AirdropBalanceService = Depends(get_airdrop_service),
    logger: Any = Depends(get_request_logger),
):
    """Same as /process-wallets, reading one wallet address per line of a plain text body."""
    text = (await request.body()).decode("utf-8", errors="replace")
    wallets = parse_wallet_input(text)
    if not wallets:
        return _error(400, "Please enter at least one wallet address.")
    return await _run(wallets, service, logger)


@router.get("/wallets/validate/{address}")
async def validate_wallet(address: str):
    """Validate a wallet address format."""
    is_valid = is_valid_wallet(address)
    
    return {
        "address": address,
        "valid": is_valid,
        "message": "Address is valid" if is_valid else "Invalid wallet address format"
    }
