"""Wallet batch aggregation."""
from typing import Any, Iterable

from app.models.wallet import ProcessWalletsResponse, WalletResult
from app.services.airdrop_service import AirdropBalanceService
from app.utils.addresses import filter_valid_wallets
from app.utils.errors import NoValidWalletsError, WalletInputError

# Wallets at or below this balance are not worth reporting
MIN_UNCLAIMED_BALANCE = 1


def has_unclaimed_balance(result: WalletResult) -> bool:
    """True if the wallet holds more than the minimum and has not claimed it."""
    return result.balance > MIN_UNCLAIMED_BALANCE and result.claim is False


def aggregate_results(results: Iterable[WalletResult]) -> ProcessWalletsResponse:
    """Keep wallets with an unclaimed balance and total their balances."""
    filtered = [result for result in results if has_unclaimed_balance(result)]
    total = sum(result.balance for result in filtered)
    return ProcessWalletsResponse(filtered_wallets=filtered, total_balance=total)


async def process_wallets(wallets: Any, service: AirdropBalanceService) -> ProcessWalletsResponse:
    """
    Look up every valid wallet and aggregate the unclaimed balances.
    
    Args:
        wallets: Submitted wallet entries; must be a list
        service: Balance service used for the lookups
        
    Returns:
        Wallets with an unclaimed balance and their total
        
    Raises:
        WalletInputError: If wallets is not a list
        NoValidWalletsError: If no entry is a valid wallet address
    """
    if not isinstance(wallets, list):
        raise WalletInputError()
    
    valid_wallets = filter_valid_wallets(wallets)
    if not valid_wallets:
        raise NoValidWalletsError()
    
    results = await service.fetch_balances(valid_wallets)
    return aggregate_results(results)
