"""Airdrop balance lookup service."""
import asyncio
from typing import Any, Iterable, List, Optional

import httpx
from pydantic import ValidationError

from app.models.wallet import AirdropBalanceResponse, WalletResult
from app.utils.errors import BalanceLookupError
from app.utils.logging import get_logger


class AirdropBalanceService:
    """Client for the external airdrop balance API."""
    
    def __init__(
        self,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        logger: Optional[Any] = None,
        timeout: Optional[float] = None,
        max_concurrency: Optional[int] = None,
    ):
        self.base_url = base_url
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError("max_concurrency must be a positive integer")
        self.logger = logger or get_logger(__name__)
        self.max_concurrency = max_concurrency
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)
    
    async def __aenter__(self):
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_client:
            await self.client.aclose()
    
    async def fetch_balance(self, wallet_address: str) -> WalletResult:
        """
        Fetch the airdrop balance of one wallet.
        
        Args:
            wallet_address: Wallet address, passed as the ``user`` query parameter
            
        Returns:
            Balance record for the wallet
            
        Raises:
            BalanceLookupError: On transport errors, non-2xx statuses or a
                payload without a usable ``data`` object
        """
        try:
            response = await self.client.get(self.base_url, params={"user": wallet_address})
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise BalanceLookupError(wallet_address, f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            raise BalanceLookupError(wallet_address, f"{type(e).__name__}: {e}")
        except ValueError as e:
            raise BalanceLookupError(wallet_address, f"Invalid JSON: {e}")
        
        try:
            parsed = AirdropBalanceResponse.model_validate(payload)
        except ValidationError as e:
            self.logger.warning(
                "balance_lookup_invalid_payload",
                wallet_address=wallet_address,
                errors=e.error_count(),
            )
            raise BalanceLookupError(wallet_address, "Invalid data structure")
        
        return WalletResult(
            wallet_address=wallet_address,
            balance=parsed.data.balance,
            claim=parsed.data.claim,
        )
    
    async def try_fetch_balance(self, wallet_address: str) -> Optional[WalletResult]:
        """Fetch one balance, logging and returning None if the lookup fails."""
        try:
            return await self.fetch_balance(wallet_address)
        except BalanceLookupError as e:
            self.logger.error(
                "balance_lookup_failed",
                wallet_address=wallet_address,
                error=e.reason,
            )
            return None
    
    async def fetch_balances(self, wallet_addresses: Iterable[str]) -> List[WalletResult]:
        """
        Fetch balances for many wallets concurrently.
        
        Every lookup runs at once unless max_concurrency is set, in which
        case at most that many requests are in flight. Waits for all
        lookups to settle. Failed lookups are left out; the order of the
        remaining results follows the input order. An error other than a
        failed lookup is re-raised once every lookup has finished.
        """
        if self.max_concurrency is not None:
            semaphore = asyncio.Semaphore(self.max_concurrency)
            
            async def bounded(address: str) -> Optional[WalletResult]:
                async with semaphore:
                    return await self.try_fetch_balance(address)
            
            tasks = [bounded(address) for address in wallet_addresses]
        else:
            tasks = [self.try_fetch_balance(address) for address in wallet_addresses]
        
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return [result for result in results if result is not None]
