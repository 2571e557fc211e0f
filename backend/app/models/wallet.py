"""Wallet models."""
from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt
from typing import Dict, List, Optional, Union


class AirdropBalanceData(BaseModel):
    """Balance details returned by the airdrop API for one wallet."""
    balance: Union[StrictInt, StrictFloat] = Field(..., description="Airdrop balance")
    claim: StrictBool = Field(..., description="Whether the airdrop was already claimed")
    multiplier: Optional[float] = None
    extra: Optional[float] = None
    rules: Optional[Dict[str, float]] = None


class AirdropBalanceResponse(BaseModel):
    """Envelope returned by the airdrop API."""
    code: Optional[int] = None
    message: Optional[str] = None
    data: AirdropBalanceData


class WalletResult(BaseModel):
    """Balance record for a single wallet."""
    model_config = ConfigDict(populate_by_name=True)
    
    wallet_address: str = Field(..., alias="walletAddress")
    balance: Union[int, float]
    claim: bool


class ProcessWalletsResponse(BaseModel):
    """Response model for wallet processing."""
    model_config = ConfigDict(populate_by_name=True)
    
    filtered_wallets: List[WalletResult] = Field(default_factory=list, alias="filteredWallets")
    total_balance: Union[int, float] = Field(default=0, alias="totalBalance")


class ErrorResponse(BaseModel):
    """Error body returned on any non-200 status."""
    message: str
