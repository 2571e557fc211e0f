"""Custom error classes."""


class AirdropCheckerError(Exception):
    """Base exception for the airdrop checker application."""
    pass


class WalletInputError(AirdropCheckerError):
    """The request did not carry a usable list of wallets."""
    
    def __init__(self, message: str = "Invalid input format"):
        super().__init__(message)
        self.message = message


class NoValidWalletsError(WalletInputError):
    """No submitted entry is a valid wallet address."""
    
    def __init__(self, message: str = "No valid wallets provided"):
        super().__init__(message)


class BalanceLookupError(AirdropCheckerError):
    """Error fetching or reading the airdrop balance of a single wallet."""
    
    def __init__(self, wallet_address: str, reason: str):
        super().__init__(f"{wallet_address}: {reason}")
        self.wallet_address = wallet_address
        self.reason = reason
