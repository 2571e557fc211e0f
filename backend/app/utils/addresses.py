"""Wallet address validation helpers."""
import re
from typing import Any, Iterable, List

# 20-byte EVM address: 0x followed by 40 hex digits
WALLET_ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")


def is_valid_wallet(value: Any) -> bool:
    """Return True if value is a string holding a well-formed wallet address."""
    if not isinstance(value, str):
        return False
    return WALLET_ADDRESS_PATTERN.fullmatch(value) is not None


def filter_valid_wallets(values: Iterable[Any]) -> List[str]:
    """Keep only valid wallet addresses, in input order."""
    return [value for value in values if is_valid_wallet(value)]


def parse_wallet_input(text: str) -> List[str]:
    """
    Split pasted text into wallet entries.
    
    One entry per line; surrounding whitespace is stripped and blank
    lines are dropped. Entries are not validated here.
    """
    return [line.strip() for line in text.split("\n") if line.strip()]
