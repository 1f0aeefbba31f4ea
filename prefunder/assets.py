from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from .chains import Chain
from .constants import (
    NATIVE_TESTNET_AMOUNT,
    NATIVE_MAINNET_AMOUNT,
    WETH_TESTNET_AMOUNT,
    WETH_MAINNET_AMOUNT,
    USDC_TESTNET_AMOUNT,
    USDC_MAINNET_AMOUNT,
)


class AssetKind(str, Enum):
    NATIVE = "native"
    WRAPPED_NATIVE = "wrapped_native"
    STABLECOIN = "stablecoin"


@dataclass(frozen=True)
class Asset:
    kind: AssetKind
    symbol: str
    decimals: int
    testnet_default: str
    mainnet_default: str

    def default_amount(self, chain: Chain) -> int:
        value = self.testnet_default if chain.testnet else self.mainnet_default
        return parse_units(value, self.decimals)


NATIVE = Asset(AssetKind.NATIVE, "ETH", 18, NATIVE_TESTNET_AMOUNT, NATIVE_MAINNET_AMOUNT)
WETH = Asset(AssetKind.WRAPPED_NATIVE, "WETH", 18, WETH_TESTNET_AMOUNT, WETH_MAINNET_AMOUNT)
USDC = Asset(AssetKind.STABLECOIN, "USDC", 6, USDC_TESTNET_AMOUNT, USDC_MAINNET_AMOUNT)


def parse_units(value: str, decimals: int) -> int:
    """
    Converts a decimal string into integer smallest units, e.g. ("0.1", 6) -> 100000.
    Raises ValueError when the value has more precision than `decimals`.
    """
    scaled = Decimal(value).scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise ValueError(f"{value} has more than {decimals} decimals")
    return int(scaled)


def resolve_amount(asset: Asset, chain: Chain, amount: Optional[int] = None) -> int:
    # A zero amount falls back to the default, same as an omitted one.
    if amount is not None and amount < 0:
        raise ValueError(f"amount must be non-negative, got {amount}")
    return amount if amount else asset.default_amount(chain)


def needs_funding(balance: int, amount: int) -> bool:
    """
    Binary gate: fund only when the balance is below half the nominal amount.
    This does not top up to an exact target.
    """
    return balance < amount // 2
