from .config import FunderConfig
from .errors import (
    PrefunderError,
    UnsupportedChainError,
    MissingConfigurationError,
    TransactionFailedError,
    ConfirmationTimeout,
    InsufficientFundingBalanceError,
)
from .chains import (
    Chain,
    ChainConfig,
    CHAIN_REGISTRY,
    SEPOLIA,
    BASE_SEPOLIA,
    ARBITRUM_SEPOLIA,
    OPTIMISM_SEPOLIA,
    BASE,
    ARBITRUM,
    OPTIMISM,
    get_chain,
    get_chain_config,
    get_usdc_address,
    get_weth_address,
    get_transport,
)
from .keys import to_key, derive_account
from .core.account import FundingAccount
from .core.client import ChainClient
from .funder import Funder
from .relay import TransactionRelay
from .logging_config import setup_logging

__all__ = [
    "FunderConfig",
    "PrefunderError",
    "UnsupportedChainError",
    "MissingConfigurationError",
    "TransactionFailedError",
    "ConfirmationTimeout",
    "InsufficientFundingBalanceError",
    "Chain",
    "ChainConfig",
    "CHAIN_REGISTRY",
    "SEPOLIA",
    "BASE_SEPOLIA",
    "ARBITRUM_SEPOLIA",
    "OPTIMISM_SEPOLIA",
    "BASE",
    "ARBITRUM",
    "OPTIMISM",
    "get_chain",
    "get_chain_config",
    "get_usdc_address",
    "get_weth_address",
    "get_transport",
    "to_key",
    "derive_account",
    "FundingAccount",
    "ChainClient",
    "Funder",
    "TransactionRelay",
    "setup_logging",
]
