from typing import List, Optional


class PrefunderError(Exception):
    """Base class for every failure raised by prefunder."""


class UnsupportedChainError(PrefunderError):
    """Raised when a chain id has no entry in the chain registry."""
    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"Unsupported chain: {chain_id}")


class MissingConfigurationError(PrefunderError):
    """Raised at startup when required secrets are absent."""
    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            "Configuration validation failed:\n" + "\n".join(f"- {name} is not set" for name in self.missing)
        )


class TransactionFailedError(PrefunderError):
    """Raised when a transaction cannot be sent or does not succeed on-chain."""
    def __init__(self, message: str, tx_hash: Optional[str] = None):
        self.tx_hash = tx_hash
        super().__init__(message)


class ConfirmationTimeout(TransactionFailedError):
    """Raised when a submitted transaction is not mined within the confirmation timeout."""
    def __init__(self, tx_hash: str, timeout: float):
        self.timeout = timeout
        super().__init__(f"Transaction {tx_hash} not mined within {timeout} seconds", tx_hash=tx_hash)


class InsufficientFundingBalanceError(PrefunderError):
    """Raised when the funding account cannot cover a transfer."""
    def __init__(self, asset: str, required: int, available: int):
        self.asset = asset
        self.required = required
        self.available = available
        super().__init__(f"Funding account holds {available} {asset}, needs {required}")
