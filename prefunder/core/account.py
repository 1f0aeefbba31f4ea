import threading
from typing import Dict, Tuple

from eth_account import Account

from ..config import FunderConfig

# Shared by every FundingAccount built from the same key, keyed by (address, chain id).
_NONCE_LOCKS: Dict[Tuple[str, int], threading.Lock] = {}
_NONCE_LOCKS_GUARD = threading.Lock()


class FundingAccount:
    """
    The single account that pays for every funding and relay transaction.
    Built once at startup and passed to every operation.

    Transactions from the same account on the same chain race on nonce
    assignment, so each (address, chain id) pair gets one process-wide lock
    that senders hold from the nonce read until the raw transaction is
    submitted. Two instances holding the same key share those locks.
    """
    def __init__(self, private_key: str):
        self._account = Account.from_key(private_key)
        self.address = self._account.address

    @classmethod
    def from_config(cls, config: FunderConfig) -> "FundingAccount":
        config.validate()
        return cls(config.funding_private_key)

    def nonce_lock(self, chain_id: int) -> threading.Lock:
        key = (self.address, chain_id)
        with _NONCE_LOCKS_GUARD:
            lock = _NONCE_LOCKS.get(key)
            if lock is None:
                lock = _NONCE_LOCKS[key] = threading.Lock()
            return lock

    def sign_transaction(self, tx: dict):
        return self._account.sign_transaction(tx)

    def __repr__(self) -> str:
        return f"FundingAccount({self.address})"
