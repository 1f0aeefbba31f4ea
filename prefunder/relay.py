import logging
from typing import Union

from .chains import Chain
from .config import FunderConfig
from .constants import DEFAULT_CONFIRMATION_TIMEOUT, DEFAULT_POLL_LATENCY
from .core.account import FundingAccount
from .core.client import ChainClient

logger = logging.getLogger(__name__)


class TransactionRelay:
    """
    Submits arbitrary calldata from the funding account, e.g. a prepared
    account deployment or an entry point call, and waits for it to be mined.
    """
    def __init__(
        self,
        account: FundingAccount,
        confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
        poll_latency: float = DEFAULT_POLL_LATENCY,
    ):
        if confirmation_timeout <= 0:
            raise ValueError(f"confirmation_timeout must be positive, got {confirmation_timeout}")
        self.account = account
        self.confirmation_timeout = confirmation_timeout
        self.poll_latency = poll_latency

    @classmethod
    def from_config(cls, config: FunderConfig) -> "TransactionRelay":
        return cls(
            FundingAccount.from_config(config),
            confirmation_timeout=config.confirmation_timeout,
            poll_latency=config.poll_latency,
        )

    def relay(self, chain: Chain, to: str, data: Union[str, bytes]):
        client = ChainClient(
            self.account,
            chain,
            confirmation_timeout=self.confirmation_timeout,
            poll_latency=self.poll_latency,
        )
        tx_hash = client.send_transaction({"to": to, "data": data})
        logger.info(f"relaying transaction {tx_hash}")
        return client.wait_for_confirmation(tx_hash)
