import logging
from typing import List, Optional

from web3 import Web3

from .assets import Asset, NATIVE, USDC, WETH, needs_funding, resolve_amount
from .chains import Chain, get_usdc_address, get_weth_address
from .config import FunderConfig
from .constants import DEFAULT_CONFIRMATION_TIMEOUT, DEFAULT_POLL_LATENCY
from .core.account import FundingAccount
from .core.client import ChainClient

logger = logging.getLogger(__name__)


class Funder:
    """
    Tops up test accounts from the funding account.

    Each operation reads the target's balance of one asset and sends the full
    funding amount only when that balance is below half of it. Every transfer
    is confirmed before the operation returns. Nothing is retried.
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
    def from_config(cls, config: FunderConfig) -> "Funder":
        return cls(
            FundingAccount.from_config(config),
            confirmation_timeout=config.confirmation_timeout,
            poll_latency=config.poll_latency,
        )

    def _client(self, chain: Chain) -> ChainClient:
        return ChainClient(
            self.account,
            chain,
            confirmation_timeout=self.confirmation_timeout,
            poll_latency=self.poll_latency,
        )

    def _gate(self, asset: Asset, chain: Chain, target: str, balance: int, amount: int) -> bool:
        if needs_funding(balance, amount):
            logger.info(f"Funding {target} with {amount} {asset.symbol} on {chain.name} (balance={balance})")
            return True
        logger.info(
            f"Skipping {asset.symbol} for {target} on {chain.name}: balance {balance} >= threshold {amount // 2}"
        )
        return False

    def fund_native(self, chain: Chain, target: str, amount: Optional[int] = None) -> List[dict]:
        """
        Sends native currency to `target` if it holds less than half of `amount`.
        Returns the receipts of the transactions sent (empty when skipped).
        """
        client = self._client(chain)
        target = Web3.to_checksum_address(target)
        fund_amount = resolve_amount(NATIVE, chain, amount)

        balance = client.get_balance(target)
        if not self._gate(NATIVE, chain, target, balance, fund_amount):
            return []

        return [client.submit_and_wait({"to": target, "value": fund_amount})]

    def fund_wrapped_native(self, chain: Chain, target: str, amount: Optional[int] = None) -> List[dict]:
        """
        Wraps native currency into WETH from the funding account, then
        transfers it to `target`. The transfer is only built once the deposit
        is confirmed.
        """
        client = self._client(chain)
        target = Web3.to_checksum_address(target)
        weth_address = get_weth_address(chain)
        fund_amount = resolve_amount(WETH, chain, amount)

        balance = client.token_balance(weth_address, target)
        if not self._gate(WETH, chain, target, balance, fund_amount):
            return []

        wrap_receipt = client.submit_and_wait({
            "to": weth_address,
            "data": client.encode_call(weth_address, "WETH9", "deposit"),
            "value": fund_amount,
        })
        transfer_receipt = client.submit_and_wait({
            "to": weth_address,
            "data": client.encode_call(weth_address, "WETH9", "transfer", [target, fund_amount]),
        })
        return [wrap_receipt, transfer_receipt]

    def fund_stablecoin(self, chain: Chain, target: str, amount: Optional[int] = None) -> List[dict]:
        """
        Transfers USDC to `target` if it holds less than half of `amount`.
        """
        client = self._client(chain)
        target = Web3.to_checksum_address(target)
        usdc_address = get_usdc_address(chain)
        fund_amount = resolve_amount(USDC, chain, amount)

        balance = client.token_balance(usdc_address, target)
        if not self._gate(USDC, chain, target, balance, fund_amount):
            return []

        client.require_token_balance(usdc_address, USDC.symbol, fund_amount)
        return [client.submit_and_wait({
            "to": usdc_address,
            "data": client.encode_call(usdc_address, "ERC20", "transfer", [target, fund_amount]),
        })]
