import logging
from typing import Any, Dict, List, Optional

import requests
from web3 import Web3
from web3.exceptions import TimeExhausted, Web3Exception

from ..chains import Chain, get_chain_config, get_transport
from ..constants import DEFAULT_CONFIRMATION_TIMEOUT, DEFAULT_POLL_LATENCY
from ..contracts import load_abi
from ..errors import ConfirmationTimeout, InsufficientFundingBalanceError, TransactionFailedError
from .account import FundingAccount

logger = logging.getLogger(__name__)

_SEND_ERRORS = (Web3Exception, requests.exceptions.RequestException)


class ChainClient:
    """
    One connection from the funding account to one chain.

    Every transaction goes through `send_transaction` and `wait_for_confirmation`
    so that nonce handling, the balance preflight and failure reporting are the
    same for every funding and relay path.
    """
    def __init__(
        self,
        account: FundingAccount,
        chain: Chain,
        confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT,
        poll_latency: float = DEFAULT_POLL_LATENCY,
        w3: Optional[Web3] = None,
    ):
        if confirmation_timeout <= 0:
            raise ValueError(f"confirmation_timeout must be positive, got {confirmation_timeout}")
        self.account = account
        self.chain = chain
        self.chain_config = get_chain_config(chain)
        self.confirmation_timeout = confirmation_timeout
        self.poll_latency = poll_latency
        self.w3 = w3 or Web3(get_transport(chain))

    # --- READS ---
    def get_balance(self, address: str) -> int:
        return self.w3.eth.get_balance(Web3.to_checksum_address(address))

    def contract(self, address: str, abi_name: str = "ERC20"):
        return self.w3.eth.contract(address=Web3.to_checksum_address(address), abi=load_abi(abi_name))

    def token_balance(self, token: str, owner: str) -> int:
        return self.contract(token).functions.balanceOf(Web3.to_checksum_address(owner)).call()

    def encode_call(self, address: str, abi_name: str, fn_name: str, args: Optional[List[Any]] = None) -> str:
        return self.contract(address, abi_name).encode_abi(fn_name, args=args or [])

    def require_token_balance(self, token: str, symbol: str, amount: int) -> None:
        available = self.token_balance(token, self.account.address)
        if available < amount:
            raise InsufficientFundingBalanceError(symbol, amount, available)

    # --- WRITES ---
    def send_transaction(self, tx: Dict[str, Any]) -> str:
        """
        Fills in nonce, gas and chain id, signs with the funding account and
        submits. Holds the account's nonce lock for this chain until the raw
        transaction is accepted by the node, not until it is mined.
        Returns the transaction hash as a hex string.
        """
        tx = dict(tx)
        tx["to"] = Web3.to_checksum_address(tx["to"])
        tx["from"] = self.account.address
        tx["chainId"] = self.chain.id

        with self.account.nonce_lock(self.chain.id):
            available = self.w3.eth.get_balance(self.account.address)
            value = tx.get("value", 0)
            if available < value:
                raise InsufficientFundingBalanceError("ETH", value, available)

            try:
                tx["nonce"] = self.w3.eth.get_transaction_count(self.account.address, "pending")
                tx["gasPrice"] = self.w3.eth.gas_price
                tx["gas"] = self.w3.eth.estimate_gas(tx)
            except _SEND_ERRORS as e:
                logger.error(f"Could not prepare transaction to {tx['to']} on {self.chain.name}: {e}")
                raise TransactionFailedError(f"Could not prepare transaction to {tx['to']}: {e}") from e

            required = value + tx["gas"] * tx["gasPrice"]
            if available < required:
                raise InsufficientFundingBalanceError("ETH", required, available)

            signed_tx = self.account.sign_transaction(tx)
            try:
                tx_hash = self.w3.eth.send_raw_transaction(signed_tx.raw_transaction)
            except _SEND_ERRORS as e:
                logger.error(f"Sending transaction to {tx['to']} on {self.chain.name} failed: {e}")
                raise TransactionFailedError(f"Could not send transaction to {tx['to']}: {e}") from e

        tx_hash = Web3.to_hex(tx_hash)
        logger.debug(
            f"Submitted {tx_hash} on {self.chain.name} (nonce={tx['nonce']})",
            extra={"tx_context": {"chain_id": self.chain.id, "tx_hash": tx_hash}},
        )
        return tx_hash

    def wait_for_confirmation(self, tx_hash: str):
        """
        Blocks until `tx_hash` is mined. A reverted receipt raises
        TransactionFailedError; no receipt within the timeout raises
        ConfirmationTimeout.
        """
        try:
            receipt = self.w3.eth.wait_for_transaction_receipt(
                tx_hash, timeout=self.confirmation_timeout, poll_latency=self.poll_latency
            )
        except TimeExhausted as e:
            logger.error(f"Timed out waiting for {tx_hash} on {self.chain.name}")
            raise ConfirmationTimeout(tx_hash, self.confirmation_timeout) from e
        except _SEND_ERRORS as e:
            logger.error(f"Polling receipt for {tx_hash} on {self.chain.name} failed: {e}")
            raise TransactionFailedError(f"Could not confirm transaction {tx_hash}: {e}", tx_hash=tx_hash) from e

        if receipt.get("status") != 1:
            logger.error(
                f"Transaction {tx_hash} reverted on {self.chain.name}",
                extra={"tx_context": {"chain_id": self.chain.id, "tx_hash": tx_hash}},
            )
            raise TransactionFailedError(
                f"Transaction {tx_hash} reverted in block {receipt.get('blockNumber')}", tx_hash=tx_hash
            )
        return receipt

    def submit_and_wait(self, tx: Dict[str, Any]):
        return self.wait_for_confirmation(self.send_transaction(tx))
