from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3


def to_key(seed: str, index: int) -> bytes:
    """
    Derives a deterministic 32-byte private key from a seed and an index.

    The seed's UTF-8 bytes and the index's minimal big-endian hex digits are
    concatenated as one hex string, left-padded with a zero nibble when the
    digit count is odd, and hashed with Keccak-256. Keys derived by the demo
    flows depend on this exact layout.
    """
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")
    digits = seed.encode("utf-8").hex() + format(index, "x")
    if len(digits) % 2:
        digits = "0" + digits
    return bytes(Web3.keccak(hexstr=digits))


def derive_account(seed: str, index: int) -> LocalAccount:
    return Account.from_key(to_key(seed, index))
