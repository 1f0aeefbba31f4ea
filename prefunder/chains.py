from dataclasses import dataclass
from typing import Dict, Optional

from web3 import Web3

from .constants import SEPOLIA_RPC_URL, RPC_REQUEST_TIMEOUT
from .errors import UnsupportedChainError


@dataclass(frozen=True)
class Chain:
    id: int
    name: str
    testnet: bool
    rpc_url: str


@dataclass(frozen=True)
class ChainConfig:
    """
    Network-specific constants for a supported chain.
    rpc_url_override replaces the chain's own default endpoint when set.
    """
    chain_id: int
    usdc_address: str
    weth_address: str
    rpc_url_override: Optional[str] = None


SEPOLIA = Chain(id=11155111, name="sepolia", testnet=True, rpc_url="https://sepolia.drpc.org")
BASE_SEPOLIA = Chain(id=84532, name="base-sepolia", testnet=True, rpc_url="https://sepolia.base.org")
ARBITRUM_SEPOLIA = Chain(
    id=421614, name="arbitrum-sepolia", testnet=True, rpc_url="https://sepolia-rollup.arbitrum.io/rpc"
)
OPTIMISM_SEPOLIA = Chain(id=11155420, name="optimism-sepolia", testnet=True, rpc_url="https://sepolia.optimism.io")
BASE = Chain(id=8453, name="base", testnet=False, rpc_url="https://mainnet.base.org")
ARBITRUM = Chain(id=42161, name="arbitrum", testnet=False, rpc_url="https://arb1.arbitrum.io/rpc")
OPTIMISM = Chain(id=10, name="optimism", testnet=False, rpc_url="https://mainnet.optimism.io")

CHAINS: Dict[int, Chain] = {
    chain.id: chain
    for chain in (SEPOLIA, BASE_SEPOLIA, ARBITRUM_SEPOLIA, OPTIMISM_SEPOLIA, BASE, ARBITRUM, OPTIMISM)
}

# OP Stack chains share the predeploy WETH address.
_OP_STACK_WETH = "0x4200000000000000000000000000000000000006"

CHAIN_REGISTRY: Dict[int, ChainConfig] = {
    SEPOLIA.id: ChainConfig(
        chain_id=SEPOLIA.id,
        usdc_address="0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238",
        weth_address="0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14",
        rpc_url_override=SEPOLIA_RPC_URL,
    ),
    BASE_SEPOLIA.id: ChainConfig(
        chain_id=BASE_SEPOLIA.id,
        usdc_address="0x036cbd53842c5426634e7929541ec2318f3dcf7e",
        weth_address=_OP_STACK_WETH,
    ),
    ARBITRUM_SEPOLIA.id: ChainConfig(
        chain_id=ARBITRUM_SEPOLIA.id,
        usdc_address="0x75faf114eafb1BDbe2F0316DF893fd58CE46AA4d",
        weth_address="0x980B62Da83eFf3D4576C647993b0c1D7faf17c73",
    ),
    OPTIMISM_SEPOLIA.id: ChainConfig(
        chain_id=OPTIMISM_SEPOLIA.id,
        usdc_address="0x5fd84259d66Cd46123540766Be93DFE6D43130D7",
        weth_address=_OP_STACK_WETH,
    ),
    BASE.id: ChainConfig(
        chain_id=BASE.id,
        usdc_address="0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
        weth_address=_OP_STACK_WETH,
    ),
    ARBITRUM.id: ChainConfig(
        chain_id=ARBITRUM.id,
        usdc_address="0xaf88d065e77c8cC2239327C5EDb3A432268e5831",
        weth_address="0x82aF49447D8a07e3bd95BD0d56f35241523fBab1",
    ),
    OPTIMISM.id: ChainConfig(
        chain_id=OPTIMISM.id,
        usdc_address="0x0b2c639c533813f4aa9d7837caf62653d097ff85",
        weth_address=_OP_STACK_WETH,
    ),
}


def get_chain(chain_id: int) -> Chain:
    try:
        return CHAINS[chain_id]
    except KeyError:
        raise UnsupportedChainError(chain_id) from None


def get_chain_config(chain: Chain) -> ChainConfig:
    try:
        return CHAIN_REGISTRY[chain.id]
    except KeyError:
        raise UnsupportedChainError(chain.id) from None


def get_usdc_address(chain: Chain) -> str:
    return Web3.to_checksum_address(get_chain_config(chain).usdc_address)


def get_weth_address(chain: Chain) -> str:
    return Web3.to_checksum_address(get_chain_config(chain).weth_address)


def get_rpc_url(chain: Chain) -> str:
    config = get_chain_config(chain)
    return config.rpc_url_override or chain.rpc_url


def get_transport(chain: Chain) -> Web3.HTTPProvider:
    """
    Returns the HTTP provider used for every call made against `chain`.
    """
    return Web3.HTTPProvider(get_rpc_url(chain), request_kwargs={"timeout": RPC_REQUEST_TIMEOUT})
