import os

# Defaults for the funding flows.
# Override with environment variables where a deployment needs different endpoints.

# --- RPC ---
SEPOLIA_RPC_URL = os.getenv("SEPOLIA_RPC_URL", "https://ethereum-sepolia-rpc.publicnode.com")
RPC_REQUEST_TIMEOUT = int(os.getenv("RPC_REQUEST_TIMEOUT", "30"))

# --- CONFIRMATIONS ---
DEFAULT_CONFIRMATION_TIMEOUT = 120.0
DEFAULT_POLL_LATENCY = 0.1

# --- FUNDING AMOUNTS (decimal strings, parsed per asset precision) ---
NATIVE_TESTNET_AMOUNT = "0.001"
NATIVE_MAINNET_AMOUNT = "0.00005"
WETH_TESTNET_AMOUNT = "0.002"
WETH_MAINNET_AMOUNT = "0.00022"
USDC_TESTNET_AMOUNT = "0.1"
USDC_MAINNET_AMOUNT = "1"
