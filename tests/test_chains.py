import unittest

from web3 import Web3

from prefunder.chains import (
    CHAIN_REGISTRY,
    CHAINS,
    SEPOLIA,
    BASE,
    BASE_SEPOLIA,
    ARBITRUM,
    OPTIMISM,
    Chain,
    get_chain,
    get_chain_config,
    get_rpc_url,
    get_transport,
    get_usdc_address,
    get_weth_address,
)
from prefunder.errors import UnsupportedChainError

ETHEREUM_MAINNET = Chain(id=1, name="ethereum", testnet=False, rpc_url="https://eth.merkle.io")


class TestChainRegistry(unittest.TestCase):
    def test_every_known_chain_is_registered(self):
        self.assertEqual(set(CHAINS), set(CHAIN_REGISTRY))
        for chain_id, config in CHAIN_REGISTRY.items():
            self.assertEqual(config.chain_id, chain_id)

    def test_supported_chains_have_addresses(self):
        for chain in CHAINS.values():
            usdc = get_usdc_address(chain)
            weth = get_weth_address(chain)
            self.assertTrue(Web3.is_checksum_address(usdc), chain.name)
            self.assertTrue(Web3.is_checksum_address(weth), chain.name)
            self.assertNotEqual(usdc, weth)

    def test_known_addresses(self):
        self.assertEqual(get_usdc_address(SEPOLIA), "0x1c7D4B196Cb0C7B01d743Fbc6116a902379C7238")
        self.assertEqual(get_usdc_address(BASE_SEPOLIA), "0x036CbD53842c5426634e7929541eC2318f3dCF7e")
        self.assertEqual(get_usdc_address(BASE), "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913")
        self.assertEqual(get_weth_address(ARBITRUM), "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1")
        self.assertEqual(get_weth_address(OPTIMISM), "0x4200000000000000000000000000000000000006")

    def test_unsupported_chain(self):
        with self.assertRaises(UnsupportedChainError) as ctx:
            get_chain_config(ETHEREUM_MAINNET)
        self.assertEqual(ctx.exception.chain_id, 1)

        with self.assertRaises(UnsupportedChainError):
            get_usdc_address(ETHEREUM_MAINNET)
        with self.assertRaises(UnsupportedChainError):
            get_weth_address(ETHEREUM_MAINNET)
        with self.assertRaises(UnsupportedChainError):
            get_transport(ETHEREUM_MAINNET)

    def test_get_chain_by_id(self):
        self.assertIs(get_chain(84532), BASE_SEPOLIA)
        with self.assertRaises(UnsupportedChainError):
            get_chain(1)

    def test_lookup_uses_id_only(self):
        custom = Chain(id=SEPOLIA.id, name="my-sepolia", testnet=True, rpc_url="http://localhost:8545")
        self.assertEqual(get_weth_address(custom), get_weth_address(SEPOLIA))

    def test_sepolia_uses_public_rpc_override(self):
        self.assertEqual(get_rpc_url(SEPOLIA), "https://ethereum-sepolia-rpc.publicnode.com")
        provider = get_transport(SEPOLIA)
        self.assertEqual(provider.endpoint_uri, "https://ethereum-sepolia-rpc.publicnode.com")

    def test_other_chains_use_their_default_rpc(self):
        for chain in CHAINS.values():
            if chain.id == SEPOLIA.id:
                continue
            self.assertEqual(get_transport(chain).endpoint_uri, chain.rpc_url)


if __name__ == '__main__':
    unittest.main()
