import os
import unittest
from unittest.mock import patch

from eth_account import Account

from prefunder.config import FunderConfig
from prefunder.core.account import FundingAccount
from prefunder.errors import MissingConfigurationError

TEST_KEY = "0x4c0883a69102937d6231471b5dbb6204fe5129617082792ae468d01a3f362318"

FULL_ENV = {
    "FUNDING_PRIVATE_KEY": TEST_KEY,
    "RHINESTONE_API_KEY": "rhinestone-key",
    "PIMLICO_API_KEY": "pimlico-key",
}


@patch("prefunder.config.load_dotenv")
class TestFunderConfig(unittest.TestCase):
    def test_from_env(self, mock_load_dotenv):
        with patch.dict(os.environ, FULL_ENV, clear=True):
            config = FunderConfig.from_env()
        mock_load_dotenv.assert_called_once()
        self.assertEqual(config.funding_private_key, TEST_KEY)
        self.assertEqual(config.rhinestone_api_key, "rhinestone-key")
        self.assertEqual(config.pimlico_api_key, "pimlico-key")
        self.assertEqual(config.confirmation_timeout, 120.0)
        self.assertEqual(config.log_level, "INFO")

    def test_vite_prefixed_fallback(self, mock_load_dotenv):
        env = {f"VITE_{name}": value for name, value in FULL_ENV.items()}
        with patch.dict(os.environ, env, clear=True):
            config = FunderConfig.from_env()
        self.assertEqual(config.funding_private_key, TEST_KEY)
        self.assertEqual(config.pimlico_api_key, "pimlico-key")

    def test_unprefixed_name_wins(self, mock_load_dotenv):
        env = dict(FULL_ENV, VITE_PIMLICO_API_KEY="other")
        with patch.dict(os.environ, env, clear=True):
            config = FunderConfig.from_env()
        self.assertEqual(config.pimlico_api_key, "pimlico-key")

    def test_overrides(self, mock_load_dotenv):
        env = dict(FULL_ENV, CONFIRMATION_TIMEOUT="30", POLL_LATENCY="0.5", LOG_LEVEL="DEBUG")
        with patch.dict(os.environ, env, clear=True):
            config = FunderConfig.from_env()
        self.assertEqual(config.confirmation_timeout, 30.0)
        self.assertEqual(config.poll_latency, 0.5)
        self.assertEqual(config.log_level, "DEBUG")

    def test_all_missing_secrets_reported(self, mock_load_dotenv):
        with patch.dict(os.environ, {"RHINESTONE_API_KEY": "x"}, clear=True):
            with self.assertRaises(MissingConfigurationError) as ctx:
                FunderConfig.from_env()
        self.assertEqual(ctx.exception.missing, ["FUNDING_PRIVATE_KEY", "PIMLICO_API_KEY"])
        self.assertIn("FUNDING_PRIVATE_KEY is not set", str(ctx.exception))

    def test_invalid_timeout(self, mock_load_dotenv):
        config = FunderConfig(confirmation_timeout=0, **{k.lower(): v for k, v in FULL_ENV.items()})
        with self.assertRaises(ValueError):
            config.validate()


class TestFundingAccount(unittest.TestCase):
    def test_from_config(self):
        config = FunderConfig(
            funding_private_key=TEST_KEY,
            rhinestone_api_key="r",
            pimlico_api_key="p",
        )
        account = FundingAccount.from_config(config)
        self.assertEqual(account.address, Account.from_key(TEST_KEY).address)

    def test_from_config_requires_key(self):
        with self.assertRaises(MissingConfigurationError):
            FundingAccount.from_config(FunderConfig(rhinestone_api_key="r", pimlico_api_key="p"))

    def test_nonce_lock_per_chain(self):
        account = FundingAccount(TEST_KEY)
        self.assertIs(account.nonce_lock(1), account.nonce_lock(1))
        self.assertIsNot(account.nonce_lock(1), account.nonce_lock(10))

    def test_nonce_lock_shared_by_key(self):
        first = FundingAccount(TEST_KEY)
        second = FundingAccount(TEST_KEY)
        other = FundingAccount("0x" + "11" * 32)
        self.assertIs(first.nonce_lock(8453), second.nonce_lock(8453))
        self.assertIsNot(first.nonce_lock(8453), other.nonce_lock(8453))


if __name__ == '__main__':
    unittest.main()
