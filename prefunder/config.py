import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from .constants import DEFAULT_CONFIRMATION_TIMEOUT, DEFAULT_POLL_LATENCY
from .errors import MissingConfigurationError


def _getenv(name: str) -> Optional[str]:
    # The demo front-end exposes the same secrets with a VITE_ prefix.
    return os.getenv(name) or os.getenv(f"VITE_{name}")


@dataclass
class FunderConfig:
    """
    Startup configuration for the funding utility.

    Required:
    - funding_private_key: key of the account that pays for every transaction
    - rhinestone_api_key, pimlico_api_key: not used by the funding flows, but the
      surrounding application cannot run without them, so they are checked here

    Optional:
    - confirmation_timeout: seconds to wait for a receipt before giving up
    - poll_latency: seconds between receipt polls
    """

    funding_private_key: Optional[str] = None
    rhinestone_api_key: Optional[str] = None
    pimlico_api_key: Optional[str] = None

    confirmation_timeout: float = DEFAULT_CONFIRMATION_TIMEOUT
    poll_latency: float = DEFAULT_POLL_LATENCY
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "FunderConfig":
        load_dotenv()
        config = cls(
            funding_private_key=_getenv("FUNDING_PRIVATE_KEY"),
            rhinestone_api_key=_getenv("RHINESTONE_API_KEY"),
            pimlico_api_key=_getenv("PIMLICO_API_KEY"),
            confirmation_timeout=float(os.getenv("CONFIRMATION_TIMEOUT", DEFAULT_CONFIRMATION_TIMEOUT)),
            poll_latency=float(os.getenv("POLL_LATENCY", DEFAULT_POLL_LATENCY)),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
        config.validate()
        return config

    def validate(self) -> None:
        missing = []
        if not self.funding_private_key:
            missing.append("FUNDING_PRIVATE_KEY")
        if not self.rhinestone_api_key:
            missing.append("RHINESTONE_API_KEY")
        if not self.pimlico_api_key:
            missing.append("PIMLICO_API_KEY")
        if missing:
            raise MissingConfigurationError(missing)
        if self.confirmation_timeout <= 0:
            raise ValueError("confirmation_timeout must be positive")
