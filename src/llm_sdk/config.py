# src/llm_sdk/config.py

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.openai.com/v1"
# Applied to every request, regardless of operation
TIMEOUT = 30.0
MAX_RETRIES = 3
USER_AGENT = "llm-sdk/0.1.0 (python)"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for LlmSdk.

    Immutable. Explicit. No magic defaults from environment
    (use ``from_env`` to opt in).
    """

    token: str = ""  # Empty means unauthenticated
    base_url: str = DEFAULT_BASE_URL
    max_retries: int = MAX_RETRIES

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        # frozen: bypass __setattr__ to normalize
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @classmethod
    def from_env(cls, max_retries: int = MAX_RETRIES) -> "ClientConfig":
        """Build a config from OPENAI_API_KEY and OPENAI_BASE_URL."""
        return cls(
            token=os.environ.get("OPENAI_API_KEY", ""),
            base_url=os.environ.get("OPENAI_BASE_URL", DEFAULT_BASE_URL),
            max_retries=max_retries,
        )
