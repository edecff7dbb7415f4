"""Endpoint and credential configuration for the FullContact client.

Architectural role:
    Centralizes endpoint selection, authentication mode and network settings for
    `fullcontact.client.transport`.

Resolution:
    Values come from the process environment (after `.env` loading) when built
    through `ClientConfig.from_env()`. Explicit constructor arguments bypass the
    environment entirely.

Failure behavior:
    Missing key material is represented as `None`. The transport still sends the
    request and the remote service reports the authorization failure.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from fullcontact import __version__

load_dotenv()

DEFAULT_ENDPOINT = "https://api.fullcontact.com/v2/"
DEFAULT_KEY_FILE = "config/fullcontact.key"
DEFAULT_USER_AGENT = f"fullcontact-python/{__version__}"
DEFAULT_TIMEOUT_SECONDS = 30.0

# `header` sends X-FullContact-APIKey, `query` sends apiKey=... in the URL.
AUTH_TYPES = ("header", "query")


def load_key(path):
    """Load the API key from environment override or key file.

    Resolution order:
        1. `FULLCONTACT_API_KEY` environment variable.
        2. Raw file contents at `path`.

    Args:
        path: Key file path or `None`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - Empty environment value falls through to the key file.
        - `None` path or missing file returns `None`.
        - Empty file returns `None`.
    """
    env_value = os.getenv("FULLCONTACT_API_KEY", "").strip()
    if env_value:
        return env_value
    if not path or not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None


@dataclass(frozen=True)
class ClientConfig:
    """Runtime configuration for `Transport`.

    Relevant environment variables (see `from_env`):
        - `FULLCONTACT_API_KEY` / `FULLCONTACT_KEY_FILE`
        - `FULLCONTACT_ENDPOINT`
        - `FULLCONTACT_AUTH_TYPE`
        - `FULLCONTACT_USER_AGENT`
        - `FULLCONTACT_TIMEOUT_SECONDS`
        - `FULLCONTACT_PROXY`
    """

    api_key: str | None = None
    endpoint: str = DEFAULT_ENDPOINT
    auth_type: str = "header"
    user_agent: str = DEFAULT_USER_AGENT
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    proxy: str | None = None

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build configuration from the current process environment."""
        return cls(
            api_key=load_key(os.getenv("FULLCONTACT_KEY_FILE", DEFAULT_KEY_FILE)),
            endpoint=os.getenv("FULLCONTACT_ENDPOINT", DEFAULT_ENDPOINT).strip(),
            auth_type=os.getenv("FULLCONTACT_AUTH_TYPE", "header").strip().lower(),
            user_agent=os.getenv("FULLCONTACT_USER_AGENT", DEFAULT_USER_AGENT).strip(),
            timeout_seconds=float(
                os.getenv("FULLCONTACT_TIMEOUT_SECONDS", str(DEFAULT_TIMEOUT_SECONDS))
            ),
            proxy=os.getenv("FULLCONTACT_PROXY") or None,
        )

    @property
    def proxies(self) -> dict[str, str] | None:
        """Return the `requests` proxies mapping, or `None` without a proxy."""
        if not self.proxy:
            return None
        return {"http": self.proxy, "https": self.proxy}
