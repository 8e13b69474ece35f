"""Client configuration.

Values come from keyword arguments or from the environment:

  CLOUDFLARE_API_TOKEN   scoped API token (preferred)
  CLOUDFLARE_API_KEY     global API key, used together with CLOUDFLARE_API_EMAIL
  CLOUDFLARE_API_EMAIL
  CLOUDFLARE_BASE_URL    defaults to https://api.cloudflare.com/client/v4
  CLOUDFLARE_TIMEOUT     request timeout in seconds
"""

from __future__ import annotations

from typing import Optional

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"
DEFAULT_TIMEOUT = 30.0
DEFAULT_USER_AGENT = "cfapi-python/0.1.0"


class Settings(BaseSettings):
    """Immutable connection settings shared by every request of a client."""

    model_config = SettingsConfigDict(
        env_prefix="CLOUDFLARE_",
        env_ignore_empty=True,
        frozen=True,
    )

    base_url: str = DEFAULT_BASE_URL
    api_token: Optional[SecretStr] = None
    api_key: Optional[SecretStr] = None
    api_email: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = DEFAULT_USER_AGENT

    @model_validator(mode="after")
    def _check_credentials(self) -> Settings:
        if self.api_token is None and not (self.api_key is not None and self.api_email):
            raise ValueError("either api_token or both api_key and api_email are required")
        return self

    def auth_headers(self) -> dict[str, str]:
        if self.api_token is not None:
            return {"Authorization": f"Bearer {self.api_token.get_secret_value()}"}
        headers: dict[str, str] = {}
        if self.api_key is not None:
            headers["X-Auth-Key"] = self.api_key.get_secret_value()
        if self.api_email:
            headers["X-Auth-Email"] = self.api_email
        return headers

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from ``CLOUDFLARE_*`` environment variables only."""
        return cls()

    def __repr__(self) -> str:
        return f"Settings(base_url={self.base_url!r}, timeout={self.timeout})"
