"""cfapi client."""

from __future__ import annotations

from typing import Any, Optional, Union

import httpx
from pydantic import BaseModel

from ._http import HttpClient
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings
from .services import AccessIdentityProvidersService, SpectrumService
from .types.access import IdentityProvider
from .types.spectrum import SpectrumApp


class CloudflareClient:
    """Main client for the Cloudflare v4 API.

    Usage:
        client = CloudflareClient(api_token="...")
        providers = client.list_identity_providers("account-id")
        app = client.get_spectrum_app("zone-id", "app-id")

    Every account or zone identifier is passed per call; the client holds only
    its immutable settings and connection pool, so one instance can be shared
    between threads.
    """

    def __init__(
        self,
        api_token: Optional[str] = None,
        *,
        api_key: Optional[str] = None,
        api_email: Optional[str] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        if settings is None:
            settings = Settings(
                api_token=api_token,
                api_key=api_key,
                api_email=api_email,
                base_url=base_url,
                timeout=timeout,
            )
        self.settings = settings
        self._http = HttpClient(settings, http_client)
        self.access_identity_providers = AccessIdentityProvidersService(self._http)
        self.spectrum = SpectrumService(self._http)

    @classmethod
    def from_env(cls, http_client: Optional[httpx.Client] = None) -> CloudflareClient:
        """Build a client from ``CLOUDFLARE_*`` environment variables."""
        return cls(settings=Settings.from_env(), http_client=http_client)

    # --- Access identity providers ---

    def list_identity_providers(self, account_id: str) -> list[IdentityProvider]:
        return self.access_identity_providers.list(account_id)

    def get_identity_provider(self, account_id: str, identity_provider_id: str) -> IdentityProvider:
        return self.access_identity_providers.get(account_id, identity_provider_id)

    def create_identity_provider(
        self, account_id: str, identity_provider: Union[BaseModel, dict[str, Any]]
    ) -> IdentityProvider:
        return self.access_identity_providers.create(account_id, identity_provider)

    def update_identity_provider(
        self,
        account_id: str,
        identity_provider_id: str,
        identity_provider: Union[BaseModel, dict[str, Any]],
    ) -> IdentityProvider:
        return self.access_identity_providers.update(account_id, identity_provider_id, identity_provider)

    def delete_identity_provider(self, account_id: str, identity_provider_id: str) -> IdentityProvider:
        return self.access_identity_providers.delete(account_id, identity_provider_id)

    # --- Spectrum ---

    def get_spectrum_app(self, zone_id: str, app_id: str) -> SpectrumApp:
        return self.spectrum.get(zone_id, app_id)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._http.close()

    def __enter__(self) -> CloudflareClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"CloudflareClient(base_url={self.settings.base_url!r})"
