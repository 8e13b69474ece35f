"""Access identity providers service."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from pydantic import BaseModel

from ..types.access import IdentityProvider

if TYPE_CHECKING:
    from .._http import HttpClient


def _body(identity_provider: Union[BaseModel, dict[str, Any]]) -> dict[str, Any]:
    if isinstance(identity_provider, BaseModel):
        return identity_provider.model_dump(mode="json", exclude_none=True)
    return dict(identity_provider)


class AccessIdentityProvidersService:
    """Manage Access identity providers (SAML, OIDC and OAuth logins) for an account.

    API reference: https://api.cloudflare.com/#access-identity-providers-properties
    """

    def __init__(self, http: HttpClient) -> None:
        self._http = http

    def list(self, account_id: str) -> list[IdentityProvider]:
        """List all identity providers configured on an account."""
        return self._http.get(
            f"/accounts/{account_id}/access/identity_providers",
            list[IdentityProvider],
            operation="list_identity_providers",
        )

    def get(self, account_id: str, identity_provider_id: str) -> IdentityProvider:
        """Get a single identity provider."""
        return self._http.get(
            f"/accounts/{account_id}/access/identity_providers/{identity_provider_id}",
            IdentityProvider,
            operation="get_identity_provider",
        )

    def create(self, account_id: str, identity_provider: Union[BaseModel, dict[str, Any]]) -> IdentityProvider:
        """Create an identity provider. Any ``id`` on the input is ignored by the API."""
        return self._http.post(
            f"/accounts/{account_id}/access/identity_providers",
            IdentityProvider,
            operation="create_identity_provider",
            json=_body(identity_provider),
        )

    def update(
        self,
        account_id: str,
        identity_provider_id: str,
        identity_provider: Union[BaseModel, dict[str, Any]],
    ) -> IdentityProvider:
        """Replace an identity provider with the full payload given."""
        return self._http.put(
            f"/accounts/{account_id}/access/identity_providers/{identity_provider_id}",
            IdentityProvider,
            operation="update_identity_provider",
            json=_body(identity_provider),
        )

    def delete(self, account_id: str, identity_provider_id: str) -> IdentityProvider:
        """Delete an identity provider and return the API's confirmation record."""
        return self._http.delete(
            f"/accounts/{account_id}/access/identity_providers/{identity_provider_id}",
            IdentityProvider,
            operation="delete_identity_provider",
        )
