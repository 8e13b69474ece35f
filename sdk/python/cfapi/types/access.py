"""Access identity provider types.

An identity provider's ``config`` shape depends on its ``type`` tag, so each
known tag gets its own provider model and ``IdentityProvider`` is the tagged
union of all of them. Tags the client does not know about decode to
``UnknownIdentityProvider`` with the raw config left as a dict.

API reference: https://developers.cloudflare.com/access/configuring-identity-providers/
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator


class IdentityProviderType(str, Enum):
    AZURE_AD = "azuread"
    CENTRIFY = "centrify"
    CENTRIFY_SAML = "centrify-saml"
    FACEBOOK = "facebook"
    GOOGLE_APPS = "google-apps"
    ONE_TIME_PIN = "onetimepin"
    OIDC = "oidc"
    GITHUB = "github"
    GOOGLE = "google"
    JUMPCLOUD_SAML = "jumpcloud-saml"
    OKTA = "okta"
    OKTA_SAML = "okta-saml"
    ONELOGIN_OIDC = "onelogin-oidc"
    ONELOGIN_SAML = "onelogin-saml"
    PING_SAML = "ping-saml"
    YANDEX = "yandex"
    ADFS = "adfs"


# --- Configurations ---


class OAuthConfiguration(BaseModel):
    # Keys this client does not model are kept so a get-then-update sends them back.
    model_config = ConfigDict(extra="allow")

    client_id: Optional[str] = None
    client_secret: Optional[str] = None


class AzureADConfiguration(OAuthConfiguration):
    directory_id: Optional[str] = None
    support_groups: bool = False

    @field_validator("support_groups", mode="before")
    @classmethod
    def _null_support_groups(cls, value: object) -> object:
        return False if value is None else value


class CentrifyConfiguration(OAuthConfiguration):
    centrify_account: Optional[str] = None
    centrify_app_id: Optional[str] = None


class FacebookConfiguration(OAuthConfiguration):
    pass


class GSuiteConfiguration(OAuthConfiguration):
    apps_domain: Optional[str] = None


class GenericOIDCConfiguration(OAuthConfiguration):
    auth_url: Optional[str] = None
    token_url: Optional[str] = None
    certs_url: Optional[str] = None


class GitHubConfiguration(OAuthConfiguration):
    pass


class GoogleConfiguration(OAuthConfiguration):
    pass


class OktaConfiguration(OAuthConfiguration):
    okta_account: Optional[str] = None


class OneLoginOIDCConfiguration(OAuthConfiguration):
    onelogin_account: Optional[str] = None


class YandexConfiguration(OAuthConfiguration):
    pass


class OneTimePinConfiguration(BaseModel):
    """The built-in one-time PIN provider takes no configuration."""

    model_config = ConfigDict(extra="allow")


class SAMLConfiguration(BaseModel):
    model_config = ConfigDict(extra="allow")

    issuer_url: Optional[str] = None
    sso_target_url: Optional[str] = None
    attributes: list[str] = []
    email_attribute_name: Optional[str] = None
    sign_request: bool = False
    idp_public_cert: Optional[str] = None

    @field_validator("attributes", mode="before")
    @classmethod
    def _null_attributes(cls, value: object) -> object:
        return [] if value is None else value

    @field_validator("sign_request", mode="before")
    @classmethod
    def _null_sign_request(cls, value: object) -> object:
        return False if value is None else value


class CentrifySAMLConfiguration(SAMLConfiguration):
    pass


class JumpCloudSAMLConfiguration(SAMLConfiguration):
    pass


class OktaSAMLConfiguration(SAMLConfiguration):
    pass


class OneLoginSAMLConfiguration(SAMLConfiguration):
    pass


class PingSAMLConfiguration(SAMLConfiguration):
    pass


class ADSAMLConfiguration(SAMLConfiguration):
    """Active Directory Federation Services over SAML."""


# --- Providers ---


class _IdentityProviderBase(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: str = ""

    @field_validator("config", mode="before", check_fields=False)
    @classmethod
    def _null_config(cls, value: object) -> object:
        return {} if value is None else value


class AzureADIdentityProvider(_IdentityProviderBase):
    type: Literal["azuread"] = "azuread"
    config: AzureADConfiguration = Field(default_factory=AzureADConfiguration)


class CentrifyIdentityProvider(_IdentityProviderBase):
    type: Literal["centrify"] = "centrify"
    config: CentrifyConfiguration = Field(default_factory=CentrifyConfiguration)


class CentrifySAMLIdentityProvider(_IdentityProviderBase):
    type: Literal["centrify-saml"] = "centrify-saml"
    config: CentrifySAMLConfiguration = Field(default_factory=CentrifySAMLConfiguration)


class FacebookIdentityProvider(_IdentityProviderBase):
    type: Literal["facebook"] = "facebook"
    config: FacebookConfiguration = Field(default_factory=FacebookConfiguration)


class GSuiteIdentityProvider(_IdentityProviderBase):
    type: Literal["google-apps"] = "google-apps"
    config: GSuiteConfiguration = Field(default_factory=GSuiteConfiguration)


class OneTimePinIdentityProvider(_IdentityProviderBase):
    type: Literal["onetimepin"] = "onetimepin"
    config: OneTimePinConfiguration = Field(default_factory=OneTimePinConfiguration)


class GenericOIDCIdentityProvider(_IdentityProviderBase):
    type: Literal["oidc"] = "oidc"
    config: GenericOIDCConfiguration = Field(default_factory=GenericOIDCConfiguration)


class GitHubIdentityProvider(_IdentityProviderBase):
    type: Literal["github"] = "github"
    config: GitHubConfiguration = Field(default_factory=GitHubConfiguration)


class GoogleIdentityProvider(_IdentityProviderBase):
    type: Literal["google"] = "google"
    config: GoogleConfiguration = Field(default_factory=GoogleConfiguration)


class JumpCloudSAMLIdentityProvider(_IdentityProviderBase):
    type: Literal["jumpcloud-saml"] = "jumpcloud-saml"
    config: JumpCloudSAMLConfiguration = Field(default_factory=JumpCloudSAMLConfiguration)


class OktaIdentityProvider(_IdentityProviderBase):
    type: Literal["okta"] = "okta"
    config: OktaConfiguration = Field(default_factory=OktaConfiguration)


class OktaSAMLIdentityProvider(_IdentityProviderBase):
    type: Literal["okta-saml"] = "okta-saml"
    config: OktaSAMLConfiguration = Field(default_factory=OktaSAMLConfiguration)


class OneLoginOIDCIdentityProvider(_IdentityProviderBase):
    type: Literal["onelogin-oidc"] = "onelogin-oidc"
    config: OneLoginOIDCConfiguration = Field(default_factory=OneLoginOIDCConfiguration)


class OneLoginSAMLIdentityProvider(_IdentityProviderBase):
    type: Literal["onelogin-saml"] = "onelogin-saml"
    config: OneLoginSAMLConfiguration = Field(default_factory=OneLoginSAMLConfiguration)


class PingSAMLIdentityProvider(_IdentityProviderBase):
    type: Literal["ping-saml"] = "ping-saml"
    config: PingSAMLConfiguration = Field(default_factory=PingSAMLConfiguration)


class YandexIdentityProvider(_IdentityProviderBase):
    type: Literal["yandex"] = "yandex"
    config: YandexConfiguration = Field(default_factory=YandexConfiguration)


class ADSAMLIdentityProvider(_IdentityProviderBase):
    type: Literal["adfs"] = "adfs"
    config: ADSAMLConfiguration = Field(default_factory=ADSAMLConfiguration)


class UnknownIdentityProvider(_IdentityProviderBase):
    """A provider whose ``type`` this client does not recognise.

    Also what a delete confirmation decodes to when the API only echoes ``id``.
    """

    type: str = ""
    config: dict[str, Any] = {}


_UNKNOWN_TAG = "unknown"

IDENTITY_PROVIDER_MODELS: dict[str, type[_IdentityProviderBase]] = {
    "azuread": AzureADIdentityProvider,
    "centrify": CentrifyIdentityProvider,
    "centrify-saml": CentrifySAMLIdentityProvider,
    "facebook": FacebookIdentityProvider,
    "google-apps": GSuiteIdentityProvider,
    "onetimepin": OneTimePinIdentityProvider,
    "oidc": GenericOIDCIdentityProvider,
    "github": GitHubIdentityProvider,
    "google": GoogleIdentityProvider,
    "jumpcloud-saml": JumpCloudSAMLIdentityProvider,
    "okta": OktaIdentityProvider,
    "okta-saml": OktaSAMLIdentityProvider,
    "onelogin-oidc": OneLoginOIDCIdentityProvider,
    "onelogin-saml": OneLoginSAMLIdentityProvider,
    "ping-saml": PingSAMLIdentityProvider,
    "yandex": YandexIdentityProvider,
    "adfs": ADSAMLIdentityProvider,
}


def _identity_provider_tag(value: Any) -> str:
    if isinstance(value, dict):
        tag = value.get("type")
    elif isinstance(value, UnknownIdentityProvider):
        return _UNKNOWN_TAG
    else:
        tag = getattr(value, "type", None)
    if isinstance(tag, Enum):
        tag = tag.value
    if not isinstance(tag, str) or tag not in IDENTITY_PROVIDER_MODELS:
        return _UNKNOWN_TAG
    return tag


IdentityProvider = Annotated[
    Union[
        Annotated[AzureADIdentityProvider, Tag("azuread")],
        Annotated[CentrifyIdentityProvider, Tag("centrify")],
        Annotated[CentrifySAMLIdentityProvider, Tag("centrify-saml")],
        Annotated[FacebookIdentityProvider, Tag("facebook")],
        Annotated[GSuiteIdentityProvider, Tag("google-apps")],
        Annotated[OneTimePinIdentityProvider, Tag("onetimepin")],
        Annotated[GenericOIDCIdentityProvider, Tag("oidc")],
        Annotated[GitHubIdentityProvider, Tag("github")],
        Annotated[GoogleIdentityProvider, Tag("google")],
        Annotated[JumpCloudSAMLIdentityProvider, Tag("jumpcloud-saml")],
        Annotated[OktaIdentityProvider, Tag("okta")],
        Annotated[OktaSAMLIdentityProvider, Tag("okta-saml")],
        Annotated[OneLoginOIDCIdentityProvider, Tag("onelogin-oidc")],
        Annotated[OneLoginSAMLIdentityProvider, Tag("onelogin-saml")],
        Annotated[PingSAMLIdentityProvider, Tag("ping-saml")],
        Annotated[YandexIdentityProvider, Tag("yandex")],
        Annotated[ADSAMLIdentityProvider, Tag("adfs")],
        Annotated[UnknownIdentityProvider, Tag(_UNKNOWN_TAG)],
    ],
    Discriminator(_identity_provider_tag),
]
