"""Data types for configuration and API contracts."""

from typing import Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

AuthType = Literal["personalaccesskey", "oauth2", "apikey"]


class _CamelModel(BaseModel):
    """Model persisted/transported with camelCase keys."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "extra": "allow",
    }


class TokenInfo(_CamelModel):
    """Cached OAuth or personal access key token."""

    access_token: str | None = None
    refresh_token: str | None = None
    expires_at: str | None = None


class AccountAuth(_CamelModel):
    """OAuth client settings and cached token for an account."""

    client_id: str | None = None
    client_secret: str | None = None
    scopes: list[str] | None = None
    token_info: TokenInfo | None = None


class CLIAccount(_CamelModel):
    """A single configured account."""

    account_id: int | None = None
    name: str | None = None
    env: str | None = None
    auth_type: AuthType | None = None
    auth: AccountAuth | None = None
    api_key: str | None = None
    personal_access_key: str | None = None
    default_mode: str | None = None
    sandbox_account_type: str | None = None
    parent_account_id: int | None = None


class CLIConfig(_CamelModel):
    """Top-level configuration document."""

    accounts: list[CLIAccount | None] | None = Field(default_factory=list)
    default_account: str | int | None = None
    default_mode: str | None = None
    http_timeout: int | None = None
    http_use_localhost: bool | None = None
    allow_usage_tracking: bool | None = None
    env: str | None = None
    # Directory path -> account name or ID used as default below that path
    default_account_overrides: dict[str, str | int] | None = None


class CLIOptions(BaseModel):
    """Options controlling where configuration is loaded from."""

    use_env: bool = False


class AccessTokenResponse(_CamelModel):
    """Response from exchanging a personal access key."""

    hub_id: int
    oauth_access_token: str
    expires_at_millis: int
    scope_groups: list[str] = Field(default_factory=list)
    encoded_oauth_refresh_token: str | None = None


class ScopeData(_CamelModel):
    """Scopes available to a portal and user within a scope group."""

    portal_scopes_in_group: list[str] = Field(default_factory=list)
    user_scopes_in_group: list[str] = Field(default_factory=list)


class PublicApp(_CamelModel):
    """A public app registered in a developer account."""

    id: int
    name: str
    description: str | None = None
    portal_id: int | None = None
    client_id: str | None = None
    created_at: int | None = None
    updated_at: int | None = None
    archived: bool = False


class GithubReleaseData(BaseModel):
    """Subset of a GitHub release payload."""

    model_config = {"extra": "allow"}

    tag_name: str = ""
    name: str | None = None
    zipball_url: str | None = None
    prerelease: bool = False
    created_at: str | None = None
    published_at: str | None = None
