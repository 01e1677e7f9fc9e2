"""Client configuration.

Settings are held in a frozen pydantic-settings model so a client cannot be
reconfigured after construction. Values not passed to the constructor are
read from ``RELAYKIT_IM_*`` environment variables; ``ClientConfig.from_env``
loads from the environment alone and reports problems as IMConfigError.
"""

from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import IMConfigError

DEFAULT_TIMEOUT = 30.0
DEFAULT_PAGE_SIZE = 20

ENV_PREFIX = "RELAYKIT_IM_"


def _secret(value: SecretStr | None) -> str:
    return value.get_secret_value() if value is not None else ""


class ClientConfig(BaseSettings):
    """Connection and credential settings for one IM application."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
        populate_by_name=True,
    )

    base_url: str = Field(..., min_length=1)
    org_name: str = Field(..., min_length=1)
    app_name: str = Field(..., min_length=1)
    client_id: str | None = None
    client_secret: SecretStr | None = None
    app_token: SecretStr | None = None
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)
    # env_prefix is not applied to aliases
    default_page_size: int = Field(
        default=DEFAULT_PAGE_SIZE,
        gt=0,
        validation_alias=AliasChoices("default_page_size", f"{ENV_PREFIX}PAGE_SIZE"),
    )

    @model_validator(mode="after")
    def validate_credentials(self) -> ClientConfig:
        """Require either a fixed app token or a client id/secret pair."""
        if _secret(self.app_token):
            return self
        if not (self.client_id and _secret(self.client_secret)):
            raise ValueError("either app_token or both client_id and client_secret are required")
        return self

    @property
    def app_key(self) -> str:
        """Application key in ``org#app`` form."""
        return f"{self.org_name}#{self.app_name}"

    @property
    def app_url(self) -> str:
        """Base URL of the application's REST resources."""
        return f"{self.base_url.rstrip('/')}/{self.org_name}/{self.app_name}"

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build config from ``RELAYKIT_IM_*`` environment variables.

        Raises:
            IMConfigError: If required values are missing or invalid
        """
        try:
            return cls()
        except ValidationError as e:
            raise IMConfigError(f"Invalid client configuration: {e}") from e
