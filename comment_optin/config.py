"""Application configuration settings."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    optin_option_name: str = Field(
        default="optin_flag_field",
        description="Per-user option key and form field name of the opt-in flag",
        min_length=1,
    )
    optin_yes_value: str = Field(
        default="1",
        description="Stored and submitted value meaning the user opted in",
        min_length=1,
    )
    optin_capability: str = Field(
        default="subscribe_to_all_comments",
        description="Capability that permits subscribing to all comments",
        min_length=1,
    )
    moderate_capability: str = Field(
        default="moderate_comments",
        description="Capability required to hear about comments awaiting moderation",
        min_length=1,
    )
    edit_users_capability: str = Field(
        default="edit_users",
        description="Capability allowing a user to edit other users' settings",
        min_length=1,
    )
    blog_prefix: str = Field(
        default="",
        description="Prefix applied to the stored option key when several sites share users",
    )

    @model_validator(mode="after")
    def _validate_capabilities(self) -> "Settings":
        if self.optin_capability == self.moderate_capability:
            raise ValueError(
                "OPTIN_CAPABILITY and MODERATE_CAPABILITY must be different capabilities"
            )
        return self


@dataclass(frozen=True)
class OptinConfig:
    """Immutable constants shared by the resolver, the store and the form binder."""

    option_name: str = "optin_flag_field"
    yes_value: str = "1"
    capability: str = "subscribe_to_all_comments"
    moderate_capability: str = "moderate_comments"
    edit_users_capability: str = "edit_users"
    blog_prefix: str = ""

    @property
    def meta_key(self) -> str:
        """Key under which the flag is persisted for the current site."""

        return f"{self.blog_prefix}{self.option_name}"

    @classmethod
    def from_settings(cls, settings: Settings) -> "OptinConfig":
        return cls(
            option_name=settings.optin_option_name,
            yes_value=settings.optin_yes_value,
            capability=settings.optin_capability,
            moderate_capability=settings.moderate_capability,
            edit_users_capability=settings.edit_users_capability,
            blog_prefix=settings.blog_prefix,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


@lru_cache
def get_optin_config() -> OptinConfig:
    """Return the opt-in constants derived from the cached settings."""

    return OptinConfig.from_settings(get_settings())


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_optin_config.cache_clear()
    get_settings.cache_clear()


__all__ = [
    "OptinConfig",
    "Settings",
    "get_optin_config",
    "get_settings",
    "reset_settings_cache",
]
