"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reika.errors import ConfigurationError

REQUIRED_ENV_VARS = ("DISCORD_TOKEN", "STEAM_API_KEY", "STEAM_IMG_PROXY_HOST")

# Resize/format options understood by the image proxy, already URL-encoded
IMAGE_PROXY_QUERY = (
    "interpolation=lanczos-none&output-format=jpeg&output-quality=95"
    "&fit=inside%7C128%3A128&composite-to=*,*%7C128%3A128"
    "&background-color=black&extension=jpeg"
)


class WorkshopConfig(BaseModel):
    """Immutable constants shared by the matcher, Steam client, and renderer.

    Built once at startup from Settings and passed down explicitly.
    """

    model_config = ConfigDict(frozen=True)

    workshop_host: str = "steamcommunity.com"
    workshop_schemes: tuple[str, ...] = ("http", "https")
    workshop_sections: tuple[str, ...] = ("sharedfiles", "workshop")

    api_base_url: str = "https://api.steampowered.com"
    request_timeout: float = 10.0

    image_proxy_host: str = ""
    image_proxy_query: str = IMAGE_PROXY_QUERY
    preview_types: tuple[str, ...] = ("ugc",)

    mod_tag: str = "Mod"
    mod_color: int = 0xFF71EF
    default_color: int = 0xFF9153
    description_limit: int = 200
    new_item_days: int = 7


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Discord
    discord_token: str
    rival_bot_id: str = "155149108183695360"

    # Steam
    steam_api_key: str
    steam_img_proxy_host: str
    request_timeout: float = 10.0

    # App
    log_level: str = "INFO"
    port: int = 8080

    @field_validator("discord_token", "steam_api_key", "steam_img_proxy_host")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def workshop_config(self) -> WorkshopConfig:
        """Build the immutable pipeline constants from these settings."""
        return WorkshopConfig(
            image_proxy_host=self.steam_img_proxy_host,
            request_timeout=self.request_timeout,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings.

    Raises ConfigurationError if any required credential is missing or blank.
    """
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(
            f"you need to specify environment variables: {', '.join(REQUIRED_ENV_VARS)}"
        ) from exc
