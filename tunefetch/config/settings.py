"""Application settings loaded from environment variables via pydantic-settings.

Values come from three sources, highest priority first:

  1. **Environment variables** -- e.g. ``REGION=US``, or
     ``MIRROR_SERVERS='["https://a.example/api/v1"]'`` (lists are JSON).
  2. **.env file** -- key=value lines in the working directory.
  3. **Init values** -- what ``config/loader.py`` passes in from
     ``config/config.yaml``.

Defaults below are used when none of the three sets a field.
"""

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_MIRROR_SERVERS: tuple[str, ...] = (
    "https://invidious.snopyta.org/api/v1",
    "https://vid.puffyan.us/api/v1",
    "https://ytprivate.com/api/v1",
    "https://ytb.trom.tf/api/v1",
    "https://invidious.namazso.eu/api/v1",
    "https://invidious.hub.ne.kr/api/v1",
)

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/92.0.4515.131 Safari/537.36"
)


class Settings(BaseSettings):
    """tunefetch settings.

    Environment variables override YAML values. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Mirrors ===
    # Order matters: the first entry is the initial active server.
    mirror_servers: list[str] = list(DEFAULT_MIRROR_SERVERS)
    region: str = "NP"

    # === Transport ===
    user_agent: str = DEFAULT_USER_AGENT
    # Applied to the httpx client, not enforced by the fetch engine.
    request_timeout: float = 10.0

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"

    @field_validator("mirror_servers")
    @classmethod
    def normalise_mirror_urls(cls, value: list[str]) -> list[str]:
        servers = [server.strip().rstrip("/") for server in value if server.strip()]
        if not servers:
            raise ValueError("at least one mirror server is required")
        return servers

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Environment beats .env beats YAML (passed as init kwargs).
        return env_settings, dotenv_settings, init_settings, file_secret_settings
