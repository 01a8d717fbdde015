from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "kardsbot"
    debug: bool = False

    discord_token: str = ""

    command_prefix: str = "."

    deck_builder_url: str = "https://kardsdeck.opengamela.com/"

    # Catalog older than this is re-fetched before the next lookup
    catalog_max_age_seconds: float = 60.0

    # Upper bound on a single catalog request
    catalog_fetch_timeout_seconds: float = 10.0

    @field_validator("deck_builder_url")
    @classmethod
    def _ensure_trailing_slash(cls, value: str) -> str:
        return value if value.endswith("/") else value + "/"

    @property
    def catalog_url(self) -> str:
        return self.deck_builder_url + "assets/data/cards.json"

    @property
    def view_url(self) -> str:
        return self.deck_builder_url + "view?data="


settings = Settings()
