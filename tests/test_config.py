import pytest

from kardsbot.config import Settings


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DISCORD_TOKEN", raising=False)
        config = Settings(_env_file=None)

        assert config.command_prefix == "."
        assert config.catalog_max_age_seconds == 60.0
        assert config.catalog_url == "https://kardsdeck.opengamela.com/assets/data/cards.json"
        assert config.view_url == "https://kardsdeck.opengamela.com/view?data="

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISCORD_TOKEN", "secret")
        monkeypatch.setenv("COMMAND_PREFIX", "!")
        monkeypatch.setenv("CATALOG_MAX_AGE_SECONDS", "5")

        config = Settings(_env_file=None)

        assert config.discord_token == "secret"
        assert config.command_prefix == "!"
        assert config.catalog_max_age_seconds == 5.0

    def test_base_url_gets_trailing_slash(self) -> None:
        config = Settings(_env_file=None, deck_builder_url="https://decks.example")

        assert config.catalog_url == "https://decks.example/assets/data/cards.json"
        assert config.view_url == "https://decks.example/view?data="
