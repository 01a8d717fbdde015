from unittest.mock import MagicMock, patch

import discord
import pytest

from kardsbot import main as main_module
from kardsbot.bot import KardsBot
from kardsbot.config import Settings


class TestCreateBot:
    @pytest.mark.asyncio
    async def test_wires_registry(self) -> None:
        config = Settings(_env_file=None, command_prefix="!", catalog_max_age_seconds=30)

        bot = main_module.create_bot(config)

        assert isinstance(bot, KardsBot)
        assert bot.registry.prefix == "!"
        assert [c.name for c in bot.registry.commands] == ["help", "kdb"]
        kdb = bot.registry.get("kdb")
        assert kdb is not None
        assert kdb.handler.cache.max_age == 30
        assert kdb.handler.cache.url == config.catalog_url
        assert kdb.handler.view_url == config.view_url


class TestMain:
    def test_exits_without_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(main_module.settings, "discord_token", "")

        with patch.object(main_module, "create_bot") as create_bot:
            with pytest.raises(SystemExit) as exc_info:
                main_module.main()

        assert exc_info.value.code == 1
        create_bot.assert_not_called()

    def test_runs_bot_with_token(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(main_module.settings, "discord_token", "secret")
        bot = MagicMock()

        with patch.object(main_module, "create_bot", return_value=bot):
            main_module.main()

        bot.run.assert_called_once_with("secret", log_handler=None)

    def test_login_failure_exits(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(main_module.settings, "discord_token", "bad")
        bot = MagicMock()
        bot.run.side_effect = discord.LoginFailure("Improper token has been passed.")

        with patch.object(main_module, "create_bot", return_value=bot):
            with pytest.raises(SystemExit) as exc_info:
                main_module.main()

        assert exc_info.value.code == 1
