"""
Bot entry point.

Run with `kardsbot` or `python -m kardsbot`. Requires DISCORD_TOKEN in the
environment or in a .env file.
"""

import logging
import sys

import discord

from kardsbot.bot import KardsBot
from kardsbot.commands import build_registry
from kardsbot.config import Settings, settings
from kardsbot.services.catalog_cache import CatalogCache

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_bot(config: Settings) -> KardsBot:
    """Wire the catalog cache, command registry and Discord client together."""
    cache = CatalogCache(
        config.catalog_url,
        max_age=config.catalog_max_age_seconds,
        timeout=config.catalog_fetch_timeout_seconds,
    )
    registry = build_registry(cache, config.view_url, prefix=config.command_prefix)
    return KardsBot(registry)


def main() -> None:
    """CLI entry point."""
    configure_logging(settings.debug)

    if not settings.discord_token:
        logger.error("DISCORD_TOKEN is not set; add it to the environment or .env")
        sys.exit(1)

    bot = create_bot(settings)
    try:
        # log_handler=None keeps discord.py on the root logging configuration
        bot.run(settings.discord_token, log_handler=None)
    except discord.LoginFailure as e:
        logger.error("Discord login failed: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
