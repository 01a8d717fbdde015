"""
Discord transport.

Forwards every message the bot can read to the command registry and sends
replies back to the channel the command came from.
"""

import logging
from typing import Any

import discord

from kardsbot.commands.registry import CommandRegistry

logger = logging.getLogger(__name__)


def default_intents() -> discord.Intents:
    """Default intents plus message content, which prefix commands need."""
    intents = discord.Intents.default()
    intents.message_content = True
    return intents


class KardsBot(discord.Client):
    """Discord client that answers prefix commands."""

    def __init__(self, registry: CommandRegistry, **options: Any) -> None:
        options.setdefault("intents", default_intents())
        super().__init__(**options)
        self.registry = registry

    async def on_ready(self) -> None:
        logger.info("Logged in as %s!", self.user)

    async def on_message(self, message: discord.Message) -> None:
        # Never react to our own replies
        if self.user is not None and message.author.id == self.user.id:
            return

        await self.registry.handle_message(message.content, message.channel.send)
