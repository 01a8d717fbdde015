"""Built-in chat commands: help and the deck URL builder."""

import logging

from kardsbot.commands.registry import DEFAULT_PREFIX, CommandRegistry
from kardsbot.models.command import CommandInvocation, Reply
from kardsbot.models.failure import CatalogFetchError, DeckFormatError, UnknownCardError
from kardsbot.parsers.deck_text import parse_deck_text
from kardsbot.services.catalog_cache import CatalogCache
from kardsbot.services.payload_encoder import build_deck_url

logger = logging.getLogger(__name__)

HELP_DESCRIPTION = "Shows the available commands"
KDB_DESCRIPTION = "Generate a Kards Deck Builder URL from a deck in text format"


class HelpCommand:
    """Replies with every registered command and its description."""

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    async def __call__(self, invocation: CommandInvocation, reply: Reply) -> None:
        await reply(self.registry.help_text())


class DeckUrlCommand:
    """
    Turns deck text into a deck-builder URL.

    Steps: refresh the catalog if stale, resolve titles, encode, reply.
    If the catalog can't be fetched nothing is sent for that invocation.
    Format errors and unknown cards are reported back to the user.
    """

    def __init__(self, cache: CatalogCache, view_url: str) -> None:
        self.cache = cache
        self.view_url = view_url

    async def __call__(self, invocation: CommandInvocation, reply: Reply) -> None:
        deck_text = invocation.raw_arguments or ""

        try:
            catalog = await self.cache.ensure_fresh()
        except CatalogFetchError as e:
            logger.error("Dropping %s request, card catalog unavailable: %s", invocation.name, e)
            return

        try:
            deck = parse_deck_text(deck_text, catalog)
        except DeckFormatError as e:
            await reply(e.message)
            return
        except UnknownCardError as e:
            logger.info("Deck references unknown card %r", e.title)
            await reply(e.message)
            return

        await reply(build_deck_url(self.view_url, deck))


def build_registry(
    cache: CatalogCache,
    view_url: str,
    prefix: str = DEFAULT_PREFIX,
) -> CommandRegistry:
    """Create a registry with the built-in commands, help first."""
    registry = CommandRegistry(prefix=prefix)
    registry.register("help", HELP_DESCRIPTION, HelpCommand(registry))
    registry.register("kdb", KDB_DESCRIPTION, DeckUrlCommand(cache, view_url))
    return registry
