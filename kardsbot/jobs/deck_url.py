"""
Build a deck-builder URL from deck text outside of Discord.

Reads deck text from a file (or stdin), fetches the card catalog once and
prints the URL.

    kardsbot-deck-url deck.txt
    cat deck.txt | kardsbot-deck-url
"""

import argparse
import asyncio
import logging
import sys

from kardsbot.config import settings
from kardsbot.models.failure import KardsBotError
from kardsbot.parsers.deck_text import parse_deck_text
from kardsbot.services.catalog_cache import fetch_catalog
from kardsbot.services.payload_encoder import build_deck_url

logger = logging.getLogger(__name__)


async def run_deck_url(deck_text: str) -> str:
    """Fetch the catalog and return the URL for `deck_text`."""
    catalog = await fetch_catalog(
        settings.catalog_url, timeout=settings.catalog_fetch_timeout_seconds
    )
    logger.info("Fetched %d cards from %s", len(catalog), settings.catalog_url)
    deck = parse_deck_text(deck_text, catalog)
    return build_deck_url(settings.view_url, deck)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Convert KARDS deck text to a deck-builder URL")
    parser.add_argument(
        "deck_file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="File with one '<N>x (<K>K) <Card Title>' entry per line (default: stdin)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    with args.deck_file as f:
        deck_text = f.read()

    try:
        url = asyncio.run(run_deck_url(deck_text))
    except KardsBotError as e:
        logger.error("Failed to build deck URL: %s", e.message)
        sys.exit(1)

    print(url)


if __name__ == "__main__":
    main()
