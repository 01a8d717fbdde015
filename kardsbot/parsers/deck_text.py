"""
Parser for KARDS deck text.

Deck text format (one entry per line):
    <quantity>x (<kredits>K) <card title>

Example:
    2x (1K) Mosin-Nagant
    1x (2K) Bertrand Du Guesclin

Lines that don't match are ignored, so headers and blank lines can stay.
"""

import re

from kardsbot.models.card import Catalog
from kardsbot.models.deck import DeckRequest
from kardsbot.models.failure import DeckFormatError, UnknownCardError

# Pattern: "2x (1K) Mosin-Nagant"
# Groups: (quantity, card_title)
DECK_ENTRY_PATTERN = re.compile(r"^(\d)x \(\dK\) (.+)$")


def parse_deck_entries(text: str) -> list[tuple[int, str]]:
    """
    Extract (quantity, title) pairs from deck text.

    Titles are trimmed. Non-matching lines are skipped silently.
    """
    entries: list[tuple[int, str]] = []

    for line in text.split("\n"):
        match = DECK_ENTRY_PATTERN.match(line)
        if match:
            quantity, title = match.groups()
            entries.append((int(quantity), title.strip()))

    return entries


def parse_deck_text(text: str, catalog: Catalog) -> DeckRequest:
    """
    Resolve deck text against the catalog.

    Args:
        text: Raw deck text, possibly empty
        catalog: Snapshot used for title lookups

    Returns:
        Card identifier -> quantity. A card listed twice keeps the
        quantity from its last line.

    Raises:
        DeckFormatError: If no line matches the entry format
        UnknownCardError: If any title is not in the catalog. No partial
            deck is returned.
    """
    entries = parse_deck_entries(text)
    if not entries:
        raise DeckFormatError()

    deck: DeckRequest = {}
    for quantity, title in entries:
        card_id = catalog.find_id(title)
        if card_id is None:
            raise UnknownCardError(title)
        deck[card_id] = quantity

    return deck
