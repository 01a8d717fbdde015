from kardsbot.parsers.deck_text import (
    DECK_ENTRY_PATTERN,
    parse_deck_entries,
    parse_deck_text,
)

__all__ = [
    "DECK_ENTRY_PATTERN",
    "parse_deck_entries",
    "parse_deck_text",
]
