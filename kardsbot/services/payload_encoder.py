"""
Deck payload encoding for deck-builder URLs.

A deck {123: 2, 45: 1} becomes the bare text "123:2,45:1", which is then
base64 encoded with the URL-safe alphabet and no padding.
"""

import base64
import json
import logging
import re

from kardsbot.models.deck import DeckRequest

logger = logging.getLogger(__name__)

# JSON structure removed from the serialized deck
_STRUCTURAL_CHARS = re.compile(r'[{}"]')


def deck_to_text(deck: DeckRequest) -> str:
    """Serialize a deck to "<id>:<qty>,<id>:<qty>" in the deck's key order."""
    compact = json.dumps(deck, separators=(",", ":"))
    return _STRUCTURAL_CHARS.sub("", compact)


def encode_deck(deck: DeckRequest) -> str:
    """
    Encode a deck as a URL-safe token.

    Args:
        deck: Card identifier -> quantity

    Returns:
        Unpadded URL-safe base64 of the bare deck text.
    """
    token = base64.urlsafe_b64encode(deck_to_text(deck).encode("utf-8")).decode("ascii")
    token = token.rstrip("=")
    logger.debug("Encoded deck token %s", token)
    return token


def decode_deck_token(token: str) -> str:
    """
    Reverse `encode_deck` back to the bare "<id>:<qty>,..." text.

    Raises:
        ValueError: If the token is not valid base64
    """
    padded = token + "=" * (-len(token) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii")).decode("utf-8")


def build_deck_url(view_url: str, deck: DeckRequest) -> str:
    """Append the encoded deck to the deck builder's view URL."""
    return view_url + encode_deck(deck)
