"""
kardsbot services.

Catalog caching and deck payload encoding.
"""

from kardsbot.services.catalog_cache import CatalogCache, fetch_catalog
from kardsbot.services.payload_encoder import (
    build_deck_url,
    decode_deck_token,
    deck_to_text,
    encode_deck,
)

__all__ = [
    "CatalogCache",
    "build_deck_url",
    "decode_deck_token",
    "deck_to_text",
    "encode_deck",
    "fetch_catalog",
]
