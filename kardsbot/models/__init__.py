from kardsbot.models.card import Card, Catalog
from kardsbot.models.command import Command, CommandInvocation, Handler, Reply
from kardsbot.models.deck import DeckRequest
from kardsbot.models.failure import (
    CatalogFetchError,
    DeckFormatError,
    FailureKind,
    KardsBotError,
    UnknownCardError,
)

__all__ = [
    "Card",
    "Catalog",
    "CatalogFetchError",
    "Command",
    "CommandInvocation",
    "DeckFormatError",
    "DeckRequest",
    "FailureKind",
    "Handler",
    "KardsBotError",
    "Reply",
    "UnknownCardError",
]
