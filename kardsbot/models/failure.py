"""
Failure classification for command handling.

Every failure is scoped to the invocation that triggered it. None of them
touch the cached catalog or the command registry.

Failure kinds:
- fetch_failed: The catalog could not be retrieved or decoded. Logged,
  no reply is sent.
- format_incorrect: The deck text had no recognizable entries. Replied.
- unknown_card: A deck entry names a card missing from the catalog. Replied.
"""

from enum import Enum


class FailureKind(str, Enum):
    """Classification of failure types."""

    FETCH_FAILED = "fetch_failed"
    FORMAT_INCORRECT = "format_incorrect"
    UNKNOWN_CARD = "unknown_card"


class KardsBotError(Exception):
    """
    Base class for known, explainable failures.

    `message` is safe to show in chat.
    """

    def __init__(self, kind: FailureKind, message: str) -> None:
        self.kind = kind
        self.message = message
        super().__init__(message)


class CatalogFetchError(KardsBotError):
    """Raised when the card catalog cannot be fetched or decoded."""

    def __init__(self, message: str) -> None:
        super().__init__(FailureKind.FETCH_FAILED, message)


class DeckFormatError(KardsBotError):
    """Raised when no line of the deck text matches the entry format."""

    def __init__(self) -> None:
        super().__init__(FailureKind.FORMAT_INCORRECT, "Format was incorrect.")


class UnknownCardError(KardsBotError):
    """Raised when a deck entry names a card that is not in the catalog."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(FailureKind.UNKNOWN_CARD, f"Unknown card: {title}")
