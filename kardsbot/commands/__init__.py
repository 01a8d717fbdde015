"""
Chat commands.

Command parsing, dispatch and the built-in handlers.
"""

from kardsbot.commands.builtin import (
    DeckUrlCommand,
    HelpCommand,
    build_registry,
)
from kardsbot.commands.registry import DEFAULT_PREFIX, CommandRegistry

__all__ = [
    "DEFAULT_PREFIX",
    "CommandRegistry",
    "DeckUrlCommand",
    "HelpCommand",
    "build_registry",
]
