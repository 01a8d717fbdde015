from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

# Sends one chat message in reply to the invocation (e.g. discord's channel.send)
Reply = Callable[[str], Awaitable[Any]]


@dataclass(frozen=True, slots=True)
class CommandInvocation:
    """
    A command parsed from one chat message.

    Attributes:
        name: Text between the prefix and the first space
        raw_arguments: Trimmed text after the first space, None if the
            message had no space at all
    """

    name: str
    raw_arguments: str | None = None


Handler = Callable[[CommandInvocation, Reply], Awaitable[None]]


@dataclass(frozen=True, slots=True)
class Command:
    """A registered chat command."""

    name: str
    description: str
    handler: Handler
