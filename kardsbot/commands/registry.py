"""
Chat command registry and dispatcher.

A message is a command when it starts with the prefix. The command name
runs up to the first space; everything after that space, trimmed, is the
argument text:

    ".help"          -> name "help", arguments None
    ".kdb 2x (1K) A" -> name "kdb", arguments "2x (1K) A"

Unknown commands are ignored without a reply.
"""

import logging

from kardsbot.models.command import Command, CommandInvocation, Handler, Reply

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "."


class CommandRegistry:
    """Maps command names to handlers, in registration order."""

    def __init__(self, prefix: str = DEFAULT_PREFIX) -> None:
        self.prefix = prefix
        self._commands: dict[str, Command] = {}

    @property
    def commands(self) -> list[Command]:
        """Registered commands in registration order."""
        return list(self._commands.values())

    def register(self, name: str, description: str, handler: Handler) -> None:
        """Register a command. Re-registering a name replaces the old entry in place."""
        self._commands[name] = Command(name=name, description=description, handler=handler)
        logger.debug("Registered command %s%s", self.prefix, name)

    def get(self, name: str) -> Command | None:
        return self._commands.get(name)

    def parse(self, text: str) -> CommandInvocation | None:
        """
        Split a message into command name and arguments.

        Returns:
            None if the text does not start with the prefix.
        """
        if not text.startswith(self.prefix):
            return None

        space = text.find(" ", len(self.prefix))
        if space == -1:
            return CommandInvocation(name=text[len(self.prefix) :])

        return CommandInvocation(
            name=text[len(self.prefix) : space],
            raw_arguments=text[space:].strip(),
        )

    async def dispatch(self, invocation: CommandInvocation, reply: Reply) -> None:
        """
        Run the handler registered under the invocation's name.

        Handler exceptions propagate unchanged.
        """
        command = self._commands.get(invocation.name)
        if command is None:
            logger.debug("Ignoring unknown command %r", invocation.name)
            return

        await command.handler(invocation, reply)

    async def handle_message(self, text: str, reply: Reply) -> None:
        """Parse and dispatch one chat message. Non-commands are ignored."""
        invocation = self.parse(text)
        if invocation is not None:
            await self.dispatch(invocation, reply)

    def help_text(self) -> str:
        entries = "\n\n".join(
            f"{self.prefix}{command.name} - {command.description}"
            for command in self._commands.values()
        )
        return f"Available commands:\n```\n{entries}\n```"
