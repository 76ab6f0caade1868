"""
Command descriptors and handlers.

A CommandDescriptor is the immutable registry entry for one command. Its
handler is anything implementing CommandHandler; plain cmd_* functions are
wrapped with FunctionHandler.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Sequence


class CommandHandler(ABC):
    """Executes one command against a session."""

    @abstractmethod
    def execute(self, args: list[str], session, clock) -> None:
        """
        Run the command.

        Args:
            args: Argument tokens after the command name
            session: The CliSession to act on
            clock: Device Clock, or None when unavailable

        Raises:
            CliError: reported by the dispatcher
        """


class FunctionHandler(CommandHandler):
    """Adapts a cmd_x(session, args, clock) function to CommandHandler."""

    def __init__(self, func: Callable[..., None]):
        self.func = func

    def execute(self, args: list[str], session, clock) -> None:
        self.func(session, args, clock)

    def __repr__(self) -> str:
        return f"FunctionHandler({self.func.__name__})"


@dataclass(frozen=True)
class CommandDescriptor:
    """Registry entry for a command."""
    name: str
    label: str
    description: str
    handler: CommandHandler
    # First-level hints; also the vocabulary a single argument resolves against
    subcommands: tuple[str, ...] = ()
    # Second-level hints
    arguments: tuple[str, ...] = ()
    # Descriptive placeholders shown in query output only
    options: tuple[str, ...] = ()
    # Live first-level values (interface names) when there are no static hints
    dynamic_values: Optional[Callable[[], Sequence[str]]] = None

    @property
    def arg_suggest(self) -> tuple[str, ...]:
        return self.subcommands
