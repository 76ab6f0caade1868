"""
Command dispatcher for the netshell REPL.

handle_command() takes one input line, resolves the command against those
legal in the session's mode, resolves a single argument against the
command's vocabulary, and runs the handler. A trailing '?' prints
completions instead. Every CliError stops at this boundary.
"""

from dataclasses import dataclass
from typing import Optional

from ..common.colors import error
from ..errors import (
    AmbiguousAbbreviation,
    ArgumentFormatError,
    CliError,
    ModeViolation,
    UnknownCommand,
)
from ..registry.matching import MatchKind, lookup_by_prefix, resolve_token
from .completer import query_lines
from .context import CliSession

# Abbreviations that run their command with no argument even though the
# command takes subcommands ('en' -> enable, 'int' -> interface, 'di' -> disable)
DIRECT_INVOKE_STEMS = ("en", "int", "di")


@dataclass
class DispatchResult:
    """Outcome of one input line."""
    command: Optional[str] = None
    args: tuple[str, ...] = ()
    error: Optional[CliError] = None
    query: bool = False
    # Text to pre-fill the next prompt with after a query
    pending: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None


def resolve_command(session: CliSession, token: str) -> str:
    """
    Resolve the command token against the commands legal in the mode.

    Raises:
        AmbiguousAbbreviation: token prefixes several legal commands
        ModeViolation: token names a command that is not legal here
        UnknownCommand: token matches nothing at all
    """
    match = resolve_token(token, session.allowed_commands())
    if match.kind is MatchKind.UNIQUE:
        return match.name
    if match.kind is MatchKind.AMBIGUOUS:
        raise AmbiguousAbbreviation(token, match.matches)

    anywhere = lookup_by_prefix(token, session.registry.names())
    if anywhere.kind is not MatchKind.NONE:
        raise ModeViolation(f"Invalid input: '{token}' is not recognized in this mode")
    raise UnknownCommand(f"Invalid input: '{token}' is not recognized in this mode")


def resolve_arguments(session: CliSession, descriptor, token: str, args: list[str]) -> Optional[list[str]]:
    """
    Apply the argument rules for commands that take subcommands.

    Returns the argument list to run with, or None when the command has no
    subcommand vocabulary and the raw arguments apply.
    """
    vocabulary = session.profile.vocabulary(descriptor)
    if not vocabulary:
        return None

    if not args:
        if token.startswith(DIRECT_INVOKE_STEMS):
            return []
        raise ArgumentFormatError("Incomplete command. Subcommand required.")

    if len(args) == 1:
        match = resolve_token(args[0], vocabulary)
        if match.kind is MatchKind.AMBIGUOUS:
            raise AmbiguousAbbreviation(args[0], match.matches)
        if match.kind is MatchKind.NONE:
            raise ArgumentFormatError(f"Ambiguous or invalid subcommand: {args[0]}")
        return [match.name]

    return args


def handle_command(line: str, session: CliSession, clock) -> DispatchResult:
    """Dispatch one input line. Errors are reported, never raised."""
    text = line.strip()

    if text.endswith("?"):
        before = text[:-1]
        for output in query_lines(session, before):
            print(output)
        return DispatchResult(query=True, pending=before)

    parts = text.split()
    if not parts:
        return DispatchResult()

    token, args = parts[0], parts[1:]
    result = DispatchResult(args=tuple(args))

    try:
        name = resolve_command(session, token)
        result.command = name
        descriptor = session.registry.lookup_exact(name)

        resolved = resolve_arguments(session, descriptor, token, args)
        if resolved is not None:
            args = resolved
            result.args = tuple(args)

        descriptor.handler.execute(args, session, clock)
    except CliError as e:
        error(str(e))
        result.error = e

    return result
