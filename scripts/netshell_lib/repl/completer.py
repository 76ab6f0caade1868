"""
Completion engine for the netshell REPL.

One resolution step serves both '?' queries and tab completion: it decides
which token position is being completed and what may go there in the
current mode. query_lines() formats the result for printing;
complete_line() returns replacement offsets for the line editor; and
CommandCompleter adapts it to prompt_toolkit.
"""

from dataclasses import dataclass, field
from typing import Optional

from prompt_toolkit.completion import Completer, Completion

from ..errors import CliError
from ..registry.matching import MatchKind, resolve_token
from .context import CliSession
from .hints import lookup_position_hint

NO_MORE_OPTIONS = "No more options available"


@dataclass
class Candidate:
    """A completable value."""
    value: str
    description: str = ""


@dataclass
class Resolution:
    """What may follow the text before the cursor."""
    position: int
    partial: str
    candidates: list[Candidate] = field(default_factory=list)
    help: list[str] = field(default_factory=list)

    @property
    def empty(self) -> bool:
        return not self.candidates and not self.help


def split_partial(text: str) -> tuple[list[str], str]:
    """Split text into completed words and the word being typed."""
    words = text.split()
    if not text or text[-1].isspace():
        return words, ""
    return words[:-1], words[-1]


def _filter(values, partial: str) -> list[str]:
    return [v for v in dict.fromkeys(values) if v.startswith(partial)]


def _dynamic_values(descriptor) -> list[str]:
    if descriptor.dynamic_values is None:
        return []
    try:
        return list(descriptor.dynamic_values())
    except CliError:
        return []


def resolve_candidates(session: CliSession, text: str) -> Resolution:
    """Work out the candidates for the word at the end of text."""
    completed, partial = split_partial(text)
    position = len(completed)
    resolution = Resolution(position=position, partial=partial)

    registry = session.registry
    profile = session.profile
    allowed = session.allowed_commands()

    if position == 0:
        for name in _filter(sorted(allowed), partial):
            descriptor = registry.lookup_exact(name)
            resolution.candidates.append(
                Candidate(name, descriptor.description if descriptor else "")
            )
        return resolution

    match = resolve_token(completed[0], allowed)
    if match.kind is not MatchKind.UNIQUE:
        return resolution
    descriptor = registry.lookup_exact(match.name)
    if descriptor is None:
        return resolution

    if position == 1:
        values = list(profile.hints_for(descriptor, session.mode))
        help_lines = []
        if not values:
            values = _dynamic_values(descriptor)
            help_lines = list(descriptor.options)
    else:
        words = [descriptor.name, *completed[1:]]
        sub = resolve_token(words[1], profile.vocabulary(descriptor))
        if sub.kind is MatchKind.UNIQUE:
            words[1] = sub.name

        hint = lookup_position_hint(session.mode, words)
        if hint is not None:
            values, help_lines = list(hint.values), list(hint.help)
        elif position == 2:
            values = list(descriptor.arguments)
            help_lines = [] if values or not descriptor.subcommands else list(descriptor.options)
        else:
            values, help_lines = [], []

    resolution.candidates = [Candidate(v) for v in _filter(values, partial)]
    resolution.help = help_lines
    return resolution


def query_lines(session: CliSession, text: str) -> list[str]:
    """Lines printed in response to '?' after text."""
    resolution = resolve_candidates(session, text)
    if resolution.empty:
        return [NO_MORE_OPTIONS]

    lines = ["Possible completions:"]
    for candidate in resolution.candidates:
        if candidate.description:
            lines.append(f"  {candidate.value:<20}{candidate.description}")
        else:
            lines.append(f"  {candidate.value}")
    lines.extend(f"  {line}" for line in resolution.help)
    return lines


def complete_line(session: CliSession, line: str, cursor: Optional[int] = None) -> tuple[int, list[tuple[str, str]]]:
    """
    Tab completion for line with the cursor at cursor.

    Returns:
        (start offset of the word being replaced, [(display, replacement)])
    """
    if cursor is None:
        cursor = len(line)
    resolution = resolve_candidates(session, line[:cursor])
    start = cursor - len(resolution.partial)
    return start, [(c.value, c.value) for c in resolution.candidates]


class CommandCompleter(Completer):
    """Mode-aware completer for prompt_toolkit."""

    def __init__(self, session: CliSession):
        self.session = session

    def get_completions(self, document, complete_event):
        text = document.text_before_cursor
        resolution = resolve_candidates(self.session, text)
        for candidate in resolution.candidates:
            yield Completion(
                candidate.value,
                start_position=-len(resolution.partial),
                display_meta=candidate.description,
            )
