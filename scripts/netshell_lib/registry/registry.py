"""
Command registry.

Maps command names to descriptors. Built once at startup, then frozen.
"""

from typing import Iterable, Iterator, Optional

from ..errors import DuplicateCommandError, RegistryError
from .descriptor import CommandDescriptor
from .matching import PrefixMatch, lookup_by_prefix


class CommandRegistry:
    """Table of registered commands."""

    def __init__(self):
        self._commands: dict[str, CommandDescriptor] = {}
        self._frozen = False

    def register(self, name: str, descriptor: CommandDescriptor) -> None:
        if self._frozen:
            raise RegistryError(f"Registry is frozen; cannot register '{name}'")
        if name in self._commands:
            raise DuplicateCommandError(f"Command already registered: {name}")
        self._commands[name] = descriptor

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def lookup_exact(self, name: str) -> Optional[CommandDescriptor]:
        return self._commands.get(name)

    def lookup_by_prefix(self, partial: str, candidate_names: Iterable[str]) -> PrefixMatch:
        """Prefix-match partial against candidate_names (not the whole registry)."""
        return lookup_by_prefix(partial, candidate_names)

    def names(self) -> list[str]:
        return sorted(self._commands)

    def __contains__(self, name: str) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
