"""
Mode and profile dataclasses.

These define the structure of a profile as loaded from YAML: one ModeSpec
per mode, plus the product-level settings in Profile.
"""

from dataclasses import dataclass, field
from typing import Optional

from .graph import ModeGraph


@dataclass(frozen=True)
class ModeSpec:
    """One operating mode from a profile definition."""
    name: str
    prompt_suffix: str
    parent: Optional[str] = None
    description: str = ""
    entry_command: Optional[str] = None
    entry_token: Optional[str] = None
    enter_message: str = ""
    exit_message: str = ""
    commands: frozenset[str] = frozenset()
    # Mode-scoped first-level hints (command -> values)
    hints: dict[str, tuple[str, ...]] = field(default_factory=dict, hash=False)


@dataclass
class Profile:
    """A product's mode graph, command sets and defaults."""
    name: str
    display_name: str
    description: str
    default_hostname: str
    root_mode: str
    interrupt_mode: str
    modes: dict[str, ModeSpec]
    graph: ModeGraph = field(init=False, repr=False)

    def __post_init__(self):
        self.graph = ModeGraph(self.modes, self.root_mode)

    def command_set(self, mode: str) -> frozenset[str]:
        """Names of the commands legal in a mode."""
        return self.graph.spec(mode).commands

    def vocabulary(self, descriptor) -> tuple[str, ...]:
        """
        Every word a command's single argument may resolve to.

        The descriptor's subcommands, the tokens that enter a mode through
        this command, and the mode-scoped hints declared for it anywhere in
        the profile.
        """
        words = list(descriptor.subcommands)
        words.extend(self.graph.entry_tokens(descriptor.name))
        for spec in self.modes.values():
            words.extend(spec.hints.get(descriptor.name, ()))
        return tuple(dict.fromkeys(words))

    def hints_for(self, descriptor, mode: str) -> tuple[str, ...]:
        """First-level hints for a command as seen from one mode."""
        spec = self.graph.spec(mode)
        if descriptor.name in spec.hints:
            words = list(spec.hints[descriptor.name])
        else:
            words = list(descriptor.subcommands)
        words.extend(self.graph.entry_tokens(descriptor.name, from_mode=mode))
        return tuple(dict.fromkeys(words))
