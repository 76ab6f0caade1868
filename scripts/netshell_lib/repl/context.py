"""
Session context and prompt utilities for the netshell REPL.

This module contains:
- CliSession: Current mode, prompt and configuration state of one shell
- get_prompt_text: Generates the prompt string for the current mode
"""

from dataclasses import dataclass, field
from typing import Optional

from ..config.constants import DEFAULT_HOSTNAME
from ..config.dataclasses import CliConfig
from ..device.credentials import CredentialStore
from ..device.state import SharedState
from ..modes.dataclasses import Profile
from ..registry.registry import CommandRegistry


@dataclass
class CliSession:
    """Tracks the current mode and configuration state of the shell."""
    profile: Profile
    registry: Optional[CommandRegistry] = None
    mode: str = ""
    prompt: str = ""
    config: CliConfig = field(default_factory=CliConfig)
    history: list[str] = field(default_factory=list)
    state: SharedState = field(default_factory=SharedState)
    credentials: CredentialStore = field(default_factory=CredentialStore)

    def __post_init__(self):
        if not self.mode:
            self.mode = self.profile.root_mode
        if self.config.hostname == DEFAULT_HOSTNAME:
            self.config.hostname = self.profile.default_hostname
        self.prompt = get_prompt_text(self)

    @property
    def graph(self):
        return self.profile.graph

    @property
    def selected_interface(self) -> Optional[str]:
        return self.state.selected_interface()

    @selected_interface.setter
    def selected_interface(self, name: Optional[str]) -> None:
        self.state.select_interface(name)

    def allowed_commands(self) -> frozenset[str]:
        """Names of the commands legal in the current mode."""
        return self.profile.command_set(self.mode)

    def refresh_prompt(self) -> None:
        self.prompt = get_prompt_text(self)


def get_prompt_text(session: CliSession) -> str:
    """Generate the prompt string for the session's hostname and mode."""
    return session.profile.graph.render_prompt(session.config.hostname, session.mode)
