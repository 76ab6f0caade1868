"""
Mode graph.

Modes form a tree rooted at the profile's root mode. A mode may only be
entered from its parent; exit moves to the parent. The graph never holds
session state: it updates the session passed to it.
"""

from typing import Optional

from ..errors import ModeViolation, NoParentMode, WrongModeError


class Mode:
    """Mode names the built-in command handlers refer to."""
    USER = "user"
    PRIVILEGED = "privileged"
    CONFIG = "config"
    INTERFACE = "interface"
    VLAN = "vlan"
    QOS = "qos"
    DYNROUTER = "dynrouter"
    PORTSEC = "portsec"
    MONITORING = "monitoring"
    AUTOD = "autod"


class ModeGraph:
    """Parent/child relationships, prompts and entry points of the modes."""

    def __init__(self, modes: dict, root: str):
        self._modes = modes
        self.root = root
        self._entries = {
            (spec.entry_command, spec.entry_token): spec.name
            for spec in modes.values()
            if spec.entry_command
        }

    def __contains__(self, mode: str) -> bool:
        return mode in self._modes

    def spec(self, mode: str):
        try:
            return self._modes[mode]
        except KeyError:
            raise ModeViolation(f"Unknown mode: {mode}") from None

    def parent_of(self, mode: str) -> Optional[str]:
        return self.spec(mode).parent

    def children_of(self, mode: str) -> list[str]:
        return [spec.name for spec in self._modes.values() if spec.parent == mode]

    def prompt_suffix(self, mode: str) -> str:
        return self.spec(mode).prompt_suffix

    def render_prompt(self, hostname: str, mode: str) -> str:
        return f"{hostname}{self.prompt_suffix(mode)}"

    def mode_for_entry(self, command: str, token: Optional[str] = None) -> Optional[str]:
        """The mode entered by 'command [token]', if any."""
        return self._entries.get((command, token))

    def entry_tokens(self, command: str, from_mode: Optional[str] = None) -> tuple[str, ...]:
        """Tokens that enter a mode through command, optionally only children of from_mode."""
        return tuple(
            token
            for (entry_command, token), mode in self._entries.items()
            if entry_command == command and token is not None
            and (from_mode is None or self._modes[mode].parent == from_mode)
        )

    def enter(self, mode: str, session) -> None:
        """
        Enter a child mode of the session's current mode.

        Raises:
            WrongModeError: the session is not in the mode's parent
        """
        spec = self.spec(mode)
        if spec.parent is not None and session.mode != spec.parent:
            parent = self.spec(spec.parent)
            raise WrongModeError(
                f"{spec.description or mode} can only be entered from "
                f"{parent.description or parent.name}"
            )
        self._move(session, mode)

    def exit(self, session) -> str:
        """
        Move the session to its parent mode and return it.

        Raises:
            NoParentMode: the session is at the root
        """
        parent = self.parent_of(session.mode)
        if parent is None:
            raise NoParentMode("Already at the top level. No mode to exit.")
        self._move(session, parent)
        return parent

    def force(self, mode: str, session) -> None:
        """Jump to a mode regardless of the current one."""
        self.spec(mode)
        self._move(session, mode)

    def _move(self, session, mode: str) -> None:
        session.mode = mode
        session.prompt = self.render_prompt(session.config.hostname, mode)
