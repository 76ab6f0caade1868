"""
netshell_lib.repl.commands - Command handlers for the REPL

This package contains command handlers organized by area:
- modes: enable, disable, config, exit, interface and mode-entry commands
- system: reload, poweroff, debug, clear, help, hostname, write, copy, clock
- show: show and do
- network: ifconfig, ip, no, shutdown, ping, traceroute, ssh, dhcp_enable
- features: Leaf-mode feature manager commands

build_command_registry() assembles them into a frozen CommandRegistry for
a profile.
"""

from ...errors import RegistryError
from ...modes.dataclasses import Profile
from ...registry.descriptor import CommandDescriptor
from ...registry.registry import CommandRegistry
from . import features, modes, network, show, system
from .modes import EnterModeHandler

BUILTIN_COMMANDS = [
    *modes.COMMANDS,
    *system.COMMANDS,
    *show.COMMANDS,
    *network.COMMANDS,
    *features.COMMANDS,
]


def _register_mode_entries(registry: CommandRegistry, profile: Profile) -> None:
    """Register a command for each mode entered by naming it directly."""
    for spec in profile.modes.values():
        if spec.entry_command is None or spec.entry_command in registry:
            continue
        if spec.entry_token is not None:
            raise RegistryError(
                f"Mode '{spec.name}' is entered with '{spec.entry_command} {spec.entry_token}' "
                f"but '{spec.entry_command}' is not a command"
            )
        registry.register(spec.entry_command, CommandDescriptor(
            name=spec.entry_command,
            label=spec.entry_command,
            description=f"Enter {spec.description or spec.name}",
            handler=EnterModeHandler(spec.name),
        ))


def build_command_registry(profile: Profile) -> CommandRegistry:
    """
    Build the frozen registry for a profile.

    Raises:
        DuplicateCommandError: a command name is registered twice
        RegistryError: a mode lists a command that does not exist
    """
    registry = CommandRegistry()
    for descriptor in BUILTIN_COMMANDS:
        registry.register(descriptor.name, descriptor)
    _register_mode_entries(registry, profile)

    for spec in profile.modes.values():
        missing = sorted(name for name in spec.commands if name not in registry)
        if missing:
            raise RegistryError(
                f"Mode '{spec.name}' lists unknown commands: {', '.join(missing)}"
            )

    registry.freeze()
    return registry


__all__ = [
    'BUILTIN_COMMANDS',
    'build_command_registry',
    'EnterModeHandler',
]
