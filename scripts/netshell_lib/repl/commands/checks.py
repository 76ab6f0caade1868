"""
Argument and mode checks shared by command handlers.
"""

from ...common import process
from ...errors import ArgumentFormatError, ModeViolation, ResourceUnavailable


def require_mode(session, modes, message: str) -> None:
    """Raise ModeViolation unless the session is in one of modes."""
    if session.mode not in modes:
        raise ModeViolation(message)


def require_no_args(args, command: str) -> None:
    if args:
        raise ArgumentFormatError(
            f"Invalid arguments provided to '{command}'. "
            "This command does not accept additional arguments."
        )


def require_selected_interface(session) -> str:
    interface = session.selected_interface
    if interface is None:
        raise ResourceUnavailable("No interface selected. Use the 'interface' command first.")
    return interface


def require_known_interface(name: str) -> str:
    """Check name against the interfaces the kernel knows about."""
    interfaces = process.list_interfaces()
    if not interfaces:
        raise ResourceUnavailable("No network interfaces found.")
    if name not in interfaces:
        raise ArgumentFormatError(
            f"Invalid interface: {name}. Available interfaces: {', '.join(interfaces)}"
        )
    return name


def require_number(value: str, what: str) -> str:
    if not value.isdigit():
        raise ArgumentFormatError(f"Invalid {what}: {value}. Expected a number.")
    return value


def interface_names() -> list[str]:
    """Live interface names for completion."""
    return process.list_interfaces()
