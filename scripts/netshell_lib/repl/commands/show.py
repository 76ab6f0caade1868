"""
show and do commands.

'show' is scoped per mode by the profile's show hints. 'do' runs the
privileged EXEC commands (show, copy, clock, debug, undebug) from any mode
without that scoping.
"""

from ...errors import AmbiguousAbbreviation, ArgumentFormatError, ModeViolation
from ...modes.graph import Mode
from ...registry.descriptor import CommandDescriptor, FunctionHandler
from ...registry.matching import MatchKind, resolve_token
from .. import display
from .checks import require_known_interface
from .system import copy_running_config, debug_all, set_clock, undebug_all

SHOW_SUBCOMMANDS = (
    "running-config",
    "startup-config",
    "version",
    "processes",
    "clock",
    "uptime",
    "controllers",
    "history",
    "sessions",
    "interfaces",
    "ip",
    "login",
    "arp",
)

DO_SUBCOMMANDS = ("show", "copy", "clock", "debug", "undebug")


def _resolve(token: str, vocabulary, what: str) -> str:
    match = resolve_token(token, vocabulary)
    if match.kind is MatchKind.AMBIGUOUS:
        raise AmbiguousAbbreviation(token, match.matches)
    if match.kind is MatchKind.NONE:
        raise ArgumentFormatError(f"Invalid {what} command: {token}")
    return match.name


def _show_ip(session, args, clock):
    if not args:
        raise ArgumentFormatError("Incomplete command. Use 'show ip interface brief|<interface>' or 'show ip route'")
    sub = _resolve(args[0], ("interface", "route"), "show ip")
    if sub == "route":
        display.show_ip_route(session)
        return
    if len(args) != 2:
        raise ArgumentFormatError("Invalid interface subcommand. Use 'show ip interface brief|<interface>'")
    if args[1] == "brief":
        display.show_ip_interface_brief()
    else:
        display.show_ip_interface(require_known_interface(args[1]))


SHOW_ACTIONS = {
    "running-config": lambda session, args, clock: display.show_running_config(session),
    "startup-config": lambda session, args, clock: display.show_startup_config(session),
    "version": lambda session, args, clock: display.show_version(session, clock),
    "processes": lambda session, args, clock: display.show_processes(),
    "clock": lambda session, args, clock: display.show_clock(clock),
    "uptime": lambda session, args, clock: display.show_uptime(clock),
    "controllers": lambda session, args, clock: display.show_controllers(),
    "history": lambda session, args, clock: display.show_history(session),
    "sessions": lambda session, args, clock: display.show_sessions(),
    "interfaces": lambda session, args, clock: display.show_interfaces(),
    "ip": _show_ip,
    "login": lambda session, args, clock: display.show_login(),
    "arp": lambda session, args, clock: display.show_arp(),
}


def run_show(session, args, clock, scoped: bool = True) -> None:
    """Run 'show <sub> ...'; scoped applies the mode's show list."""
    if not args:
        raise ArgumentFormatError("Missing parameter. Usage: show <command>")
    sub = _resolve(args[0], SHOW_SUBCOMMANDS, "show")

    if scoped:
        if session.mode not in (Mode.USER, Mode.PRIVILEGED):
            raise ModeViolation(
                "Show commands are only available in User EXEC mode and Privileged EXEC mode."
            )
        spec = session.profile.graph.spec(session.mode)
        allowed = spec.hints.get("show")
        if allowed is not None and sub not in allowed:
            raise ModeViolation(f"'show {sub}' is not available in {spec.description or spec.name}")

    SHOW_ACTIONS[sub](session, args[1:], clock)


def cmd_show(session, args, clock):
    run_show(session, args, clock)


def cmd_do(session, args, clock):
    if not args:
        raise ArgumentFormatError("Missing parameter. Usage: do <command>")
    sub = _resolve(args[0], DO_SUBCOMMANDS, "do")
    rest = args[1:]

    if sub == "show":
        if not rest:
            raise ArgumentFormatError("Missing parameter. Usage: do show <command>")
        run_show(session, rest, clock, scoped=False)
    elif sub == "copy":
        copy_running_config(session, rest)
    elif sub == "clock":
        if not rest or rest[0] != "set":
            raise ArgumentFormatError(
                "Correct Usage of 'do clock set' command is "
                "'clock set <hh:mm:ss> <day> <month> <year>'."
            )
        set_clock(rest, clock)
    elif sub == "debug":
        if rest != ["all"]:
            raise ArgumentFormatError("Usage: do debug all")
        debug_all(session, [], "do debug all")
    elif sub == "undebug":
        if rest != ["all"]:
            raise ArgumentFormatError("Usage: do undebug all")
        undebug_all(session, [], "do undebug all")


COMMANDS = [
    CommandDescriptor(
        name="show",
        label="show",
        description="Display system information and configuration",
        subcommands=SHOW_SUBCOMMANDS,
        handler=FunctionHandler(cmd_show),
    ),
    CommandDescriptor(
        name="do",
        label="do",
        description="Execute privileged EXEC commands from any configuration mode",
        subcommands=DO_SUBCOMMANDS,
        arguments=SHOW_SUBCOMMANDS,
        handler=FunctionHandler(cmd_do),
    ),
]
