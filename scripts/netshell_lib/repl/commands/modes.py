"""
Mode transition commands: enable, disable, config, exit, interface.

enable and disable also switch the feature managers on and off in the
leaf configuration modes.
"""

from dataclasses import dataclass

from ...common import process
from ...common.colors import log
from ...common.prompts import prompt_secret
from ...errors import ArgumentFormatError, ModeViolation, NoParentMode
from ...modes.graph import Mode
from ...registry.descriptor import CommandDescriptor, CommandHandler, FunctionHandler
from .checks import interface_names, require_known_interface, require_mode, require_number


@dataclass(frozen=True)
class FeatureToggle:
    """A feature switched with 'enable <name>' / 'disable <name>'."""
    mode: str
    label: str
    can_disable: bool = True


FEATURE_TOGGLES = {
    "network_manager": FeatureToggle(Mode.CONFIG, "Network Manager"),
    "vlan_manager": FeatureToggle(Mode.VLAN, "Vlan Manager"),
    "port_security_manager": FeatureToggle(Mode.PORTSEC, "Port Security Manager"),
    "monitoring_manager": FeatureToggle(Mode.MONITORING, "Monitoring Manager"),
    "auto_discovery_manager": FeatureToggle(Mode.AUTOD, "Auto Discovery Manager"),
    "ospf": FeatureToggle(Mode.DYNROUTER, "OSPF routing", can_disable=False),
    "ospf_controller": FeatureToggle(Mode.DYNROUTER, "OSPF controller", can_disable=False),
    "rip": FeatureToggle(Mode.DYNROUTER, "RIP routing", can_disable=False),
    "rip_controller": FeatureToggle(Mode.DYNROUTER, "RIP controller", can_disable=False),
    "coredump_login": FeatureToggle(Mode.MONITORING, "Coredump login", can_disable=False),
    "vlan_tagging": FeatureToggle(Mode.VLAN, "VLAN tagging", can_disable=False),
    "qos_config": FeatureToggle(Mode.QOS, "QOS config", can_disable=False),
}

# Managers enabled per ID: 'enable <name> id <ID>'
ID_FEATURES = {
    "qos_manager": FeatureToggle(Mode.QOS, "QOS Manager"),
    "dynamic_routing_manager": FeatureToggle(Mode.DYNROUTER, "Dynamic Routing Manager"),
    "vlan_routing": FeatureToggle(Mode.VLAN, "VLAN routing", can_disable=False),
}

ENABLE_SUBCOMMANDS = (
    "password", "secret",
    "network_manager", "vlan_manager", "qos_manager", "dynamic_routing_manager",
    "port_security_manager", "monitoring_manager", "auto_discovery_manager",
    "ospf", "ospf_controller", "rip", "rip_controller",
    "coredump_login",
    "bridge", "router", "protocol", "id", "vlan_tagging", "vlan_routing",
    "qos_config",
)

DISABLE_SUBCOMMANDS = (
    "network_manager", "vlan_manager", "qos_manager", "dynamic_routing_manager",
    "port_security_manager", "monitoring_manager", "auto_discovery_manager",
)


def _mode_name(session, mode: str) -> str:
    if mode in session.profile.graph:
        return session.profile.graph.spec(mode).description or mode
    return mode


def _only_in(session, command: str, mode: str) -> None:
    require_mode(session, (mode,),
                 f"The '{command}' command is only available in {_mode_name(session, mode)}.")


# =============================================================================
# enable
# =============================================================================

def _authenticate(session) -> None:
    """Prompt for whichever of the enable password and secret are set."""
    credentials = session.credentials
    has_password = credentials.enable_password_digest() is not None
    has_secret = credentials.enable_secret_digest() is not None

    if has_password:
        if not credentials.verify_password(prompt_secret("Enter password:") or ""):
            raise ArgumentFormatError(
                "Incorrect password or secret." if has_secret else "Incorrect password."
            )
    if has_secret:
        if not credentials.verify_secret(prompt_secret("Enter secret:") or ""):
            raise ArgumentFormatError(
                "Incorrect password or secret." if has_password else "Incorrect secret."
            )


def _enter_privileged(session) -> None:
    graph = session.profile.graph
    require_mode(session, (graph.root,),
                 "The 'enable' command is only available in User EXEC mode.")
    if session.credentials.requires_authentication():
        _authenticate(session)
    target = graph.mode_for_entry("enable")
    graph.enter(target, session)
    print(graph.spec(target).enter_message)


def _set_credential(session, args, which: str) -> None:
    _only_in(session, f"enable {which}", Mode.CONFIG)
    if len(args) != 2:
        raise ArgumentFormatError(
            f"You must provide the enable {'password' if which == 'password' else 'secret password'}."
        )
    if which == "password":
        session.credentials.set_enable_password(args[1])
        session.config.enable_password = args[1]
        print("Enable password set.")
    else:
        session.credentials.set_enable_secret(args[1])
        print("Enable secret password set.")


def _enable_vlan_setting(session, args) -> None:
    sub = args[0]
    _only_in(session, f"enable {sub}", Mode.VLAN)
    settings = session.config.settings

    if sub == "bridge":
        if len(args) != 2:
            raise ArgumentFormatError("The correct usage : 'enable bridge <bridge_name>'")
        settings["vlan.bridge"] = args[1]
        print(f"Enables the bridge {args[1]}")
    elif sub == "router":
        if len(args) == 2:
            settings["vlan.router"] = args[1]
            print(f"Enables the router {args[1]}")
        elif len(args) == 4 and args[2] == "id":
            router_id = require_number(args[3], "ID")
            settings["vlan.router"] = args[1]
            settings["vlan.router_id"] = router_id
            print(f"Enables the router {args[1]} for the id {router_id}")
        else:
            raise ArgumentFormatError(
                "The correct usage : 'enable router <router_name>' or "
                "'enable router <router_name> id <ID>'"
            )
    elif sub == "protocol":
        if len(args) != 4 or args[2] != "router":
            raise ArgumentFormatError(
                "The correct usage : 'enable protocol <protocol> router <router_name>'"
            )
        settings[f"vlan.router.{args[3]}.protocol"] = args[1]
        print(f"Enables the router {args[3]} for the protocol {args[1]}")
    elif sub == "id":
        if len(args) != 2:
            raise ArgumentFormatError("The correct usage : 'enable id <ID>'")
        settings["vlan.id"] = require_number(args[1], "ID")
        print(f"Enables the ID {args[1]}")


def cmd_enable(session, args, clock):
    if not args:
        _enter_privileged(session)
        return

    sub = args[0]
    if sub in ("password", "secret"):
        _set_credential(session, args, sub)
    elif sub in FEATURE_TOGGLES:
        toggle = FEATURE_TOGGLES[sub]
        _only_in(session, f"enable {sub}", toggle.mode)
        if len(args) != 1:
            raise ArgumentFormatError(f"The correct usage : 'enable {sub}'")
        session.config.set_feature(sub, True)
        print(f"{toggle.label} is enabled.")
    elif sub in ID_FEATURES:
        toggle = ID_FEATURES[sub]
        _only_in(session, f"enable {sub}", toggle.mode)
        if len(args) != 3 or args[1] != "id":
            raise ArgumentFormatError(f"Correct usage: 'enable {sub} id <ID>'")
        feature_id = require_number(args[2], "ID")
        session.config.set_feature(sub, True)
        session.config.settings[f"{sub}.id"] = feature_id
        print(f"{toggle.label} for the id {feature_id} is enabled.")
    elif sub in ("bridge", "router", "protocol", "id"):
        _enable_vlan_setting(session, args)
    else:
        raise ArgumentFormatError(f"Unknown enable subcommand: {sub}")


# =============================================================================
# disable
# =============================================================================

def cmd_disable(session, args, clock):
    graph = session.profile.graph

    if not args:
        if session.mode == graph.root:
            raise NoParentMode("Already at the top level. No mode to exit.")
        if graph.parent_of(session.mode) != graph.root:
            raise ModeViolation("This command only works at the Privileged Mode.")
        exit_message = graph.spec(session.mode).exit_message
        graph.exit(session)
        print(exit_message)
        return

    sub = args[0]
    if sub == "dynamic_routing_manager":
        _only_in(session, f"disable {sub}", Mode.DYNROUTER)
        if len(args) != 2:
            raise ArgumentFormatError("Correct usage: 'disable dynamic_routing_manager <ID>'")
        feature_id = require_number(args[1], "ID")
        session.config.set_feature(sub, False)
        session.config.settings.pop(f"{sub}.id", None)
        print(f"Dynamic Routing Manager for the id {feature_id} is disabled.")
        return

    toggle = FEATURE_TOGGLES.get(sub) or ID_FEATURES.get(sub)
    if toggle is None or not toggle.can_disable:
        raise ArgumentFormatError(f"Unknown disable subcommand: {sub}")
    _only_in(session, f"disable {sub}", toggle.mode)
    if len(args) != 1:
        raise ArgumentFormatError(f"The correct usage : 'disable {sub}'")
    session.config.set_feature(sub, False)
    print(f"{toggle.label} is disabled.")


# =============================================================================
# config
# =============================================================================

def cmd_config(session, args, clock):
    graph = session.profile.graph
    if session.mode == graph.root:
        raise ModeViolation(
            "The 'config' commands are only available in Privileged EXEC mode and Config mode."
        )
    if len(args) != 1:
        raise ArgumentFormatError("Invalid arguments provided to 'config commands'")

    target = graph.mode_for_entry("config", args[0])
    if target is not None:
        graph.enter(target, session)
        message = graph.spec(target).enter_message
        if message:
            print(message)
        return

    if session.mode == Mode.DYNROUTER and args[0] in ("ospf", "rip"):
        session.config.set_feature(f"{args[0]}_config", True)
        print(f"{args[0].upper()} configuration is enabled.")
        return

    raise ArgumentFormatError("Invalid arguments provided to 'config commands'")


class EnterModeHandler(CommandHandler):
    """Handler for commands whose only job is to enter one mode."""

    def __init__(self, mode: str):
        self.mode = mode

    def execute(self, args, session, clock):
        if args:
            raise ArgumentFormatError(
                f"Invalid arguments provided to '{self.mode}'. "
                "This command does not accept additional arguments."
            )
        graph = session.profile.graph
        graph.enter(self.mode, session)
        spec = graph.spec(self.mode)
        print(spec.enter_message or f"Entering {spec.description or self.mode}...")


# =============================================================================
# exit
# =============================================================================

def cmd_exit(session, args, clock):
    if args == ["ssh"]:
        print("Terminating SSH session...")
        process.terminate_ssh_session()
        return
    if args:
        raise ArgumentFormatError("Command is either 'exit', 'exit cli' or 'exit ssh'")

    graph = session.profile.graph
    exit_message = graph.spec(session.mode).exit_message
    graph.exit(session)
    if exit_message:
        print(exit_message)


# =============================================================================
# interface
# =============================================================================

def cmd_interface(session, args, clock):
    mode = session.mode
    graph = session.profile.graph

    if mode in (Mode.CONFIG, Mode.INTERFACE):
        if len(args) != 1:
            raise ArgumentFormatError("Invalid number of arguments. Usage: interface <interface-name>")
        name = require_known_interface(args[0])
        if mode != Mode.INTERFACE:
            graph.enter(Mode.INTERFACE, session)
        session.selected_interface = name
        print(f"Entering Interface configuration mode for: {name}")

    elif mode == Mode.AUTOD:
        if len(args) == 2 and args[1] in ("enable", "disable"):
            name = require_known_interface(args[0])
            session.config.settings[f"autod.{name}"] = args[1]
            log(f"Auto discovery {args[1]} for the interface {name}")
        elif len(args) == 3 and args[1] == "mode":
            name = require_known_interface(args[0])
            session.config.settings[f"autod.{name}.mode"] = args[2]
            log(f"Configure the mode {args[2]} for the interface {name}")
        else:
            raise ArgumentFormatError(
                "Usage: 'interface <interface_name> [enable|disable]' or "
                "'interface <interface_name> mode <mode>'"
            )

    elif mode == Mode.QOS:
        if len(args) != 3 or args[1] not in ("cpq", "beq"):
            raise ArgumentFormatError(
                "Usage: 'interface <interface_name> [cpq|beq] [true|false]'"
            )
        if args[2] not in ("true", "false"):
            raise ArgumentFormatError(
                "Specify the condition as true or false. "
                "Command: 'interface <interface_name> [cpq|beq] [true|false]'"
            )
        name = require_known_interface(args[0])
        session.config.settings[f"qos.{name}.{args[1]}"] = args[2]
        action = "Enables" if args[2] == "true" else "Disables"
        log(f"{action} {args[1]} for the interface {name}")

    else:
        raise ModeViolation(
            "The 'interface' command is only available in Global Configuration, "
            "Interface Configuration, QOS Manager and Auto Discovery Manager modes."
        )


COMMANDS = [
    CommandDescriptor(
        name="enable",
        label="enable",
        description="Enter privileged EXEC mode",
        subcommands=ENABLE_SUBCOMMANDS,
        handler=FunctionHandler(cmd_enable),
    ),
    CommandDescriptor(
        name="disable",
        label="disable",
        description="Exit the Privileged EXEC mode and return to the USER EXEC mode.",
        subcommands=DISABLE_SUBCOMMANDS,
        handler=FunctionHandler(cmd_disable),
    ),
    CommandDescriptor(
        name="config",
        label="configure network_manager",
        description="Enter global configuration mode",
        handler=FunctionHandler(cmd_config),
    ),
    CommandDescriptor(
        name="exit",
        label="exit",
        description="Exit the current mode and return to the previous mode.",
        handler=FunctionHandler(cmd_exit),
    ),
    CommandDescriptor(
        name="interface",
        label="interface",
        description="Enter Interface configuration mode",
        options=("<interface-name>    - Specify a valid interface name",),
        dynamic_values=interface_names,
        handler=FunctionHandler(cmd_interface),
    ),
]
