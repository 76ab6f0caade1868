"""
Feature manager commands for the leaf configuration modes.

Most of these store one value: SettingHandler covers 'name <value>' and
'name <keyword> <value>' shapes. The rest are plain cmd_* functions.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from ...common.colors import log
from ...config.validation import validate_ipv4, validate_netmask
from ...errors import ArgumentFormatError
from ...modes.graph import Mode
from ...registry.descriptor import CommandDescriptor, CommandHandler, FunctionHandler
from .checks import require_mode


def _mode_only(session, command: str, mode: str) -> None:
    graph = session.profile.graph
    description = graph.spec(mode).description if mode in graph else mode
    require_mode(session, (mode,), f"The '{command}' command is only available in {description}.")


@dataclass(frozen=True)
class Setting:
    """A command that records a single value in the session configuration."""
    name: str
    mode: str
    key: str
    message: str
    placeholder: str
    keyword: Optional[str] = None
    validate: Optional[Callable[[str], bool]] = None

    @property
    def usage(self) -> str:
        words = [self.name, self.keyword, self.placeholder]
        return " ".join(w for w in words if w)


class SettingHandler(CommandHandler):
    """Handler for Setting commands."""

    def __init__(self, setting: Setting):
        self.setting = setting

    def execute(self, args, session, clock):
        setting = self.setting
        _mode_only(session, setting.usage, setting.mode)

        if setting.keyword:
            if len(args) != 2 or args[0] != setting.keyword:
                raise ArgumentFormatError(f"Invalid arguments for '{setting.name}' command. '{setting.usage}'")
            value = args[1]
        else:
            if len(args) != 1:
                raise ArgumentFormatError(f"Invalid arguments for '{setting.name}' command. '{setting.usage}'")
            value = args[0]

        if setting.validate is not None and not setting.validate(value):
            raise ArgumentFormatError(f"Invalid value for '{setting.name}': {value}")

        session.config.settings[setting.key] = value
        log(setting.message.format(value=value))


def _is_vlan_id(value: str) -> bool:
    return value.isdigit() and 1 <= int(value) <= 4094


def _is_holdtime(value: str) -> bool:
    return value == "default" or value.isdigit()


SETTINGS = [
    # Dynamic routing
    (Setting("controller", Mode.DYNROUTER, "dynrouter.controller_status",
             "Controller status set to {value}", "<status>", keyword="status"),
     "Define controller status"),
    # VLAN manager
    (Setting("bridge_name", Mode.VLAN, "vlan.bridge_name",
             "Bridge name is set to {value}", "<name>"),
     "Configures the name of a bridge"),
    (Setting("router", Mode.VLAN, "vlan.router_name",
             "Router name is set to {value}", "<name>", keyword="name"),
     "Configures the name of a router"),
    (Setting("segment", Mode.VLAN, "vlan.segment_id",
             "Segment ID is set to {value}", "<ID>", keyword="id", validate=str.isdigit),
     "Configures VLAN segment ID"),
    (Setting("vlan", Mode.VLAN, "vlan.id",
             "VLAN ID is set to {value}", "<ID>", keyword="id", validate=_is_vlan_id),
     "Assigns VLAN ID"),
    # QoS manager
    (Setting("policy", Mode.QOS, "qos.policy",
             "QOS policy is set to {value}", "<policy>"),
     "Sets the QoS policy"),
    # Port security manager
    (Setting("mode", Mode.PORTSEC, "portsec.mode",
             "Port security mode set to {value}", "<mode>"),
     "Sets the port security mode"),
    (Setting("max_devices", Mode.PORTSEC, "portsec.max_devices",
             "The maximum amount of devices set to {value}", "<number>", validate=str.isdigit),
     "Limits the maximum number of devices allowed per port"),
    (Setting("violation_status", Mode.PORTSEC, "portsec.violation_status",
             "The violation status is set to {value}", "<status>"),
     "Configures the port security violation mode"),
    # Monitoring manager
    (Setting("logging_level", Mode.MONITORING, "monitoring.logging_level",
             "Logging level set to {value}", "<level>"),
     "Define logging level"),
    # Auto discovery manager
    (Setting("holdtime", Mode.AUTOD, "autod.holdtime",
             "Hold time set to {value}", "<time|default>", validate=_is_holdtime),
     "Sets the hold time for discovery messages"),
    (Setting("reinit", Mode.AUTOD, "autod.reinit_behaviour",
             "Reinitialization behaviour set to {value}", "<behaviour>", keyword="behaviour"),
     "Sets the reinitialization behaviour"),
]

SETTING_OPTIONS = {
    "controller": "<status>        - Define the controller status",
    "bridge_name": "<name>        - Define the bridge name",
    "router": "<name>        - Define the router name",
    "segment": "<ID>        - Define the ID",
    "vlan": "<ID>        - Define the VLAN ID (1-4094)",
    "policy": "<policy>        - Set the QOS policy",
    "mode": "<mode>        - Set the mode",
    "max_devices": "<number>        - Set the maximum amount of number of devices",
    "violation_status": "<status>        - Set the status",
    "logging_level": "<level>        - Define the logging level",
    "holdtime": "<time|default>        - Set the hold time in seconds",
    "reinit": "<behaviour>        - Define the reinitialization behaviour",
}


# =============================================================================
# Dynamic routing
# =============================================================================

NETWORK_FIELDS = {
    "ip": (validate_ipv4, "Configuring the interface {interface} the ip address of {value} of the ospf feature"),
    "netmask": (validate_netmask, "Configuring the interface {interface} netmask as {value} of the ospf feature"),
    "area": (str.isdigit, "Configuring the interface {interface} the area {value} of the ospf feature"),
}


def cmd_network(session, args, clock):
    _mode_only(session, "network", Mode.DYNROUTER)
    if len(args) != 3 or args[1] not in NETWORK_FIELDS:
        raise ArgumentFormatError(
            "Invalid arguments for 'network' command. 'network <interface> ip|netmask|area <value>'"
        )
    interface, field_name, value = args
    validate, message = NETWORK_FIELDS[field_name]
    if not validate(value):
        raise ArgumentFormatError(f"Invalid {field_name}: {value}")
    session.config.settings[f"ospf.network.{interface}.{field_name}"] = value
    log(message.format(interface=interface, value=value))


def cmd_redistribute(session, args, clock):
    _mode_only(session, "redistribute", Mode.DYNROUTER)
    if len(args) != 1 or args[0] not in ("ospf", "rip"):
        raise ArgumentFormatError("Invalid arguments for 'redistribute' command. 'redistribute [ospf|rip]'")
    session.config.set_feature(f"redistribute_{args[0]}", True)
    log(f"Configuring redistribution capability of the {args[0].upper()} feature")


def cmd_valid(session, args, clock):
    _mode_only(session, "valid", Mode.DYNROUTER)
    if len(args) != 1 or args[0] not in ("ospf", "rip"):
        raise ArgumentFormatError("Invalid arguments for 'valid' command. 'valid [ospf|rip]'")
    log(f"Writing the previous configuration to the {args[0].upper()} manager")


# =============================================================================
# VLAN manager
# =============================================================================

def cmd_add(session, args, clock):
    _mode_only(session, "add", Mode.VLAN)
    settings = session.config.settings

    if len(args) == 4 and args[0] == "bridge" and args[2] == "interface":
        bridge, interface = args[1], args[3]
        settings[f"vlan.bridge.{bridge}.interface"] = interface
        log(f"The bridge {bridge} is added to the interface {interface}")
    elif (len(args) == 6 and args[0] == "interface"
          and args[2] == "protocol" and args[4] == "router"):
        interface, protocol, router = args[1], args[3], args[5]
        settings[f"vlan.interface.{interface}.protocol"] = protocol
        settings[f"vlan.interface.{interface}.router"] = router
        log(f"{protocol} routing protocol is added to the interface {interface} and router {router}")
    else:
        raise ArgumentFormatError(
            "Invalid arguments for 'add' command. 'add bridge <name> interface <interface>' "
            "or 'add interface <interface> protocol <protocol> router <router>'"
        )


# =============================================================================
# QoS manager
# =============================================================================

def cmd_priority(session, args, clock):
    _mode_only(session, "priority", Mode.QOS)
    if len(args) != 4 or args[0] != "level" or args[2] != "interface":
        raise ArgumentFormatError(
            "Invalid arguments for 'priority' command. 'priority level <level> interface <interface_name>'"
        )
    level, interface = args[1], args[3]
    session.config.settings[f"qos.{interface}.priority"] = level
    log(f"Priority level {level} is set to the interface {interface}")


COMMANDS = [
    CommandDescriptor(
        name="network",
        label="network",
        description="Configure the OSPF network of an interface",
        arguments=("ip", "area", "netmask"),
        options=("<interface>         - Mention the interface",),
        handler=FunctionHandler(cmd_network),
    ),
    CommandDescriptor(
        name="redistribute",
        label="redistribute ospf|rip",
        description="Redistribute OSPF and RIP routes",
        subcommands=("rip", "ospf"),
        handler=FunctionHandler(cmd_redistribute),
    ),
    CommandDescriptor(
        name="valid",
        label="valid ospf|rip",
        description="Write the previous configuration to the routing manager",
        subcommands=("rip", "ospf"),
        handler=FunctionHandler(cmd_valid),
    ),
    CommandDescriptor(
        name="add",
        label="add",
        description="Adds a bridge or a routing protocol to an interface",
        subcommands=("bridge", "interface"),
        options=("<name>        - Define the specified name",),
        handler=FunctionHandler(cmd_add),
    ),
    CommandDescriptor(
        name="priority",
        label="priority level",
        description="Assigns priority level to an interface",
        subcommands=("level",),
        options=("<level>        - Set the priority level",),
        handler=FunctionHandler(cmd_priority),
    ),
]

COMMANDS.extend(
    CommandDescriptor(
        name=setting.name,
        label=setting.usage,
        description=description,
        subcommands=(setting.keyword,) if setting.keyword else (),
        options=(SETTING_OPTIONS[setting.name],),
        handler=SettingHandler(setting),
    )
    for setting, description in SETTINGS
)
