"""
Position hints for completion beyond the first argument.

Keys are word tuples starting with the resolved command name; "*" matches
any single word. The mode-qualified table is consulted before the generic
one. A PositionHint carries completable values and help lines; help lines
only appear in '?' output.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from ..device.clock import MONTHS
from ..modes.graph import Mode

ANY = "*"


@dataclass(frozen=True)
class PositionHint:
    values: tuple[str, ...] = ()
    help: tuple[str, ...] = ()


def _values(*values: str) -> PositionHint:
    return PositionHint(values=values)


def _help(*lines: str) -> PositionHint:
    return PositionHint(help=lines)


SHOW_IP = ("interface", "route")

POSITION_HINTS: dict[tuple[str, ...], PositionHint] = {
    # show
    ("show", "ip"): _values(*SHOW_IP),
    ("show", "ip", "interface"): PositionHint(
        values=("brief",),
        help=("<interface>        - Enter a valid interface name",),
    ),

    # do
    ("do", "clock"): _values("set"),
    ("do", "debug"): _values("all"),
    ("do", "undebug"): _values("all"),
    ("do", "copy"): _values("running-config"),
    ("do", "show", "ip"): _values(*SHOW_IP),
    ("do", "show", "ip", "interface"): PositionHint(
        values=("brief",),
        help=("<interface>        - Enter a valid interface name",),
    ),
    ("do", "copy", "running-config"): PositionHint(
        values=("startup-config",),
        help=("<file_name>     - Enter the file name or 'startup-config'",),
    ),
    ("do", "clock", "set"): _help("<hh:mm:ss>      - Enter the time in this specified format"),
    ("do", "clock", "set", ANY): _help("<day>      - Enter the day '1-31'"),
    ("do", "clock", "set", ANY, ANY): PositionHint(
        values=tuple(MONTHS),
        help=("<month>    - Enter a valid month",),
    ),
    ("do", "clock", "set", ANY, ANY, ANY): _help("<year>     - Enter the year '1993-2035'"),

    # clock
    ("clock", "set"): _help("<hh:mm:ss>      - Enter the time in this specified format"),
    ("clock", "set", ANY): _help("<day>      - Enter the day '1-31'"),
    ("clock", "set", ANY, ANY): PositionHint(
        values=tuple(MONTHS),
        help=("<month>    - Enter a valid month",),
    ),
    ("clock", "set", ANY, ANY, ANY): _help("<year>     - Enter the year '1993-2035'"),

    # copy
    ("copy", "running-config"): PositionHint(
        values=("startup-config",),
        help=("<file_name>     - Enter the file name or 'startup-config'",),
    ),

    # enable
    ("enable", "password"): _help("<password>   - Define the password"),
    ("enable", "secret"): _help("<secret>     - Define the secret"),
    ("enable", "bridge"): _help("<name>         - Define the specified name"),
    ("enable", "router"): _help("<name>         - Define the specified name"),
    ("enable", "router", ANY): _values("id"),
    ("enable", "router", ANY, "id"): _help("<ID>         - Define the ID"),
    ("enable", "protocol"): _help("<protocol>         - Define the protocol name"),
    ("enable", "protocol", ANY): _values("router"),
    ("enable", "protocol", ANY, "router"): _help("<name>         - Define the router name"),
    ("enable", "id"): _help("<ID>         - Define the ID"),
    ("enable", "vlan_routing"): _values("id"),
    ("enable", "vlan_routing", "id"): _help("<ID>         - Define the ID"),
    ("enable", "qos_manager"): _values("id"),
    ("enable", "qos_manager", "id"): _help("<ID>         - Define the ID"),
    ("enable", "dynamic_routing_manager"): _values("id"),
    ("enable", "dynamic_routing_manager", "id"): _help("<ID>         - Define the ID"),

    # disable
    ("disable", "dynamic_routing_manager"): _help("<ID>         - Define the ID"),

    # ssh
    ("ssh", "-l"): _help("<user_name>@<IP-address>  - Enter the user name and IP address"),
    ("ssh", "-v"): _help("<version>        - Enter the version you need to change"),

    # ip
    ("ip", "address"): _help("<IP_Address>   - Enter the IP Address"),
    ("ip", "address", ANY): _help("<subnet_mask>   - Enter the subnet mask"),
    ("ip", "route"): _help("<ip_address>   - Enter the destination network"),
    ("ip", "route", ANY): _help("<netmask>      - Enter the destination netmask"),
    ("ip", "route", ANY, ANY): _help("<exit_interface>  - Enter the exit interface"),
    ("ip", "route", ANY, ANY, ANY): _help("<next_hop>     - Enter the next hop address"),

    # no
    ("no", "ip"): _values("route", "address"),
    ("no", "ip", "address"): _help("<IP_Address>   - Enter the IP Address"),
    ("no", "ip", "address", ANY): _help("<subnet_mask>   - Enter the subnet mask"),
    ("no", "ip", "route"): _help("<ip_address>   - Enter the destination network"),
    ("no", "ip", "route", ANY): _help("<netmask>      - Enter the destination netmask"),
    ("no", "ip", "route", ANY, ANY): _help("<exit_interface>  - Enter the exit interface"),
    ("no", "ip", "route", ANY, ANY, ANY): _help("<next_hop>     - Enter the next hop address"),

    # dynamic routing
    ("network", ANY, "ip"): _help("<ip_address>              - Enter the ip address"),
    ("network", ANY, "netmask"): _help("<netmask>                 - Enter the netmask"),
    ("network", ANY, "area"): _help("<area>                    - Enter the area"),

    # vlan
    ("add", "bridge"): _help("<name>        - Define the bridge name"),
    ("add", "bridge", ANY): _values("interface"),
    ("add", "bridge", ANY, "interface"): _help("<interface_name>    - Define the interface name"),
    ("add", "interface"): _help("<interface_name>    - Define the interface name"),
    ("add", "interface", ANY): _values("protocol"),
    ("add", "interface", ANY, "protocol"): _help("<protocol>    - Define the protocol"),
    ("add", "interface", ANY, "protocol", ANY): _values("router"),
    ("add", "interface", ANY, "protocol", ANY, "router"): _help("<router_name>    - Define the router name"),

    # qos
    ("priority", "level", ANY): _values("interface"),
    ("priority", "level", ANY, "interface"): _help("<interface>    - Enter the interface name"),
}

MODE_POSITION_HINTS: dict[str, dict[tuple[str, ...], PositionHint]] = {
    Mode.QOS: {
        ("interface", ANY): PositionHint(
            values=("cpq", "beq"),
            help=("<cpq|beq>    - Specify the queue",),
        ),
        ("interface", ANY, ANY): _values("true", "false"),
    },
    Mode.AUTOD: {
        ("interface", ANY): PositionHint(
            values=("enable", "disable", "mode"),
            help=("<enable|disable>    - Specify the condition",),
        ),
        ("interface", ANY, "mode"): _help("<mode>      - Specify the mode"),
    },
}


def _matches(pattern: tuple[str, ...], words: Sequence[str]) -> bool:
    return len(pattern) == len(words) and all(
        p == ANY or p == w for p, w in zip(pattern, words)
    )


def lookup_position_hint(mode: str, words: Sequence[str]) -> Optional[PositionHint]:
    """
    Find the hint for the word after 'words' (command name first).

    Exact keys are tried before wildcard patterns; mode-qualified tables
    before the generic one.
    """
    key = tuple(words)
    for table in (MODE_POSITION_HINTS.get(mode, {}), POSITION_HINTS):
        if key in table:
            return table[key]
        for pattern, hint in table.items():
            if _matches(pattern, key):
                return hint
    return None
