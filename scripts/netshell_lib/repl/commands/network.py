"""
Network commands: ifconfig, ip, no, shutdown, ping, traceroute, ssh and
dhcp_enable.

Each handler validates its arguments before running a system command and
updates SharedState only after the command succeeded.
"""

from ...common import process
from ...common.colors import log, warn
from ...config.dataclasses import StaticRoute
from ...config.validation import ip_with_cidr, validate_ipv4
from ...errors import ArgumentFormatError, ExternalCommandFailure
from ...modes.graph import Mode
from ...registry.descriptor import CommandDescriptor, FunctionHandler
from .checks import (
    interface_names,
    require_known_interface,
    require_mode,
    require_no_args,
    require_selected_interface,
)

IP_USAGE = (
    "Use 'ip address <IP address> <subnet_mask>' or "
    "'ip route <ip_address> <netmask> <exit_interface> <next_hop>'"
)
ROUTE_USAGE = "ip route <ip_address> <netmask> <exit_interface> <next_hop>"

SSH_VERSION = "OpenSSH_8.9p1 Ubuntu-3ubuntu0.1, OpenSSL 3.0.2 15 Mar 2022"
SSH_VERSIONS = ("1", "2")


def _cidr(ip: str, mask: str) -> str:
    try:
        return ip_with_cidr(ip, mask)
    except ValueError as e:
        raise ArgumentFormatError(str(e)) from e


def _parse_route(args) -> StaticRoute:
    """Validate '<ip_address> <netmask> <exit_interface> <next_hop>'."""
    destination, netmask, exit_interface, next_hop = args
    _cidr(destination, netmask)
    if not validate_ipv4(next_hop):
        raise ArgumentFormatError(f"Invalid next hop: {next_hop}")
    require_known_interface(exit_interface)
    return StaticRoute(destination, netmask, exit_interface, next_hop)


def cmd_ifconfig(session, args, clock):
    if not args:
        print("System Network Interfaces:")
        print("-------------------------")
        print(process.capture_output("ifconfig"))
        return
    if len(args) != 1:
        raise ArgumentFormatError("Usage: ifconfig [<interface>]")

    interface = args[0]
    print(f"Interface: {interface}")
    print("-------------------------")
    try:
        details = process.capture_output("ifconfig", [interface])
    except ExternalCommandFailure:
        details = ""
    if not details.strip():
        print(f"Interface '{interface}' not found.")
    else:
        print(details)


def _ip_address(session, args):
    if len(args) == 1:
        print("Interface details")
        process.run_process("ip", ["a"])
        return
    if len(args) != 3:
        raise ArgumentFormatError("Invalid command format. Use: 'ip address <IP address> <subnet_mask>'")
    require_mode(session, (Mode.INTERFACE,),
                 "The 'ip address' command is only available in Interface Configuration mode.")
    interface = require_selected_interface(session)
    ip, netmask = args[1], args[2]
    cidr = _cidr(ip, netmask)

    process.run_process("sudo", ["ifconfig", interface, ip, "netmask", netmask, "up"])

    if session.state.set_address(interface, ip, netmask):
        print(f"Updated interface {interface} with IP {ip} and netmask {netmask}")
    else:
        print(f"Assigned IP {ip} and netmask {netmask} to interface {interface}")
    log(f"IP address {cidr} is configured to the interface {interface}")


def _ip_route(session, args):
    require_mode(session, (Mode.CONFIG,),
                 "The 'ip route' command is only available in Global Configuration mode.")
    if len(args) != 5:
        raise ArgumentFormatError(f"Usage: {ROUTE_USAGE}")
    route = _parse_route(args[1:])
    cidr = _cidr(route.destination, route.netmask)

    print(f"Adding route to {cidr} via {route.next_hop} on interface {route.exit_interface}")
    process.run_process("sudo", ["ip", "route", "add", cidr, "via", route.next_hop,
                                 "dev", route.exit_interface])
    session.state.add_route(route)
    log("Route added successfully")


def cmd_ip(session, args, clock):
    if not args:
        raise ArgumentFormatError(f"Incomplete command. {IP_USAGE}")
    if args[0] == "address":
        _ip_address(session, args)
    elif args[0] == "route":
        _ip_route(session, args)
    else:
        raise ArgumentFormatError(f"Invalid command format. {IP_USAGE}")


def cmd_shutdown(session, args, clock):
    require_mode(session, (Mode.INTERFACE,),
                 "The 'shutdown' command is only available in Interface Configuration mode.")
    require_no_args(args, "shutdown")
    interface = require_selected_interface(session)
    process.run_process("sudo", ["ip", "link", "set", interface, "down"])
    session.state.set_link(interface, False)
    log(f"interface {interface} is set to down")


def _no_shutdown(session):
    require_mode(session, (Mode.INTERFACE,),
                 "The 'no shutdown' command is only available in Interface Configuration mode.")
    interface = require_selected_interface(session)
    process.run_process("sudo", ["ip", "link", "set", interface, "up"])
    session.state.set_link(interface, True)
    try:
        process.run_process("sudo", ["netplan", "apply"])
    except ExternalCommandFailure as e:
        warn(f"netplan apply failed: {e}")
    log(f"interface {interface} is set to up")


def _no_ip_route(session, args):
    require_mode(session, (Mode.CONFIG,),
                 "The 'no ip route' command is only available in configuration mode.")
    if len(args) != 4:
        raise ArgumentFormatError(f"Usage: no {ROUTE_USAGE}")
    route = _parse_route(args)
    cidr = _cidr(route.destination, route.netmask)

    print(f"Deleting route to {cidr} via {route.next_hop} on interface {route.exit_interface}")
    process.run_process("sudo", ["ip", "route", "del", cidr, "via", route.next_hop,
                                 "dev", route.exit_interface])
    session.state.remove_route(route.destination, route.netmask)
    log("Route deleted successfully")


def _no_ip_address(session, args):
    require_mode(session, (Mode.INTERFACE,),
                 "The 'no ip address' command is only available in Interface Configuration mode.")
    if len(args) != 2:
        raise ArgumentFormatError("Usage: no ip address <IP address> <subnet_mask>")
    interface = require_selected_interface(session)
    cidr = _cidr(args[0], args[1])

    process.run_process("sudo", ["ip", "addr", "del", cidr, "dev", interface])
    session.state.remove_address(interface)
    log(f"IP address {cidr} is removed from the interface {interface}")


def cmd_no(session, args, clock):
    if args == ["shutdown"]:
        _no_shutdown(session)
    elif len(args) >= 2 and args[0] == "ip" and args[1] == "route":
        _no_ip_route(session, args[2:])
    elif len(args) >= 2 and args[0] == "ip" and args[1] == "address":
        _no_ip_address(session, args[2:])
    else:
        raise ArgumentFormatError(
            "Invalid arguments provided to 'no'. Use 'no shutdown', "
            "'no ip address <IP address> <subnet_mask>' or 'no ip route ...'"
        )


def cmd_ping(session, args, clock):
    if len(args) != 1:
        raise ArgumentFormatError("Invalid syntax. Usage: ping <ip>")
    target = args[0]
    print(f"Pinging {target} with 32 bytes of data:")
    process.run_process("ping", ["-c", "4", "-s", "32", target])


def cmd_traceroute(session, args, clock):
    if len(args) != 1:
        raise ArgumentFormatError("Invalid syntax. Usage: traceroute <ip/hostname>")
    target = args[0]
    print(f"Tracing route to {target} over a maximum of 30 hops")
    process.run_process("traceroute", ["-n", "-m", "30", target])
    print("Trace Completed.")


def _ssh_help():
    print("SSH Command Usage:")
    print("  ssh -v [version]           Display or change the SSH version")
    print("  ssh -l username@ip-address Login to remote server")
    print()
    print("Examples:")
    print("  ssh -l admin@192.168.1.1")


def cmd_ssh(session, args, clock):
    if not args:
        raise ArgumentFormatError("Missing parameters. Use 'ssh -h' for help")
    option = args[0]

    if option in ("-h", "--help"):
        _ssh_help()
    elif option == "-v":
        if len(args) == 1:
            print(SSH_VERSION)
        elif len(args) == 2 and args[1] in SSH_VERSIONS:
            session.config.settings["ssh.version"] = args[1]
            log(f"Changed to SSH version {args[1]}")
        else:
            raise ArgumentFormatError("Invalid usage. ssh -v [1|2]")
    elif option == "-l":
        if len(args) != 2 or "@" not in args[1]:
            raise ArgumentFormatError(
                "Invalid format. Use: ssh -l username@ip-address (e.g. ssh -l admin@192.168.1.1)"
            )
        username, ip = args[1].split("@", 1)
        if not username or not validate_ipv4(ip):
            raise ArgumentFormatError(f"Invalid SSH target: {args[1]}")
        process.run_interactive("ssh", [f"{username}@{ip}"])
        log("Connected successfully!")
    else:
        raise ArgumentFormatError(f"Invalid SSH option: {option}. Use 'ssh -h' for help")


def cmd_dhcp_enable(session, args, clock):
    require_no_args(args, "dhcp_enable")
    steps = (
        (["dhclient", "-r"], "Removed existing DHCP configurations", "Failed to release DHCP"),
        (["dhclient"], "Enabled DHCP configurations", "Failed to enable DHCP"),
        (["systemctl", "restart", "NetworkManager"], "Restarted network services",
         "Failed to restart network services"),
    )
    for command, done, failed in steps:
        try:
            process.run_process("sudo", command)
        except ExternalCommandFailure as e:
            warn(f"{failed}: {e}")
        else:
            log(done)


COMMANDS = [
    CommandDescriptor(
        name="ifconfig",
        label="ifconfig",
        description="Display network interface configuration",
        options=("<interface>         - Network interface name",),
        dynamic_values=interface_names,
        handler=FunctionHandler(cmd_ifconfig),
    ),
    CommandDescriptor(
        name="ip",
        label="ip",
        description="Configure interface addresses and static routes",
        subcommands=("address", "route"),
        handler=FunctionHandler(cmd_ip),
    ),
    CommandDescriptor(
        name="no",
        label="no",
        description="Negate a command (no shutdown, no ip address, no ip route)",
        subcommands=("shutdown", "ip"),
        handler=FunctionHandler(cmd_no),
    ),
    CommandDescriptor(
        name="shutdown",
        label="shutdown",
        description="Disable the selected network interface.",
        handler=FunctionHandler(cmd_shutdown),
    ),
    CommandDescriptor(
        name="ping",
        label="ping",
        description="Ping a specific IP address to check reachability",
        options=("<ip-address>    - Enter the ip-address",),
        handler=FunctionHandler(cmd_ping),
    ),
    CommandDescriptor(
        name="traceroute",
        label="traceroute",
        description="Trace the route to a specific IP address or hostname",
        options=("<ip-address/hostname>    - Enter the IP address or hostname",),
        handler=FunctionHandler(cmd_traceroute),
    ),
    CommandDescriptor(
        name="ssh",
        label="ssh",
        description="Establish SSH connection to a remote host",
        subcommands=("-v", "-l", "-h", "--help"),
        handler=FunctionHandler(cmd_ssh),
    ),
    CommandDescriptor(
        name="dhcp_enable",
        label="dhcp_enable",
        description="Enable DHCP for network connectivity",
        handler=FunctionHandler(cmd_dhcp_enable),
    ),
]
