"""
Live state display functions for the netshell REPL.

These functions query the host (clock, kernel tables, hardware) and print
the result for the show commands.
"""

from ...common import process
from ...common.colors import heading, warn
from ...config.constants import SOFTWARE_VERSION
from ...device.clock import require_clock
from ...errors import ExternalCommandFailure


def show_clock(clock) -> None:
    """Show the device clock."""
    print(f"*{require_clock(clock).format_now()}")


def show_uptime(clock) -> None:
    """Show how long the shell has been up."""
    print(require_clock(clock).format_uptime())


def show_version(session, clock=None) -> None:
    """Show software version and uptime."""
    print(f"{session.profile.display_name} Software, Version {SOFTWARE_VERSION}")
    if clock is not None:
        print(clock.format_uptime())


def show_sessions() -> None:
    """Show running sessions."""
    process.run_process("ps")


def show_controllers() -> None:
    """Show USB and PCI controllers. A missing tool is reported, not fatal."""
    for title, command in (("USB Controllers", "lsusb"), ("PCI Controllers", "lspci")):
        heading(title)
        try:
            process.run_process(command)
        except ExternalCommandFailure as e:
            warn(f"Failed to show {title.lower()}: {e}")
        print()


def show_interfaces() -> None:
    """Show link state of all interfaces."""
    process.run_process("ip", ["link", "show"])


def show_ip_interface_brief() -> None:
    """Show addresses of all interfaces."""
    process.run_process("ip", ["a"])


def show_ip_interface(interface: str) -> None:
    """Show detail for one interface."""
    process.run_process("ifconfig", [interface])


def show_ip_route(session) -> None:
    """Show the kernel routing table, then routes configured in this session."""
    process.run_process("ip", ["route"])
    routes = session.state.routes()
    if routes:
        print()
        heading("Static routes configured in this session")
        for route in routes:
            print(f"  S  {route.destination} {route.netmask} via {route.next_hop} {route.exit_interface}")


def show_login() -> None:
    """Show the logged-in user."""
    process.run_process("id")


def show_processes() -> None:
    """Show processor information."""
    process.run_process("cat", ["/proc/cpuinfo"])


def show_arp() -> None:
    """Show the neighbour (ARP) table."""
    process.run_process("ip", ["neigh"])
