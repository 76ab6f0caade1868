"""
netshell_lib.repl.display - Display functions for the REPL

This package contains the functions behind the show and help commands:
- config: Running/startup configuration, history and help
- live: Clock, version and host state queried from the system
"""

from .config import (
    show_running_config,
    show_startup_config,
    show_history,
    show_help,
)

from .live import (
    show_clock,
    show_uptime,
    show_version,
    show_sessions,
    show_controllers,
    show_interfaces,
    show_ip_interface_brief,
    show_ip_interface,
    show_ip_route,
    show_login,
    show_processes,
    show_arp,
)

__all__ = [
    # Config display
    'show_running_config',
    'show_startup_config',
    'show_history',
    'show_help',
    # Live display
    'show_clock',
    'show_uptime',
    'show_version',
    'show_sessions',
    'show_controllers',
    'show_interfaces',
    'show_ip_interface_brief',
    'show_ip_interface',
    'show_ip_route',
    'show_login',
    'show_processes',
    'show_arp',
]
