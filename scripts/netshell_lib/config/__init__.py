"""
netshell_lib.config - Session configuration for netshell.

This package contains:
- constants: Path constants and defaults (HISTORY_FILE, TEMPLATE_DIR, etc.)
- dataclasses: CliConfig and StaticRoute
- validation: IP address, netmask and hostname validation
- running: Running/startup configuration rendering and persistence
"""

from .constants import (
    HISTORY_FILE,
    STARTUP_CONFIG_FILE,
    TEMPLATE_DIR,
    PROFILE_DEFINITIONS_DIR,
    SYS_CLASS_NET,
    DEFAULT_PROFILE,
    DEFAULT_HOSTNAME,
    selected_profile,
)

from .validation import (
    validate_ipv4,
    validate_netmask,
    netmask_to_prefix,
    ip_with_cidr,
    validate_hostname,
)

from .dataclasses import (
    StaticRoute,
    CliConfig,
)

__all__ = [
    # Constants
    'HISTORY_FILE',
    'STARTUP_CONFIG_FILE',
    'TEMPLATE_DIR',
    'PROFILE_DEFINITIONS_DIR',
    'SYS_CLASS_NET',
    'DEFAULT_PROFILE',
    'DEFAULT_HOSTNAME',
    'selected_profile',
    # Validation
    'validate_ipv4',
    'validate_netmask',
    'netmask_to_prefix',
    'ip_with_cidr',
    'validate_hostname',
    # Dataclasses
    'StaticRoute',
    'CliConfig',
]
