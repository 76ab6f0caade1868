"""
Configuration constants for netshell.

Paths and default values used across the shell.
"""

import os
from pathlib import Path


# Files written relative to the shell's working directory
HISTORY_FILE = Path("history.txt")
STARTUP_CONFIG_FILE = Path("startup-config.conf")

# Template and profile paths shipped with the package
TEMPLATE_DIR = Path(__file__).parent / "templates"
PROFILE_DEFINITIONS_DIR = Path(__file__).parent.parent / "modes" / "definitions"

# Kernel interface listing
SYS_CLASS_NET = Path("/sys/class/net")

# Profile selection
DEFAULT_PROFILE = "network_appliance"
PROFILE_ENV_VAR = "NETSHELL_PROFILE"

DEFAULT_HOSTNAME = "Network"
DEFAULT_INTERFACE = "FastEthernet0/1"
SOFTWARE_VERSION = "15.1"


def selected_profile() -> str:
    """Profile name from the environment, or the default."""
    return os.environ.get(PROFILE_ENV_VAR, DEFAULT_PROFILE)
