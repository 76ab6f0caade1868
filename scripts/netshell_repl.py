#!/usr/bin/env python3
"""
netshell_repl.py - Interactive Cisco-style shell for the network appliance

Starts the shell with the profile named by NETSHELL_PROFILE (default:
network_appliance).
"""

import sys

from netshell_lib.repl.loop import run_repl


if __name__ == "__main__":
    sys.exit(run_repl())
