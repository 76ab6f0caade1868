"""
netshell_lib - Shared library for the netshell appliance CLI

This package contains the components of the Cisco-style interactive shell:
mode graph and profiles, command registry, dispatch and completion engines,
and the device services (clock, credentials, shared state) the command
handlers act on.
"""

__version__ = "1.0.0"
