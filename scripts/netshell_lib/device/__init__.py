"""
netshell_lib.device - Device services used by command handlers

This module provides:
- state: SharedState (selected interface, addresses, routes, link status)
- credentials: CredentialStore and password hashing
- clock: Settable clock, uptime and 'clock set' parsing
"""

from .state import SharedState
from .credentials import CredentialStore, hash_password
from .clock import Clock, parse_clock_set, resolve_month, require_clock

__all__ = [
    'SharedState',
    'CredentialStore', 'hash_password',
    'Clock', 'parse_clock_set', 'resolve_month', 'require_clock',
]
