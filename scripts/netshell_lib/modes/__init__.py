"""
netshell_lib.modes - Operating modes and profiles

This package contains:
- graph: Mode names and the ModeGraph (enter/exit/prompt)
- dataclasses: ModeSpec and Profile
- loader: YAML profile loading and validation
- definitions/: Shipped profiles (network_appliance, defense_platform)
"""

from .graph import Mode, ModeGraph
from .dataclasses import ModeSpec, Profile
from .loader import (
    validate_profile_definition,
    parse_profile_definition,
    load_profile,
    list_profiles,
)

__all__ = [
    'Mode', 'ModeGraph',
    'ModeSpec', 'Profile',
    'validate_profile_definition',
    'parse_profile_definition',
    'load_profile',
    'list_profiles',
]
