"""
netshell_lib.registry - Command registry

This package contains:
- descriptor: CommandDescriptor, CommandHandler, FunctionHandler
- matching: Abbreviation matching (PrefixMatch, lookup_by_prefix, resolve_token)
- registry: CommandRegistry
"""

from .descriptor import CommandDescriptor, CommandHandler, FunctionHandler
from .matching import MatchKind, PrefixMatch, lookup_by_prefix, resolve_token
from .registry import CommandRegistry

__all__ = [
    'CommandDescriptor', 'CommandHandler', 'FunctionHandler',
    'MatchKind', 'PrefixMatch', 'lookup_by_prefix', 'resolve_token',
    'CommandRegistry',
]
