"""
netshell_lib.repl - REPL components for netshell

This package contains the modular components of the interactive shell:
- context: CliSession and prompt generation
- dispatcher: Line dispatch with abbreviation resolution
- completer: '?' queries and tab completion
- hints: Completion hints beyond the first argument
- display/: Functions behind show and help
- commands/: Command handlers and registry assembly
- loop: The prompt_toolkit read loop
"""

from .context import CliSession, get_prompt_text
from .completer import CommandCompleter, complete_line, query_lines, resolve_candidates
from .dispatcher import DispatchResult, handle_command

__all__ = [
    'CliSession',
    'get_prompt_text',
    'CommandCompleter',
    'complete_line',
    'query_lines',
    'resolve_candidates',
    'DispatchResult',
    'handle_command',
]
