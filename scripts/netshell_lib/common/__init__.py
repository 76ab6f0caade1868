"""
netshell_lib.common - Shared utilities

This module provides:
- colors: ANSI color codes and logging functions
- prompts: Interactive prompt utilities
- process: Child process execution and interface discovery
"""

from .colors import Colors, log, warn, error, info, heading
from .prompts import prompt_answer, prompt_secret, parse_confirmation, confirm

__all__ = [
    'Colors', 'log', 'warn', 'error', 'info', 'heading',
    'prompt_answer', 'prompt_secret', 'parse_confirmation', 'confirm',
]
