"""
Interactive prompt utilities for the shell.

Wrappers around prompt_toolkit for the secondary questions a command may
ask (confirmation, password entry).
"""

from typing import Optional

from prompt_toolkit import prompt

from ..errors import ArgumentFormatError


def prompt_answer(question: str) -> Optional[str]:
    """
    Ask a free-form question.

    Returns:
        The stripped answer, or None if cancelled (Ctrl+C/Ctrl+D)
    """
    try:
        return prompt(f"{question} ").strip()
    except (KeyboardInterrupt, EOFError):
        return None


def prompt_secret(label: str = "Password:") -> Optional[str]:
    """Prompt for a password without echoing it. None if cancelled."""
    try:
        return prompt(f"{label} ", is_password=True)
    except (KeyboardInterrupt, EOFError):
        return None


def parse_confirmation(answer: Optional[str]) -> bool:
    """
    Interpret a [confirm] answer. An empty answer confirms.

    Raises:
        ArgumentFormatError: answer is neither yes nor no
    """
    if answer is None:
        return False
    answer = answer.lower()
    if answer in ("yes", "y", ""):
        return True
    if answer in ("no", "n"):
        return False
    raise ArgumentFormatError("Invalid input. Please enter 'yes', 'y', or 'no'.")


def confirm(question: str) -> bool:
    """Ask a [confirm] question and return whether to proceed."""
    return parse_confirmation(prompt_answer(f"{question} [confirm]"))
