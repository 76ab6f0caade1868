"""
Terminal output helpers for the netshell CLI.

Status messages printed around command output go through these helpers so
the markers stay consistent. Setting NO_COLOR in the environment turns the
escape codes off.
"""

import os


class Colors:
    """ANSI escape codes, empty when NO_COLOR is set."""
    _enabled = "NO_COLOR" not in os.environ

    RED = "\033[0;31m" if _enabled else ""
    GREEN = "\033[0;32m" if _enabled else ""
    YELLOW = "\033[1;33m" if _enabled else ""
    CYAN = "\033[0;36m" if _enabled else ""
    BOLD = "\033[1m" if _enabled else ""
    NC = "\033[0m" if _enabled else ""  # Reset


def _emit(color: str, marker: str, msg: str) -> None:
    print(f"{color}{marker}{Colors.NC} {msg}")


def log(msg: str) -> None:
    """Report a completed change in green."""
    _emit(Colors.GREEN, "[+]", msg)


def warn(msg: str) -> None:
    """Report a non-fatal problem in yellow; the command carries on."""
    _emit(Colors.YELLOW, "[!]", msg)


def error(msg: str) -> None:
    """Report a failed command in red."""
    _emit(Colors.RED, "[ERROR]", msg)


def info(msg: str) -> None:
    _emit(Colors.CYAN, "[i]", msg)


def heading(title: str) -> None:
    """Bold title above a block of command output."""
    print(f"{Colors.BOLD}{title}{Colors.NC}")
