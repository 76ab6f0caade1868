"""
Child process utilities.

Every system command the shell runs goes through this module so handlers
never touch subprocess directly, and tests can replace these functions.
"""

import os
import signal
import subprocess
from pathlib import Path
from typing import Sequence

from ..config.constants import SYS_CLASS_NET
from ..errors import ExternalCommandFailure, ResourceUnavailable


def run_process(command: str, args: Sequence[str] = ()) -> None:
    """
    Run a command, streaming its stdout line by line.

    Raises:
        ExternalCommandFailure: spawn failure or non-zero exit status
    """
    try:
        proc = subprocess.Popen(
            [command, *args],
            stdout=subprocess.PIPE,
            text=True,
        )
    except OSError as e:
        raise ExternalCommandFailure(f"Failed to execute {command}: {e}") from e

    with proc:
        for line in proc.stdout:
            print(line.rstrip("\n"))
        returncode = proc.wait()

    if returncode != 0:
        raise ExternalCommandFailure(
            f"{command} command failed with exit status: {returncode}"
        )


def capture_output(command: str, args: Sequence[str] = ()) -> str:
    """Run a command and return its stdout."""
    try:
        result = subprocess.run(
            [command, *args],
            capture_output=True,
            text=True,
            timeout=30,
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise ExternalCommandFailure(f"Failed to execute {command}: {e}") from e

    if result.returncode != 0:
        raise ExternalCommandFailure(
            f"{command} command failed with exit status: {result.returncode}"
        )
    return result.stdout


def run_interactive(command: str, args: Sequence[str] = ()) -> None:
    """Run a command attached to the terminal (ssh and similar)."""
    try:
        returncode = subprocess.call([command, *args])
    except OSError as e:
        raise ExternalCommandFailure(f"Failed to execute {command}: {e}") from e

    if returncode != 0:
        raise ExternalCommandFailure(
            f"{command} command failed with exit status: {returncode}"
        )


def list_interfaces(net_dir: Path = SYS_CLASS_NET) -> list[str]:
    """Return the interface names known to the kernel, sorted."""
    try:
        return sorted(entry.name for entry in net_dir.iterdir())
    except OSError as e:
        raise ResourceUnavailable(f"Failed to read interfaces from {net_dir}: {e}") from e


def terminate_ssh_session() -> None:
    """Hang up the SSH session this shell runs under."""
    if not os.environ.get("SSH_CONNECTION"):
        raise ResourceUnavailable("No SSH session to terminate.")
    os.kill(os.getppid(), signal.SIGHUP)
