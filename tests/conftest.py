"""
Shared fixtures for the netshell tests.

Every test runs in its own temporary directory so history and startup
configuration files never touch the checkout. System commands are replaced
with recorders; nothing here spawns a process.
"""

import pytest

from netshell_lib.common import process
from netshell_lib.device.clock import Clock
from netshell_lib.errors import ExternalCommandFailure
from netshell_lib.modes.loader import load_profile
from netshell_lib.repl.commands import build_command_registry
from netshell_lib.repl.context import CliSession
from netshell_lib.repl.dispatcher import handle_command

INTERFACES = ["eth0", "eth1", "lo"]


class ProcessRecorder:
    """Stands in for the process module's run functions."""

    def __init__(self):
        self.calls = []
        self.fail_on = set()

    def run(self, command, args=()):
        self.calls.append((command, *args))
        if command in self.fail_on or (args and args[0] in self.fail_on):
            raise ExternalCommandFailure(f"{command} command failed with exit status: 1")

    def capture(self, command, args=()):
        self.run(command, args)
        return f"{command} output\n"


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def processes(monkeypatch):
    recorder = ProcessRecorder()
    monkeypatch.setattr(process, "run_process", recorder.run)
    monkeypatch.setattr(process, "capture_output", recorder.capture)
    monkeypatch.setattr(process, "run_interactive", recorder.run)
    monkeypatch.setattr(process, "list_interfaces", lambda *a: list(INTERFACES))
    return recorder


@pytest.fixture
def profile():
    return load_profile("network_appliance")


@pytest.fixture
def defense_profile():
    return load_profile("defense_platform")


@pytest.fixture
def session(profile, processes):
    return CliSession(profile=profile, registry=build_command_registry(profile))


@pytest.fixture
def defense_session(defense_profile, processes):
    return CliSession(profile=defense_profile, registry=build_command_registry(defense_profile))


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def run(clock):
    """Dispatch lines one after another; returns the last result."""
    def _run(session, *lines):
        result = None
        for line in lines:
            result = handle_command(line, session, clock)
        return result
    return _run
