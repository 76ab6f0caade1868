"""
Main REPL loop for netshell.

Reads lines with prompt_toolkit, hands them to the dispatcher and keeps the
prompt in step with the session. Ctrl+C and Ctrl+Z, whether typed at the
prompt or delivered as signals while a command runs, only set the
InterruptFlag; the loop polls it before each read and returns the session
to the profile's interrupt mode.
"""

import signal
import sys
import threading
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.styles import Style

from ..common.colors import error, heading
from ..config.constants import HISTORY_FILE, selected_profile
from ..device.clock import Clock
from ..errors import ProfileValidationError, RegistryError
from ..modes.loader import load_profile
from .commands import build_command_registry
from .completer import CommandCompleter
from .context import CliSession
from .dispatcher import DispatchResult, handle_command

NETSHELL_STYLE = Style.from_dict({
    'prompt': '#00aa00 bold',
    'completion-menu.completion': 'bg:#333333 #ffffff',
    'completion-menu.meta.completion': 'bg:#444444 #aaaaaa',
})

EXIT_CLI = "exit cli"


class InterruptFlag:
    """'Return to privileged mode' request, safe to set from signal handlers."""

    def __init__(self):
        self._event = threading.Event()

    def request(self, *_args) -> None:
        self._event.set()

    def consume(self) -> bool:
        """Return True once per request."""
        if self._event.is_set():
            self._event.clear()
            return True
        return False


def install_signal_handlers(flag: InterruptFlag) -> None:
    """Route SIGINT and SIGTSTP to the flag instead of killing or stopping the shell."""
    signal.signal(signal.SIGINT, flag.request)
    if hasattr(signal, "SIGTSTP"):
        signal.signal(signal.SIGTSTP, flag.request)


def build_key_bindings(flag: InterruptFlag) -> KeyBindings:
    kb = KeyBindings()

    @kb.add("c-z")
    def _(event):
        flag.request()
        event.app.exit(result="")

    return kb


def return_to_interrupt_mode(session: CliSession) -> bool:
    """Leave any mode but the root for the interrupt mode. Returns True if moved."""
    profile = session.profile
    if session.mode == profile.root_mode:
        return False
    profile.graph.force(profile.interrupt_mode, session)
    session.selected_interface = None
    return True


def process_line(line: str, session: CliSession, clock,
                 history_file: Path = HISTORY_FILE) -> Optional[DispatchResult]:
    """
    Handle one line read from the prompt.

    Returns:
        The dispatch result, or None when the shell should exit
    """
    text = line.strip()
    if text == EXIT_CLI:
        print("Exiting CLI...")
        history_file.unlink(missing_ok=True)
        return None
    if text and not text.endswith("?"):
        session.history.append(text)
    return handle_command(text, session, clock)


def run_repl(profile_name: Optional[str] = None) -> int:
    """Main REPL entry point."""
    profile_name = profile_name or selected_profile()
    try:
        profile = load_profile(profile_name)
        registry = build_command_registry(profile)
    except (FileNotFoundError, ProfileValidationError, RegistryError) as e:
        error(str(e))
        return 1

    session = CliSession(profile=profile, registry=registry)
    clock = Clock()

    history = FileHistory(str(HISTORY_FILE))
    session.history = list(reversed(list(history.load_history_strings())))

    flag = InterruptFlag()
    install_signal_handlers(flag)

    prompt_session = PromptSession(
        history=history,
        completer=CommandCompleter(session),
        style=NETSHELL_STYLE,
        key_bindings=build_key_bindings(flag),
    )

    print()
    heading(f"{profile.display_name} CLI")
    print("Type 'help' for commands, '?' for completions, 'exit cli' to quit")
    print()

    pending = ""
    while True:
        if flag.consume() and return_to_interrupt_mode(session):
            print()

        try:
            line = prompt_session.prompt(session.prompt, default=pending)
        except KeyboardInterrupt:
            flag.request()
            pending = ""
            continue
        except EOFError:
            print()
            error("End of input")
            return 1

        result = process_line(line, session, clock)
        if result is None:
            return 0
        pending = result.pending if result.query else ""


def main() -> None:
    sys.exit(run_repl())


if __name__ == "__main__":
    main()
