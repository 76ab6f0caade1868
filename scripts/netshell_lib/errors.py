"""
Exception types for netshell.

CliError and its subclasses are recoverable: the dispatcher reports them and
the shell keeps running with the session unchanged. RegistryError and
ProfileValidationError are raised while building the shell and are fatal.
"""

from typing import Sequence


class CliError(Exception):
    """Base class for errors reported back to the user at the prompt."""
    pass


class ModeViolation(CliError):
    """Command or mode transition not permitted in the current mode."""
    pass


class WrongModeError(ModeViolation):
    """Attempt to enter a mode from somewhere other than its parent."""
    pass


class AmbiguousAbbreviation(CliError):
    """A token is a prefix of more than one candidate."""

    def __init__(self, token: str, matches: Sequence[str]):
        self.token = token
        self.matches = tuple(matches)
        super().__init__(
            f"Ambiguous command: '{token}' could be {', '.join(self.matches)}"
        )


class UnknownCommand(CliError):
    """Token matches no registered command at all."""
    pass


class ArgumentFormatError(CliError):
    """Wrong argument count or shape for a command."""
    pass


class ExternalCommandFailure(CliError):
    """A child process could not be spawned or exited non-zero."""
    pass


class ResourceUnavailable(CliError):
    """A collaborator (clock, file, interface list) is not available."""
    pass


class NoParentMode(CliError):
    """Exit requested at the root mode."""
    pass


NoParentError = NoParentMode


class RegistryError(Exception):
    """Raised when the command registry is built incorrectly."""
    pass


class DuplicateCommandError(RegistryError):
    """Raised when a command name is registered twice."""
    pass


class ProfileValidationError(Exception):
    """Raised when a mode profile definition fails validation."""
    pass
