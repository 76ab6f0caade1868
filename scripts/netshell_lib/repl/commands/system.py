"""
System commands: reload, poweroff, debug, undebug, clear, help, hostname,
service, write, copy and clock.
"""

from pathlib import Path

from ...common import process
from ...common.colors import info, log
from ...common.prompts import confirm, prompt_answer
from ...config.constants import STARTUP_CONFIG_FILE
from ...config.running import save_running_config
from ...config.validation import validate_hostname
from ...device.clock import parse_clock_set, require_clock
from ...errors import ArgumentFormatError
from ...modes.graph import Mode
from ...registry.descriptor import CommandDescriptor, FunctionHandler
from ..display import show_help
from .checks import require_mode, require_no_args


def cmd_reload(session, args, clock):
    require_no_args(args, "reload")
    if not confirm("Proceed with reload?"):
        info("Reload aborted.")
        return
    process.run_process("sudo", ["reboot"])


def cmd_poweroff(session, args, clock):
    require_no_args(args, "poweroff")
    if not confirm("Do you want to shutdown the PC?"):
        info("Poweroff aborted.")
        return
    process.run_process("sudo", ["shutdown", "now"])


def debug_all(session, args, command: str = "debug all") -> None:
    """Turn on all debugging after a [no]-default confirmation."""
    require_no_args(args, command)
    answer = prompt_answer("This may severely impact network performance. Continue? (yes/[no]):")
    answer = (answer or "").lower()
    if answer in ("yes", "y"):
        session.config.set_feature("debug_all", True)
        print("All possible debugging has been turned on")
    elif answer in ("no", "n", ""):
        print("Returned")
    else:
        raise ArgumentFormatError("Invalid input. Please enter 'yes' or 'no'.")


def undebug_all(session, args, command: str = "undebug all") -> None:
    require_no_args(args, command)
    session.config.set_feature("debug_all", False)
    print("All possible debugging has been turned off")


def cmd_debug(session, args, clock):
    require_mode(session, (Mode.PRIVILEGED,),
                 "The 'debug all' command is only available in Privileged EXEC mode.")
    if not args or args[0] != "all":
        raise ArgumentFormatError("Usage: debug all")
    debug_all(session, args[1:])


def cmd_undebug(session, args, clock):
    require_mode(session, (Mode.PRIVILEGED,),
                 "The 'undebug all' command is only available in Privileged EXEC mode.")
    if not args or args[0] != "all":
        raise ArgumentFormatError("Usage: undebug all")
    undebug_all(session, args[1:])


def cmd_clear(session, args, clock):
    if args:
        raise ArgumentFormatError("Invalid command. Available commands: clear")
    process.run_process("clear")


def cmd_help(session, args, clock):
    show_help(session)


def cmd_hostname(session, args, clock):
    require_mode(session, (Mode.CONFIG,),
                 "The 'hostname' command is only available in Global Configuration Mode.")
    if len(args) != 1:
        raise ArgumentFormatError("Please specify a new hostname. Usage: hostname <new_hostname>")
    new_hostname = args[0]
    if not validate_hostname(new_hostname):
        raise ArgumentFormatError(
            "Invalid hostname format. Hostname must start with a letter and contain "
            "only letters, numbers, underscores, or hyphens."
        )
    session.config.hostname = new_hostname
    session.refresh_prompt()
    log(f"Hostname changed to '{new_hostname}'")


def cmd_service(session, args, clock):
    require_mode(session, (Mode.CONFIG,),
                 "The 'service password-encryption' command is only available in Global Configuration Mode.")
    if args != ["password-encryption"]:
        raise ArgumentFormatError(
            "Invalid arguments provided to 'service password-encryption'. "
            "This command does not accept additional arguments."
        )
    session.config.password_encryption = True
    log("Password encryption enabled.")


def cmd_write(session, args, clock):
    require_mode(session, (Mode.USER, Mode.PRIVILEGED, Mode.CONFIG),
                 "The 'write memory' command is only available in EXEC modes and Global configuration mode.")
    if args != ["memory"]:
        raise ArgumentFormatError(
            "Invalid arguments provided to 'write memory'. "
            "This command does not accept additional arguments."
        )
    print("Building configuration...")
    save_running_config(session)
    print("[OK]")


def copy_running_config(session, args) -> None:
    """copy running-config startup-config|<file-name>"""
    if len(args) != 2 or args[0] != "running-config":
        raise ArgumentFormatError("Usage: copy running-config startup-config|<file-name>")
    destination = STARTUP_CONFIG_FILE if args[1] == "startup-config" else Path(args[1])
    save_running_config(session, destination)
    log(f"Running configuration copied to {args[1]}")


def cmd_copy(session, args, clock):
    require_mode(session, (Mode.PRIVILEGED,),
                 "The 'copy' command is only available in Privileged EXEC mode")
    copy_running_config(session, args)


def set_clock(args, clock) -> None:
    """clock set hh:mm:ss day month year"""
    clock = require_clock(clock)
    clock.set(parse_clock_set(args))
    log(f"Clock set to {clock.format_now()}")


def cmd_clock(session, args, clock):
    set_clock(args, clock)


COMMANDS = [
    CommandDescriptor(
        name="reload",
        label="reload",
        description="Reload the system",
        handler=FunctionHandler(cmd_reload),
    ),
    CommandDescriptor(
        name="poweroff",
        label="poweroff",
        description="Shutdown the Management PC",
        handler=FunctionHandler(cmd_poweroff),
    ),
    CommandDescriptor(
        name="debug",
        label="debug all",
        description="To turn on all the possible debug levels",
        subcommands=("all",),
        handler=FunctionHandler(cmd_debug),
    ),
    CommandDescriptor(
        name="undebug",
        label="undebug all",
        description="Turning off all possible debugging processes",
        subcommands=("all",),
        handler=FunctionHandler(cmd_undebug),
    ),
    CommandDescriptor(
        name="clear",
        label="clear",
        description="Clear the terminal screen",
        handler=FunctionHandler(cmd_clear),
    ),
    CommandDescriptor(
        name="help",
        label="help",
        description="Display available commands for current mode",
        handler=FunctionHandler(cmd_help),
    ),
    CommandDescriptor(
        name="hostname",
        label="hostname",
        description="Set the device hostname",
        options=("<new-hostname>    - Enter a new hostname",),
        handler=FunctionHandler(cmd_hostname),
    ),
    CommandDescriptor(
        name="service",
        label="service password-encryption",
        description="Enable password encryption",
        subcommands=("password-encryption",),
        handler=FunctionHandler(cmd_service),
    ),
    CommandDescriptor(
        name="write",
        label="write memory",
        description="Save the running configuration to the startup configuration",
        subcommands=("memory",),
        handler=FunctionHandler(cmd_write),
    ),
    CommandDescriptor(
        name="copy",
        label="copy",
        description="Copy running configuration",
        subcommands=("running-config",),
        arguments=("startup-config",),
        options=("<file_name>     - Enter the file name or 'startup-config'",),
        handler=FunctionHandler(cmd_copy),
    ),
    CommandDescriptor(
        name="clock",
        label="clock set",
        description="Set the device clock (clock set <hh:mm:ss> <day> <month> <year>)",
        subcommands=("set",),
        handler=FunctionHandler(cmd_clock),
    ),
]
