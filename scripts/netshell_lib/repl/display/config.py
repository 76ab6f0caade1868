"""
Configuration display functions for the netshell REPL.

Running/startup configuration, command history and the help listing.
"""

from rich.console import Console
from rich.table import Table

from ...config.running import read_startup_config, render_running_config

console = Console()


def show_running_config(session) -> None:
    """Show the running configuration."""
    print(render_running_config(session))


def show_startup_config(session) -> None:
    """Show the saved startup configuration."""
    print("Reading startup configuration file...")
    print()
    contents = read_startup_config()
    if contents is None:
        print("startup-config is not present")
        return
    if session.config.last_written:
        print(f"Startup configuration (last saved: {session.config.last_written}):")
    else:
        print("Startup configuration file contents:")
    print()
    print(contents)


def show_history(session) -> None:
    """Show the commands entered in this and earlier sessions."""
    for index, line in enumerate(session.history, 1):
        print(f"  {index:>4}  {line}")


def show_help(session) -> None:
    """Show the commands available in the current mode."""
    spec = session.profile.graph.spec(session.mode)
    print()
    print("Help may be requested at any point in a command by entering a question mark '?'.")
    print("If nothing matches, the help list will be empty and you must backup until")
    print("entering a '?' shows the available options.")
    print("Two styles of help are provided:")
    print("1. Full help is available when you are ready to enter a command argument")
    print("   (e.g. 'show ?') and describes each possible argument.")
    print("2. Partial help is provided when an abbreviated argument is entered and you")
    print("   want to know what arguments match the input (e.g. 'show pr?').")
    print()

    table = Table(title=f"Commands available in {spec.description or spec.name}",
                  show_header=True, header_style="bold")
    table.add_column("Command")
    table.add_column("Description")
    for name in sorted(session.allowed_commands()):
        descriptor = session.registry.lookup_exact(name)
        table.add_row(descriptor.label if descriptor else name,
                      descriptor.description if descriptor else "")
    console.print(table)
