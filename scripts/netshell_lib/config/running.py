"""
Running and startup configuration.

The running configuration is rendered from the session with a jinja2
template; the startup configuration is that text saved to disk.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader

from ..errors import ResourceUnavailable
from .constants import (
    DEFAULT_INTERFACE,
    SOFTWARE_VERSION,
    STARTUP_CONFIG_FILE,
    TEMPLATE_DIR,
)

RUNNING_CONFIG_TEMPLATE = "running-config.j2"


def _template_env(template_dir: Path = TEMPLATE_DIR) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_running_config(session) -> str:
    """Render the running configuration for a CliSession."""
    config = session.config
    credentials = session.credentials
    state = session.state

    interface = session.selected_interface or DEFAULT_INTERFACE
    address = state.address_of(interface)

    context = {
        'version': SOFTWARE_VERSION,
        'hostname': config.hostname,
        'password_encryption': config.password_encryption,
        'enable_password': config.enable_password,
        'password_digest': credentials.enable_password_digest(),
        'secret_digest': credentials.enable_secret_digest(),
        'interface': interface,
        'address': address,
        'link_up': state.link_up(interface),
        'routes': state.routes(),
        'ospf_enabled': config.feature_enabled('ospf'),
        'features': sorted(name for name, on in config.features.items() if on),
        'settings': sorted(config.settings.items()),
    }
    template = _template_env().get_template(RUNNING_CONFIG_TEMPLATE)
    return template.render(**context)


def write_startup_config(text: str, path: Path = STARTUP_CONFIG_FILE) -> None:
    """Write configuration text to the startup configuration file."""
    try:
        path.write_text(text)
    except OSError as e:
        raise ResourceUnavailable(f"Error writing to {path}: {e}") from e


def read_startup_config(path: Path = STARTUP_CONFIG_FILE) -> Optional[str]:
    """Return the saved startup configuration, or None if never written."""
    if not path.exists():
        return None
    try:
        return path.read_text()
    except OSError as e:
        raise ResourceUnavailable(f"Error reading {path}: {e}") from e


def save_running_config(session, path: Path = STARTUP_CONFIG_FILE) -> Path:
    """Render the running configuration and write it to path."""
    write_startup_config(render_running_config(session), path)
    session.config.last_written = datetime.now().strftime("%H:%M:%S %b %d %Y")
    return path
