"""
Configuration dataclasses for netshell.

CliConfig holds everything the user has configured during the session and
is what the running configuration is rendered from.
"""

from dataclasses import dataclass, field
from typing import Optional

from .constants import DEFAULT_HOSTNAME


@dataclass
class StaticRoute:
    """A static route added with 'ip route'."""
    destination: str
    netmask: str
    exit_interface: str
    next_hop: str

    @property
    def prefix(self) -> str:
        return f"{self.destination} {self.netmask}"


@dataclass
class CliConfig:
    """Accumulated session configuration."""
    hostname: str = DEFAULT_HOSTNAME
    enable_password: Optional[str] = None
    password_encryption: bool = False
    last_written: Optional[str] = None
    # Feature toggles set by enable/disable/config (name -> enabled)
    features: dict[str, bool] = field(default_factory=dict)
    # Values set by leaf-mode commands (dotted key -> value)
    settings: dict[str, str] = field(default_factory=dict)

    def set_feature(self, name: str, enabled: bool) -> None:
        self.features[name] = enabled

    def feature_enabled(self, name: str) -> bool:
        return self.features.get(name, False)
