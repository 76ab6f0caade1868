"""
Shared device state.

SharedState holds the tables command handlers read and update: the selected
interface, configured addresses, static routes and administrative link
status. Every accessor takes the lock for the duration of one call, so no
lock is ever held while a child process runs.
"""

import threading
from typing import Optional

from ..config.dataclasses import StaticRoute


class SharedState:
    """Thread-safe store for interface, address and route tables."""

    def __init__(self):
        self._lock = threading.Lock()
        self._selected_interface: Optional[str] = None
        self._addresses: dict[str, tuple[str, str]] = {}
        self._routes: dict[str, StaticRoute] = {}
        self._link_up: dict[str, bool] = {}

    # Selected interface

    def selected_interface(self) -> Optional[str]:
        with self._lock:
            return self._selected_interface

    def select_interface(self, name: Optional[str]) -> None:
        with self._lock:
            self._selected_interface = name

    # Addresses

    def set_address(self, interface: str, ip: str, netmask: str) -> bool:
        """Record an interface address. Returns True if one was replaced."""
        with self._lock:
            replaced = interface in self._addresses
            self._addresses[interface] = (ip, netmask)
            return replaced

    def remove_address(self, interface: str) -> Optional[tuple[str, str]]:
        with self._lock:
            return self._addresses.pop(interface, None)

    def address_of(self, interface: str) -> Optional[tuple[str, str]]:
        with self._lock:
            return self._addresses.get(interface)

    def addresses(self) -> dict[str, tuple[str, str]]:
        with self._lock:
            return dict(self._addresses)

    # Routes

    def add_route(self, route: StaticRoute) -> None:
        with self._lock:
            self._routes[route.prefix] = route

    def remove_route(self, destination: str, netmask: str) -> Optional[StaticRoute]:
        with self._lock:
            return self._routes.pop(f"{destination} {netmask}", None)

    def routes(self) -> list[StaticRoute]:
        with self._lock:
            return list(self._routes.values())

    # Link status

    def set_link(self, interface: str, up: bool) -> None:
        with self._lock:
            self._link_up[interface] = up

    def link_up(self, interface: str) -> bool:
        """Administrative status; interfaces are up until shut down."""
        with self._lock:
            return self._link_up.get(interface, True)
