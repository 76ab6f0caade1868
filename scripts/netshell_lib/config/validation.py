"""
Validation functions for netshell configuration.

IP address, netmask and hostname validation utilities.
"""

import ipaddress
import re


def validate_ipv4(ip: str) -> bool:
    """Validate an IPv4 address."""
    try:
        ipaddress.IPv4Address(ip)
        return True
    except ipaddress.AddressValueError:
        return False


def validate_netmask(mask: str) -> bool:
    """Validate a dotted-quad netmask with contiguous ones."""
    if not validate_ipv4(mask):
        return False
    try:
        ipaddress.IPv4Network(f"0.0.0.0/{mask}")
        return True
    except (ipaddress.NetmaskValueError, ValueError):
        return False


def netmask_to_prefix(mask: str) -> int:
    """Convert a dotted-quad netmask to a prefix length."""
    return sum(bin(int(octet)).count("1") for octet in mask.split("."))


def ip_with_cidr(ip: str, mask: str) -> str:
    """
    Combine an address and a netmask into CIDR notation.

    Raises:
        ValueError: address or netmask invalid
    """
    if not validate_ipv4(ip):
        raise ValueError(f"Invalid IP address: {ip}")
    if not validate_netmask(mask):
        raise ValueError(f"Invalid netmask: {mask}")
    return f"{ip}/{netmask_to_prefix(mask)}"


_HOSTNAME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_-]*$")


def validate_hostname(hostname: str) -> bool:
    """Hostnames start with a letter; letters, digits, '-' and '_' follow."""
    return bool(_HOSTNAME_RE.match(hostname))
