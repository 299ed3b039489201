"""
Forward (A record) address resolver
"""

import ipaddress
import socket
from typing import Callable

from ..errors import AddressLookupError


class AddressResolver:
    """
    Looks up IPv4 addresses through the platform resolver.

    getaddrinfo returns every address family; IPv6 results are dropped.
    """

    def __init__(self, getaddrinfo: Callable = socket.getaddrinfo):
        self._getaddrinfo = getaddrinfo

    def lookup_ipv4(self, hostname: str) -> list[str]:
        """
        Resolve hostname to its IPv4 addresses.

        Args:
            hostname: Hostname to resolve

        Returns:
            Unique IPv4 addresses in resolver order (may be empty when the
            host only has IPv6 addresses)

        Raises:
            AddressLookupError: the lookup itself failed
        """
        if not hostname or not hostname.strip():
            raise AddressLookupError(hostname, "empty hostname")

        try:
            infos = self._getaddrinfo(hostname, None)
        except (socket.gaierror, socket.herror, socket.timeout,
                UnicodeError, OSError) as e:
            raise AddressLookupError(hostname, str(e)) from e

        addresses: list[str] = []
        for family, _, _, _, sockaddr in infos:
            if family != socket.AF_INET:
                continue

            ip = sockaddr[0]
            try:
                ipaddress.IPv4Address(ip)
            except ValueError:
                continue

            if ip not in addresses:
                addresses.append(ip)

        return addresses
