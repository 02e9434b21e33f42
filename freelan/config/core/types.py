"""
Network value types produced by the option parsers.
"""

import ipaddress
import socket
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

IPAddress = Union[ipaddress.IPv4Address, ipaddress.IPv6Address]


@dataclass(frozen=True)
class Endpoint:
    """
    A host and port pair.

    `host` is kept as written: an IPv4/IPv6 literal or a hostname. Hostnames
    are only looked up when the engine calls `resolve()`.
    """
    host: str
    port: int

    @property
    def address(self) -> Optional[IPAddress]:
        """The literal address, or None for hostname endpoints."""
        try:
            return ipaddress.ip_address(self.host)
        except ValueError:
            return None

    @property
    def is_hostname(self) -> bool:
        return self.address is None

    def resolve(self, family: int = socket.AF_UNSPEC) -> List[Tuple[str, int]]:
        """
        Resolve the endpoint to (address, port) pairs for UDP sockets.

        Args:
            family: Address family to restrict the lookup to

        Raises:
            socket.gaierror: If the host can not be resolved
        """
        infos = socket.getaddrinfo(self.host, self.port, family, socket.SOCK_DGRAM)
        return [(info[4][0], info[4][1]) for info in infos]

    def __str__(self) -> str:
        if isinstance(self.address, ipaddress.IPv6Address):
            return f"[{self.host}]:{self.port}"
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class AddressPrefixLength:
    """An IP address paired with a network prefix length."""
    address: IPAddress
    prefix_length: int

    @property
    def version(self) -> int:
        return self.address.version

    @property
    def interface(self) -> Union[ipaddress.IPv4Interface, ipaddress.IPv6Interface]:
        return ipaddress.ip_interface(f"{self.address}/{self.prefix_length}")

    @property
    def network(self) -> Union[ipaddress.IPv4Network, ipaddress.IPv6Network]:
        return self.interface.network

    def __str__(self) -> str:
        return f"{self.address}/{self.prefix_length}"


@dataclass(frozen=True)
class EthernetAddress:
    """A 6-byte hardware address."""
    octets: bytes

    def __post_init__(self):
        if len(self.octets) != 6:
            raise ValueError("An ethernet address is exactly 6 bytes long")

    def __str__(self) -> str:
        return ":".join(f"{octet:02x}" for octet in self.octets)
