"""
FSCP domain configuration classes.

This module defines the configuration of the FreeLAN Secure Channel
Protocol: where the node listens, how hostnames are resolved and which
hosts it contacts on startup.
"""

import socket
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any, Dict, Tuple
from enum import Enum

from freelan.config.core.parsers import choice
from freelan.config.core.types import Endpoint


class HostnameResolutionProtocol(Enum):
    """
    Address family used to resolve hostnames.

    SYSTEM_DEFAULT shares the IPv4 value, so it is an alias of IPV4.
    """
    IPV4 = socket.AF_INET
    IPV6 = socket.AF_INET6
    SYSTEM_DEFAULT = socket.AF_INET


parse_hostname_resolution_protocol = choice(
    HostnameResolutionProtocol,
    {
        "system_default": HostnameResolutionProtocol.SYSTEM_DEFAULT,
        "ipv4": HostnameResolutionProtocol.IPV4,
        "ipv6": HostnameResolutionProtocol.IPV6,
    },
    "hostname resolution protocol",
)


@dataclass(frozen=True)
class ChannelConfig:
    """Secure channel settings."""
    hostname_resolution_protocol: HostnameResolutionProtocol = HostnameResolutionProtocol.SYSTEM_DEFAULT
    listen_on: Endpoint = field(default_factory=lambda: Endpoint("0.0.0.0", 12000))
    hello_timeout: timedelta = field(default_factory=lambda: timedelta(milliseconds=3000))
    contact_list: Tuple[Endpoint, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'hostname_resolution_protocol': self.hostname_resolution_protocol.name.lower(),
            'listen_on': str(self.listen_on),
            'hello_timeout': int(self.hello_timeout / timedelta(milliseconds=1)),
            'contact': [str(contact) for contact in self.contact_list],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChannelConfig':
        """Create configuration from parsed option values, keyed by option name."""
        config = cls()
        return cls(
            hostname_resolution_protocol=data.get('hostname_resolution_protocol', config.hostname_resolution_protocol),
            listen_on=data.get('listen_on', config.listen_on),
            hello_timeout=data.get('hello_timeout', config.hello_timeout),
            contact_list=tuple(data.get('contact') or ()),
        )
