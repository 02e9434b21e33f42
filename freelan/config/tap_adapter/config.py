"""
Tap adapter domain configuration classes.

This module defines the virtual network interface settings: its
addresses and the ARP and DHCP proxies answering on its behalf.
"""

import ipaddress
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from freelan.config.core.types import AddressPrefixLength, EthernetAddress


def _default_prefix(address: str, prefix_length: int) -> AddressPrefixLength:
    return AddressPrefixLength(ipaddress.ip_address(address), prefix_length)


def _str_or_none(value: Optional[AddressPrefixLength]) -> Optional[str]:
    return str(value) if value is not None else None


@dataclass(frozen=True)
class InterfaceConfig:
    """Tap adapter settings. Address fields set to None are disabled."""
    enabled: bool = True
    ipv4_address_prefix_length: Optional[AddressPrefixLength] = field(
        default_factory=lambda: _default_prefix("9.0.0.1", 24))
    ipv6_address_prefix_length: Optional[AddressPrefixLength] = field(
        default_factory=lambda: _default_prefix("fe80::1", 10))
    arp_proxy_enabled: bool = False
    arp_proxy_fake_ethernet_address: EthernetAddress = field(
        default_factory=lambda: EthernetAddress(bytes.fromhex("00aabbccddee")))
    dhcp_proxy_enabled: bool = True
    dhcp_server_ipv4_address_prefix_length: Optional[AddressPrefixLength] = field(
        default_factory=lambda: _default_prefix("9.0.0.0", 24))
    dhcp_server_ipv6_address_prefix_length: Optional[AddressPrefixLength] = field(
        default_factory=lambda: _default_prefix("fe80::", 10))

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'enabled': self.enabled,
            'ipv4_address_prefix_length': _str_or_none(self.ipv4_address_prefix_length),
            'ipv6_address_prefix_length': _str_or_none(self.ipv6_address_prefix_length),
            'arp_proxy_enabled': self.arp_proxy_enabled,
            'arp_proxy_fake_ethernet_address': str(self.arp_proxy_fake_ethernet_address),
            'dhcp_proxy_enabled': self.dhcp_proxy_enabled,
            'dhcp_server_ipv4_address_prefix_length': _str_or_none(self.dhcp_server_ipv4_address_prefix_length),
            'dhcp_server_ipv6_address_prefix_length': _str_or_none(self.dhcp_server_ipv6_address_prefix_length),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'InterfaceConfig':
        """
        Create configuration from parsed option values, keyed by option name.

        Address keys present with a None value stay disabled rather than
        falling back to the defaults.
        """
        config = cls()
        return cls(**{
            name: data[name] if name in data else getattr(config, name)
            for name in cls.__dataclass_fields__
        })
