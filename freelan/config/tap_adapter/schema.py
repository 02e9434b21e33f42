"""
Tap adapter option schema definitions.
"""

from freelan.config.core.parsers import (
    optional, parse_ethernet_address,
    parse_ipv4_address_prefix_length, parse_ipv6_address_prefix_length
)
from freelan.config.core.registry import OptionDescriptor, OptionKind

TAP_ADAPTER_GROUP = 'tap_adapter'
TAP_ADAPTER_TITLE = 'Tap adapter options'

TAP_ADAPTER_OPTIONS = (
    OptionDescriptor(
        TAP_ADAPTER_GROUP, 'enabled',
        kind=OptionKind.BOOLEAN,
        default=True,
        help='Whether to enable the tap adapter.',
    ),
    OptionDescriptor(
        TAP_ADAPTER_GROUP, 'ipv4_address_prefix_length',
        default='9.0.0.1/24',
        help='The tap adapter IPv4 address and prefix length.',
        parser=optional(parse_ipv4_address_prefix_length),
    ),
    OptionDescriptor(
        TAP_ADAPTER_GROUP, 'ipv6_address_prefix_length',
        default='fe80::1/10',
        help='The tap adapter IPv6 address and prefix length.',
        parser=optional(parse_ipv6_address_prefix_length),
    ),
    OptionDescriptor(
        TAP_ADAPTER_GROUP, 'arp_proxy_enabled',
        kind=OptionKind.BOOLEAN,
        default=False,
        help='Whether to enable the ARP proxy.',
    ),
    OptionDescriptor(
        TAP_ADAPTER_GROUP, 'arp_proxy_fake_ethernet_address',
        default='00:aa:bb:cc:dd:ee',
        help='The ARP proxy fake ethernet address.',
        parser=parse_ethernet_address,
    ),
    OptionDescriptor(
        TAP_ADAPTER_GROUP, 'dhcp_proxy_enabled',
        kind=OptionKind.BOOLEAN,
        default=True,
        help='Whether to enable the DHCP proxy.',
    ),
    OptionDescriptor(
        TAP_ADAPTER_GROUP, 'dhcp_server_ipv4_address_prefix_length',
        default='9.0.0.0/24',
        help='The DHCP proxy server IPv4 address and prefix length.',
        parser=optional(parse_ipv4_address_prefix_length),
    ),
    OptionDescriptor(
        TAP_ADAPTER_GROUP, 'dhcp_server_ipv6_address_prefix_length',
        default='fe80::/10',
        help='The DHCP proxy server IPv6 address and prefix length.',
        parser=optional(parse_ipv6_address_prefix_length),
    ),
)
