"""
FSCP option schema definitions.
"""

from freelan.config.core.parsers import list_of, parse_duration, parse_endpoint
from freelan.config.core.registry import OptionDescriptor, OptionKind

from .config import parse_hostname_resolution_protocol

FSCP_GROUP = 'fscp'
FSCP_TITLE = 'FreeLAN Secure Channel Protocol (FSCP) options'

FSCP_OPTIONS = (
    OptionDescriptor(
        FSCP_GROUP, 'hostname_resolution_protocol',
        default='system_default',
        help='The hostname resolution protocol to use.',
        parser=parse_hostname_resolution_protocol,
    ),
    OptionDescriptor(
        FSCP_GROUP, 'listen_on',
        default='0.0.0.0:12000',
        help='The endpoint to listen on.',
        parser=parse_endpoint,
    ),
    OptionDescriptor(
        FSCP_GROUP, 'hello_timeout',
        kind=OptionKind.INTEGER,
        default=3000,
        help='The default timeout for HELLO messages, in milliseconds.',
        parser=parse_duration,
    ),
    OptionDescriptor(
        FSCP_GROUP, 'contact',
        kind=OptionKind.STRING_LIST,
        default=(),
        help='The address of an host to contact.',
        parser=list_of(parse_endpoint),
    ),
)
