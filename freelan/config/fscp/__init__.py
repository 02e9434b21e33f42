"""
FSCP configuration domain.
"""

from .config import ChannelConfig, HostnameResolutionProtocol, parse_hostname_resolution_protocol
from .schema import FSCP_GROUP, FSCP_OPTIONS, FSCP_TITLE

__all__ = [
    'ChannelConfig',
    'HostnameResolutionProtocol',
    'parse_hostname_resolution_protocol',
    'FSCP_GROUP',
    'FSCP_OPTIONS',
    'FSCP_TITLE',
]
