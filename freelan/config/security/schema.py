"""
Security option schema definitions.
"""

from freelan.config.core.parsers import list_of
from freelan.config.core.registry import OptionDescriptor, OptionKind

from .config import parse_certificate_validation_method, parse_script_path
from .credentials import load_certificate, load_private_key, load_trusted_certificate

SECURITY_GROUP = 'security'
SECURITY_TITLE = 'Security options'

SECURITY_OPTIONS = (
    OptionDescriptor(
        SECURITY_GROUP, 'signature_certificate_file',
        required=True,
        help='The certificate file to use for signing.',
        parser=load_certificate,
    ),
    OptionDescriptor(
        SECURITY_GROUP, 'signature_private_key_file',
        required=True,
        help='The private key file to use for signing.',
        parser=load_private_key,
    ),
    OptionDescriptor(
        SECURITY_GROUP, 'encryption_certificate_file',
        help='The certificate file to use for encryption.',
        parser=load_certificate,
        paired_with='security.encryption_private_key_file',
    ),
    OptionDescriptor(
        SECURITY_GROUP, 'encryption_private_key_file',
        help='The private key file to use for encryption.',
        parser=load_private_key,
        paired_with='security.encryption_certificate_file',
    ),
    OptionDescriptor(
        SECURITY_GROUP, 'certificate_validation_method',
        default='default',
        help='The certificate validation method.',
        parser=parse_certificate_validation_method,
    ),
    OptionDescriptor(
        SECURITY_GROUP, 'certificate_validation_script',
        help='The certificate validation script to use.',
        parser=parse_script_path,
    ),
    OptionDescriptor(
        SECURITY_GROUP, 'authority_certificate_file',
        kind=OptionKind.STRING_LIST,
        default=(),
        help='An authority certificate file to use.',
        parser=list_of(load_trusted_certificate),
    ),
)
