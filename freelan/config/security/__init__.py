"""
Security configuration domain.
"""

from .config import (
    SecurityConfig, CertificateValidationMethod,
    parse_certificate_validation_method, parse_script_path
)
from .credentials import (
    CredentialMaterial, TrustedAuthority,
    load_certificate, load_private_key, load_trusted_certificate, make_credential
)
from .validation_script import CertificateValidationScript
from .schema import SECURITY_GROUP, SECURITY_OPTIONS, SECURITY_TITLE

__all__ = [
    'SecurityConfig',
    'CertificateValidationMethod',
    'parse_certificate_validation_method',
    'parse_script_path',
    'CredentialMaterial',
    'TrustedAuthority',
    'load_certificate',
    'load_private_key',
    'load_trusted_certificate',
    'make_credential',
    'CertificateValidationScript',
    'SECURITY_GROUP',
    'SECURITY_OPTIONS',
    'SECURITY_TITLE',
]
