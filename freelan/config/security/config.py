"""
Security domain configuration classes.

This module defines the node identity (signature and encryption
credentials), the trusted authorities and how peer certificates are
validated.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Tuple
from enum import Enum

from freelan.config.core.parsers import choice
from .credentials import CredentialMaterial, TrustedAuthority, make_credential
from .validation_script import CertificateValidationScript


class CertificateValidationMethod(Enum):
    """Peer certificate validation methods."""
    DEFAULT = "default"
    NONE = "none"


parse_certificate_validation_method = choice(
    CertificateValidationMethod,
    {"default": CertificateValidationMethod.DEFAULT, "none": CertificateValidationMethod.NONE},
    "certificate validation method",
)


def parse_script_path(value: str) -> Optional[Path]:
    """An empty script path means no validation script."""
    value = value.strip()
    return Path(value).expanduser() if value else None


@dataclass(frozen=True)
class SecurityConfig:
    """
    Security settings.

    `encryption` is None when neither the encryption certificate nor its
    key is configured.
    """
    signature: CredentialMaterial
    encryption: Optional[CredentialMaterial] = None
    certificate_validation_method: CertificateValidationMethod = CertificateValidationMethod.DEFAULT
    certificate_validation_script: Optional[Path] = None
    certificate_validation_callback: Optional[CertificateValidationScript] = None
    certificate_authorities: Tuple[TrustedAuthority, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary. Key material is never included."""
        def path(value):
            return str(value) if value is not None else None

        return {
            'signature_certificate_file': path(self.signature.certificate_path),
            'signature_private_key_file': path(self.signature.private_key_path),
            'encryption_certificate_file': path(self.encryption.certificate_path) if self.encryption else None,
            'encryption_private_key_file': path(self.encryption.private_key_path) if self.encryption else None,
            'certificate_validation_method': self.certificate_validation_method.value,
            'certificate_validation_script': path(self.certificate_validation_script),
            'authority_certificate_file': [path(authority.path) for authority in self.certificate_authorities],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SecurityConfig':
        """
        Create configuration from parsed option values, keyed by option name.

        Raises:
            ValueError: If the signature credential is missing
        """
        signature = make_credential(
            data.get('signature_certificate_file'),
            data.get('signature_private_key_file'),
        )
        if signature is None:
            raise ValueError("A signature certificate and private key are required")

        script = data.get('certificate_validation_script')

        return cls(
            signature=signature,
            encryption=make_credential(
                data.get('encryption_certificate_file'),
                data.get('encryption_private_key_file'),
            ),
            certificate_validation_method=data.get(
                'certificate_validation_method', CertificateValidationMethod.DEFAULT),
            certificate_validation_script=script,
            certificate_validation_callback=CertificateValidationScript(script) if script else None,
            certificate_authorities=tuple(data.get('authority_certificate_file') or ()),
        )
