"""
Certificate and private key loaders.

The three loaders share the same file access; trust anchors are wrapped in
`TrustedAuthority` so that the engine keeps them in a separate trust list.
Any failure, whether the file can not be read or its content can not be
decoded, is reported as a single `CredentialLoadError` naming the path.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from freelan.config.core.errors import CredentialLoadError

PathLike = Union[str, Path]


@dataclass(frozen=True)
class CredentialMaterial:
    """
    A certificate and its private key.

    The two halves are loaded independently: nothing checks that the key
    matches the certificate, a mismatch surfaces at handshake time.
    """
    certificate: Optional[x509.Certificate]
    private_key: Optional[PrivateKeyTypes] = field(default=None, repr=False, compare=False)
    certificate_path: Optional[Path] = None
    private_key_path: Optional[Path] = None

    @property
    def complete(self) -> bool:
        return self.certificate is not None and self.private_key is not None

    @property
    def subject(self) -> Optional[str]:
        if self.certificate is None:
            return None
        return self.certificate.subject.rfc4514_string()


@dataclass(frozen=True)
class TrustedAuthority:
    """A certificate designated as a root of trust for peer certificates."""
    certificate: x509.Certificate
    path: Optional[Path] = None

    @property
    def subject(self) -> str:
        return self.certificate.subject.rfc4514_string()


@dataclass(frozen=True)
class LoadedCertificate:
    certificate: x509.Certificate
    path: Path


@dataclass(frozen=True)
class LoadedPrivateKey:
    private_key: PrivateKeyTypes = field(repr=False, compare=False)
    path: Optional[Path] = None


def load_file(filename: PathLike) -> bytes:
    try:
        with open(filename, 'rb') as f:
            return f.read()
    except OSError:
        raise CredentialLoadError(filename) from None


def _decode_certificate(data: bytes, filename: PathLike) -> x509.Certificate:
    try:
        return x509.load_pem_x509_certificate(data)
    except ValueError:
        pass
    try:
        return x509.load_der_x509_certificate(data)
    except ValueError:
        raise CredentialLoadError(filename) from None


def load_certificate(filename: PathLike) -> LoadedCertificate:
    """Load an end-entity certificate, PEM or DER encoded."""
    return LoadedCertificate(_decode_certificate(load_file(filename), filename), Path(filename))


def load_private_key(filename: PathLike) -> LoadedPrivateKey:
    """Load an unencrypted private key, PEM or DER encoded."""
    data = load_file(filename)

    for loader in (serialization.load_pem_private_key, serialization.load_der_private_key):
        try:
            return LoadedPrivateKey(loader(data, password=None), Path(filename))
        except (ValueError, TypeError, UnsupportedAlgorithm):
            continue

    raise CredentialLoadError(filename)


def load_trusted_certificate(filename: PathLike) -> TrustedAuthority:
    """Load a certificate and tag it as a trust anchor."""
    return TrustedAuthority(_decode_certificate(load_file(filename), filename), Path(filename))


def make_credential(
    certificate: Optional[LoadedCertificate],
    private_key: Optional[LoadedPrivateKey],
) -> Optional[CredentialMaterial]:
    """Pair a loaded certificate and key; None when neither is given."""
    if certificate is None and private_key is None:
        return None

    return CredentialMaterial(
        certificate=certificate.certificate if certificate else None,
        private_key=private_key.private_key if private_key else None,
        certificate_path=certificate.path if certificate else None,
        private_key_path=private_key.path if private_key else None,
    )
