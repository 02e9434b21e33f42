"""
Shared pytest configuration and fixtures for the configuration tests.
"""

import logging
from datetime import datetime, timedelta, timezone

import pytest
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.x509.oid import NameOID

from freelan.config import get_default_registry


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external resources")
    config.addinivalue_line("markers", "integration: tests spanning resolution and assembly")


def _self_signed(common_name: str):
    key = ec.generate_private_key(ec.SECP256R1())
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.now(timezone.utc)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(minutes=1))
        .not_valid_after(now + timedelta(days=1))
        .sign(key, hashes.SHA256())
    )
    return certificate, key


def _write_pem(directory, stem, certificate, key):
    certificate_file = directory / f"{stem}.crt"
    key_file = directory / f"{stem}.key"
    certificate_file.write_bytes(certificate.public_bytes(serialization.Encoding.PEM))
    key_file.write_bytes(key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    ))
    return certificate_file, key_file


@pytest.fixture(scope="session")
def credentials(tmp_path_factory):
    """
    Certificate and key files shared by the whole session.
    Session scope means the keys are generated once.
    """
    directory = tmp_path_factory.mktemp("credentials")

    signature_certificate, signature_key = _self_signed("alice")
    encryption_certificate, encryption_key = _self_signed("alice-encryption")
    authority_certificate, authority_key = _self_signed("freelan-ca")

    signature_files = _write_pem(directory, "alice", signature_certificate, signature_key)
    encryption_files = _write_pem(directory, "alice-encryption", encryption_certificate, encryption_key)
    authority_files = _write_pem(directory, "ca", authority_certificate, authority_key)

    der_certificate = directory / "alice.der"
    der_certificate.write_bytes(signature_certificate.public_bytes(serialization.Encoding.DER))

    garbage = directory / "garbage.pem"
    garbage.write_text("this is not a certificate\n")

    return {
        'signature_certificate': signature_files[0],
        'signature_private_key': signature_files[1],
        'encryption_certificate': encryption_files[0],
        'encryption_private_key': encryption_files[1],
        'authority_certificate': authority_files[0],
        'der_certificate': der_certificate,
        'garbage': garbage,
        'signature_certificate_object': signature_certificate,
    }


@pytest.fixture
def registry():
    return get_default_registry()


@pytest.fixture
def signing_options(credentials):
    """Command line values holding only the required signing credential."""
    return {
        'security.signature_certificate_file': str(credentials['signature_certificate']),
        'security.signature_private_key_file': str(credentials['signature_private_key']),
    }


@pytest.fixture
def missing_candidates(tmp_path):
    """Discovery candidates that do not exist."""
    return [tmp_path / "home" / ".freelan" / "freelan.cfg", tmp_path / "etc" / "freelan" / "freelan.cfg"]


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration file and return its path."""
    def write(content: str, name: str = "freelan.cfg"):
        path = tmp_path / name
        path.write_text(content)
        return path
    return write


@pytest.fixture
def reset_logging():
    """Remove handlers installed by init_logger so that each test gets its own stream."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
