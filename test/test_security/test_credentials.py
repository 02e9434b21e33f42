import os
import stat
import sys

import pytest
from cryptography import x509
from cryptography.hazmat.primitives.asymmetric import ec

from freelan.config.core.errors import CredentialLoadError, ErrorKind
from freelan.config.security import (
    CertificateValidationScript, TrustedAuthority,
    load_certificate, load_private_key, load_trusted_certificate, make_credential
)

pytestmark = pytest.mark.unit


class TestCredentialLoaders:

    def test_load_pem_certificate(self, credentials):
        loaded = load_certificate(credentials['signature_certificate'])

        assert isinstance(loaded.certificate, x509.Certificate)
        assert loaded.path == credentials['signature_certificate']

    def test_load_der_certificate(self, credentials):
        loaded = load_certificate(str(credentials['der_certificate']))

        assert loaded.certificate == credentials['signature_certificate_object']

    def test_load_private_key(self, credentials):
        loaded = load_private_key(credentials['signature_private_key'])

        assert isinstance(loaded.private_key, ec.EllipticCurvePrivateKey)

    def test_certificate_file_is_not_a_key(self, credentials):
        with pytest.raises(CredentialLoadError):
            load_private_key(credentials['signature_certificate'])

    @pytest.mark.parametrize("loader", [load_certificate, load_private_key, load_trusted_certificate])
    def test_missing_file(self, loader, tmp_path):
        missing = tmp_path / "missing.pem"

        with pytest.raises(CredentialLoadError) as exc_info:
            loader(missing)

        assert exc_info.value.kind is ErrorKind.CREDENTIAL_LOAD_ERROR
        assert exc_info.value.fatal
        assert str(exc_info.value) == f"Unable to open the specified file: {missing}"

    @pytest.mark.parametrize("loader", [load_certificate, load_private_key, load_trusted_certificate])
    def test_undecodable_file(self, loader, credentials):
        with pytest.raises(CredentialLoadError) as exc_info:
            loader(credentials['garbage'])

        assert exc_info.value.path == credentials['garbage']

    def test_trusted_certificate_is_tagged(self, credentials):
        authority = load_trusted_certificate(credentials['authority_certificate'])

        assert isinstance(authority, TrustedAuthority)
        assert authority.subject == 'CN=freelan-ca'
        assert authority.path == credentials['authority_certificate']

    def test_make_credential(self, credentials):
        certificate = load_certificate(credentials['signature_certificate'])
        key = load_private_key(credentials['signature_private_key'])

        assert make_credential(None, None) is None

        credential = make_credential(certificate, key)
        assert credential.complete
        assert credential.subject == 'CN=alice'
        assert credential.private_key_path == credentials['signature_private_key']

        half = make_credential(certificate, None)
        assert not half.complete
        assert half.private_key is None

    def test_credential_repr_hides_private_key(self, credentials):
        credential = make_credential(
            load_certificate(credentials['signature_certificate']),
            load_private_key(credentials['signature_private_key']),
        )

        assert 'private_key=' not in repr(credential)


@pytest.mark.skipif(sys.platform.startswith("win"), reason="shell scripts require a POSIX platform")
class TestCertificateValidationScript:

    def write_script(self, tmp_path, body):
        script = tmp_path / "validate.sh"
        script.write_text("#!/bin/sh\n" + body + "\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR)
        return script

    def test_accepts_on_zero_exit_status(self, tmp_path, credentials):
        script = self.write_script(tmp_path, 'grep -q "BEGIN CERTIFICATE" "$1"')

        validate = CertificateValidationScript(script)

        assert validate(credentials['signature_certificate_object']) is True

    def test_rejects_on_non_zero_exit_status(self, tmp_path, credentials):
        script = self.write_script(tmp_path, "exit 1")

        assert CertificateValidationScript(script)(credentials['signature_certificate_object']) is False

    def test_missing_script_rejects(self, tmp_path, credentials):
        validate = CertificateValidationScript(tmp_path / "missing.sh")

        assert validate(credentials['signature_certificate_object']) is False

    def test_temporary_certificate_is_removed(self, tmp_path, credentials):
        record = tmp_path / "argument"
        script = self.write_script(tmp_path, f'echo "$1" > "{record}"')

        CertificateValidationScript(script)(credentials['signature_certificate_object'])

        certificate_file = record.read_text().strip()
        assert certificate_file
        assert not os.path.exists(certificate_file)

    def test_equality_by_path(self, tmp_path):
        script = tmp_path / "validate.sh"

        assert CertificateValidationScript(script) == CertificateValidationScript(str(script))
        assert hash(CertificateValidationScript(script)) == hash(CertificateValidationScript(script))
        assert CertificateValidationScript(script) != CertificateValidationScript(tmp_path / "other.sh")
