"""
External certificate validation.

When `security.certificate_validation_script` is set, the security
configuration carries a `CertificateValidationScript`. The engine calls it
for every peer certificate presented at handshake time; resolving the
configuration never runs the script.
"""

import os
import subprocess
import tempfile
from pathlib import Path
from typing import Optional, Union

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from freelan.logger import FreelanStructLogger, get_freelan_logger


class CertificateValidationScript:
    """
    Callable running a script to accept or reject a peer certificate.

    The certificate is written as PEM to a temporary file whose path is the
    only argument of the script. A zero exit status accepts the certificate.
    """

    def __init__(self, path: Union[str, Path], logger: Optional[FreelanStructLogger] = None,
                 timeout: Optional[float] = None):
        self.path = Path(path)
        self.timeout = timeout
        self.logger = (logger or get_freelan_logger()).bind(component="CertificateValidationScript")

    def __call__(self, certificate: x509.Certificate) -> bool:
        fd, certificate_file = tempfile.mkstemp(prefix="freelan-", suffix=".crt")

        try:
            with os.fdopen(fd, 'wb') as f:
                f.write(certificate.public_bytes(serialization.Encoding.PEM))

            try:
                completed = subprocess.run(
                    [str(self.path), certificate_file],
                    stdout=subprocess.DEVNULL,
                    stderr=subprocess.DEVNULL,
                    timeout=self.timeout,
                    check=False,
                )
            except (OSError, subprocess.TimeoutExpired) as e:
                self.logger.error("Unable to run the certificate validation script",
                                  script=str(self.path), error=str(e))
                return False

            accepted = completed.returncode == 0
            self.logger.debug("Certificate validation script done",
                              script=str(self.path), returncode=completed.returncode,
                              subject=certificate.subject.rfc4514_string(), accepted=accepted)
            return accepted
        finally:
            os.unlink(certificate_file)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, CertificateValidationScript) and other.path == self.path

    def __hash__(self) -> int:
        return hash(self.path)

    def __repr__(self) -> str:
        return f"CertificateValidationScript({str(self.path)!r})"
