"""The main entry point to the verification system.

Users should create a `PkiVerifier` with any of an expected common name, a certificate and a CA certificate, and
call its `.verify()` method. The combination of values that were supplied decides which check is run.
"""

import rich

from pyCertVerify import resolver, status, strategies
from pyCertVerify.logs import get_logger
from pyCertVerify.models import VerificationMode, VerificationOutcome, VerificationRequest

logger = get_logger(__name__)


class PkiVerifier:
    """Verify a certificate: its common name, whether it is signed by a CA, or whether it is itself a CA.

    Usage:
    -----

    >>> outcome = PkiVerifier(cn="host.example", cert="host.pem").verify()
    >>> rich.print(outcome)
    VerificationOutcome(
        'Cn_match',
        State='OK',
        Message="OK: CN 'host.example' matches certificate CN 'host.example'.",
        Subject_cn='host.example'
    )

    Each call to `.verify()` loads the certificates again. Nothing is cached between calls.

    """

    def __init__(self, cn: str | None = None, cert: str | None = None, cacert: str | None = None):
        """Create a new instance of the PkiVerifier.

        Args:
            cn (str, optional): The common name expected in the certificate. Only used together with `cert`.

            cert (str, optional): The path to the certificate file. On its own, the certificate is only printed.
            Together with `cacert`, it is verified against the CA certificate.

            cacert (str, optional): The path to the CA certificate file. On its own, it is checked to be a CA
            certificate.

        Raises:
            ValueError: If any of the values is an empty string.

        """
        self.request: VerificationRequest = VerificationRequest(cn=cn, cert_path=cert, ca_cert_path=cacert)

    @property
    def mode(self) -> VerificationMode:
        """The verification mode that `.verify()` will run."""
        return resolver.resolve_mode(self.request)

    def verify(self) -> VerificationOutcome:
        """Run the verification selected by the supplied values and log its outcome.

        Raises:
            CertificateLoadError: If a certificate file could not be loaded. No outcome is produced in that case.

        Returns:
            VerificationOutcome: The outcome of the verification.

        """
        mode = self.mode
        logger.debug(f"Resolved verification mode {mode} for {self.request}")

        outcome = strategies.get_strategy(mode)(self.request)
        status.log_outcome(outcome)
        return outcome


if __name__ == "__main__":
    rich.print(PkiVerifier().verify())
