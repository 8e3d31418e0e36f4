"""Selected by --cacert alone. Verify that the CA certificate is a valid certificate authority, using its basic
constraints."""

from pyCertVerify import ops
from pyCertVerify.logs import get_logger
from pyCertVerify.models import ServiceState, VerificationMode, VerificationOutcome, VerificationRequest

logger = get_logger(__name__)

__all__ = ["ca_identity"]


def ca_identity(request: VerificationRequest) -> VerificationOutcome:
    """Verify that the CA certificate has the CA flag set in its basic constraints.

    Args:
        request (VerificationRequest): A request with `ca_cert_path` set.

    Raises:
        CertificateLoadError: If the certificate cannot be loaded.

    Returns:
        VerificationOutcome: OK if the certificate is a CA certificate, otherwise CRITICAL.

    """
    ca_cert = ops.load_certificate(request.ca_cert_path)
    logger.debug(f"Checking whether certificate '{request.ca_cert_path}' is a valid CA certificate.")

    report = ops.render_report(ca_cert)
    ca_cn = ops.common_name(ca_cert)

    if ops.is_ca(ca_cert):
        return VerificationOutcome(
            mode=VerificationMode.CA_IDENTITY,
            state=ServiceState.OK,
            message=f"OK: CA certificate file '{request.ca_cert_path}' was verified successfully.",
            subject_cn=ca_cn,
            reports=(report,),
        )

    return VerificationOutcome(
        mode=VerificationMode.CA_IDENTITY,
        state=ServiceState.CRITICAL,
        message=f"CRITICAL: The file '{request.ca_cert_path}' does not seem to be a CA certificate file.",
        subject_cn=ca_cn,
        reports=(report,),
    )
