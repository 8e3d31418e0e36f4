"""Selected by --cert with --cacert. Verify that the certificate was signed by the CA certificate."""

from pyCertVerify import ops
from pyCertVerify.logs import get_logger
from pyCertVerify.models import ServiceState, VerificationMode, VerificationOutcome, VerificationRequest

logger = get_logger(__name__)

__all__ = ["chain_verify"]


def chain_verify(request: VerificationRequest) -> VerificationOutcome:
    """Verify the signature of the certificate against the public key of the CA certificate.

    A check that cannot be completed (for example because the issuer name does not match or the key type is not
    supported) is reported as CRITICAL, the same as a signature that does not verify.

    Args:
        request (VerificationRequest): A request with `cert_path` and `ca_cert_path` set.

    Raises:
        CertificateLoadError: If either certificate cannot be loaded.

    Returns:
        VerificationOutcome: OK if the certificate is signed by the CA, otherwise CRITICAL.

    """
    cert = ops.load_certificate(request.cert_path)
    ca_cert = ops.load_certificate(request.ca_cert_path)
    logger.debug(f"Verifying certificate '{request.cert_path}' with CA certificate '{request.ca_cert_path}'.")

    reports = (ops.render_report(cert), ops.render_report(ca_cert))
    cert_cn = ops.common_name(cert)

    check = ops.verifies_against(ca_cert, cert)

    if check.signed:
        return VerificationOutcome(
            mode=VerificationMode.CHAIN_VERIFY,
            state=ServiceState.OK,
            message=f"OK: Certificate with CN '{cert_cn}' is signed by CA.",
            subject_cn=cert_cn,
            reports=reports,
        )

    reason = check.error if check.failed else "signature does not verify against the CA public key."
    return VerificationOutcome(
        mode=VerificationMode.CHAIN_VERIFY,
        state=ServiceState.CRITICAL,
        message=f"CRITICAL: Certificate with CN '{cert_cn}' is NOT signed by CA: {reason}",
        subject_cn=cert_cn,
        reports=reports,
    )
