"""Selected by --cn with --cert. Compare the expected common name (CN) with the CN of the certificate, exactly and
case-sensitively."""

from pyCertVerify import ops
from pyCertVerify.logs import get_logger
from pyCertVerify.models import ServiceState, VerificationMode, VerificationOutcome, VerificationRequest

logger = get_logger(__name__)

__all__ = ["cn_match"]


def cn_match(request: VerificationRequest) -> VerificationOutcome:
    """Verify that the common name of the certificate is the expected one.

    No normalization and no wildcard matching is done.

    Args:
        request (VerificationRequest): A request with `cn` and `cert_path` set.

    Raises:
        CertificateLoadError: If the certificate cannot be loaded.

    Returns:
        VerificationOutcome: OK if the names are equal, otherwise CRITICAL.

    """
    cert = ops.load_certificate(request.cert_path)
    logger.debug(f"Verifying common name (CN) '{request.cn}' in certificate '{request.cert_path}'.")

    report = ops.render_report(cert)
    cert_cn = ops.common_name(cert)

    if request.cn == cert_cn:
        return VerificationOutcome(
            mode=VerificationMode.CN_MATCH,
            state=ServiceState.OK,
            message=f"OK: CN '{request.cn}' matches certificate CN '{cert_cn}'.",
            subject_cn=cert_cn,
            reports=(report,),
        )

    return VerificationOutcome(
        mode=VerificationMode.CN_MATCH,
        state=ServiceState.CRITICAL,
        message=f"CRITICAL: CN '{request.cn}' does NOT match certificate CN '{cert_cn}'.",
        subject_cn=cert_cn,
        reports=(report,),
    )
