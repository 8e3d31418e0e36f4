"""Selected by --cert alone. Print the certificate. No trust decision is made, so this always passes."""

from pyCertVerify import ops
from pyCertVerify.logs import get_logger
from pyCertVerify.models import ServiceState, VerificationMode, VerificationOutcome, VerificationRequest

logger = get_logger(__name__)

__all__ = ["inspect_only"]


def inspect_only(request: VerificationRequest) -> VerificationOutcome:
    """Load the certificate and render its report."""
    cert = ops.load_certificate(request.cert_path)
    logger.debug(f"Printing certificate '{request.cert_path}'")

    return VerificationOutcome(
        mode=VerificationMode.INSPECT_ONLY,
        state=ServiceState.OK,
        message=f"OK: Printed certificate '{request.cert_path}'.",
        subject_cn=ops.common_name(cert),
        reports=(ops.render_report(cert),),
    )
