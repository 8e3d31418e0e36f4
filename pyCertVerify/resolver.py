"""Select the verification mode for a request.

The rules are tried in order and the first one that matches wins. When every option is supplied, only the CN is
checked; the chain is never verified in that case.
"""

from collections.abc import Callable

from pyCertVerify.models import VerificationMode, VerificationRequest

__all__ = ["RULES", "resolve_mode"]

RULES: tuple[tuple[Callable[[VerificationRequest], bool], VerificationMode], ...] = (
    (lambda r: r.cn is not None and r.cert_path is not None, VerificationMode.CN_MATCH),
    (lambda r: r.cert_path is not None and r.ca_cert_path is not None, VerificationMode.CHAIN_VERIFY),
    (lambda r: r.cert_path is None and r.ca_cert_path is not None, VerificationMode.CA_IDENTITY),
    (lambda r: r.cert_path is not None, VerificationMode.INSPECT_ONLY),
)


def resolve_mode(request: VerificationRequest) -> VerificationMode:
    """Return the verification mode of the first rule matching the request, or NO_OP if none matches."""
    for matches, mode in RULES:
        if matches(request):
            return mode
    return VerificationMode.NO_OP
