"""Operations carried out on certificates by the verification strategies."""

from pathlib import Path

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes
from cryptography.x509 import (
    BasicConstraints,
    Certificate,
    ExtensionNotFound,
    NameOID,
    SubjectAlternativeName,
    load_der_x509_certificate,
    load_pem_x509_certificate,
)

from pyCertVerify.logs import get_logger
from pyCertVerify.models import SignatureCheck

logger = get_logger(__name__)

_PEM_MARKER = b"-----BEGIN"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %Z"


class CertificateLoadError(LookupError):
    """A certificate file could not be read or parsed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = str(path)
        super().__init__(f"Could not load certificate '{self.path}': {reason}")


def load_certificate(fp: Path | str) -> Certificate:
    """Load a certificate from a file in PEM or DER format.

    Args:
        fp (Path | str): The path to the certificate file.

    Raises:
        CertificateLoadError: If the file cannot be read, or does not contain a certificate.

    Returns:
        Certificate: The loaded certificate.

    """
    logger.debug("Loading certificate from %s", str(fp))
    if isinstance(fp, str):
        fp = Path(fp)

    try:
        data = fp.read_bytes()
    except OSError as err:
        raise CertificateLoadError(fp, err.strerror or "file is not readable") from err

    try:
        if _PEM_MARKER in data:
            cert = load_pem_x509_certificate(data)
        else:
            cert = load_der_x509_certificate(data)
    except ValueError as err:
        raise CertificateLoadError(fp, "not a valid PEM or DER encoded X.509 certificate") from err

    # Extensions are parsed lazily, on first access.
    try:
        cert.extensions
    except ValueError as err:
        raise CertificateLoadError(fp, f"malformed certificate extension: {err}") from err

    return cert


def common_name(cert: Certificate) -> str:
    """Return the first common name (CN) of the certificate subject, or an empty string if there is none."""
    attributes = cert.subject.get_attributes_for_oid(NameOID.COMMON_NAME)
    if not attributes:
        return ""
    value = attributes[0].value
    return value.decode() if isinstance(value, bytes) else value


def is_ca(cert: Certificate) -> bool:
    """Check whether a certificate may act as a certificate authority.

    Only the basic constraints extension is taken into account. A certificate without it is not a CA.

    Args:
        cert (Certificate): The certificate to check.

    Returns:
        bool: True if the certificate has basic constraints with the CA flag set.

    """
    try:
        constraints = cert.extensions.get_extension_for_class(BasicConstraints)
    except ExtensionNotFound:
        logger.debug("Certificate %s has no basic constraints extension", cert.subject.rfc4514_string())
        return False
    return constraints.value.ca


def verifies_against(authority: Certificate, subject: Certificate) -> SignatureCheck:
    """Check that the subject certificate was signed by the authority.

    Args:
        authority (Certificate): The certificate of the supposed issuer.
        subject (Certificate): The certificate to check.

    Returns:
        SignatureCheck: `signed` is False if the signature does not match the authority key. `error` is set if the
        check could not be carried out.

    """
    try:
        subject.verify_directly_issued_by(authority)  # @IgnoreException
    except InvalidSignature:
        logger.debug(f"Signature of {subject.subject.rfc4514_string()} does not verify against the issuer key")
        return SignatureCheck(signed=False)
    except (ValueError, TypeError, UnsupportedAlgorithm) as err:
        logger.debug(f"Problem verifying {subject.subject.rfc4514_string()}: {err}")
        return SignatureCheck(signed=False, error=str(err) or type(err).__name__)

    logger.debug(
        f"Validated {subject.subject.rfc4514_string()} was signed by {authority.subject.rfc4514_string()}"
    )
    return SignatureCheck(signed=True)


def _signature_algorithm(cert: Certificate) -> str:
    dotted = cert.signature_algorithm_oid.dotted_string
    try:
        hash_algorithm = cert.signature_hash_algorithm
    except UnsupportedAlgorithm:
        return dotted
    if hash_algorithm is None:
        return dotted
    return f"{hash_algorithm.name} ({dotted})"


def _subject_alt_names(cert: Certificate) -> str:
    try:
        san = cert.extensions.get_extension_for_class(SubjectAlternativeName)
    except ExtensionNotFound:
        return ""
    return ", ".join(str(name.value) for name in san.value)


def render_report(cert: Certificate) -> str:
    """Render a human readable summary of a certificate.

    The block has one `Label: value` line each for the version, subject, issuer, validity window, serial number,
    signature algorithm, subject alternative names and SHA-256 fingerprint.

    Args:
        cert (Certificate): The certificate to describe.

    Returns:
        str: The rendered report.

    """
    rows = [
        ("Version", str(cert.version.value + 1)),
        ("Subject", cert.subject.rfc4514_string()),
        ("Issuer", cert.issuer.rfc4514_string()),
        ("Valid From", cert.not_valid_before_utc.strftime(_DATE_FORMAT)),
        ("Valid Until", cert.not_valid_after_utc.strftime(_DATE_FORMAT)),
        ("Serial", format(cert.serial_number, "x")),
        ("Signature Algorithm", _signature_algorithm(cert)),
        ("Subject Alt Names", _subject_alt_names(cert)),
        ("Fingerprint", cert.fingerprint(hashes.SHA256()).hex(":").upper()),
    ]
    width = max(len(label) for label, _ in rows) + 1
    return "\n".join(f"  {label + ':':<{width}} {value}".rstrip() for label, value in rows)
