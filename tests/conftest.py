"""Shared fixtures: certificates generated on the fly and written to a temporary folder."""

import datetime
import os
import tempfile
from pathlib import Path

# Keep the log file out of the home folder. This must happen before the package is imported.
os.environ.setdefault("PYCERTVERIFY_HOME", tempfile.mkdtemp(prefix="pyCertVerify-tests-"))

import pytest  # noqa: E402
from cryptography import x509  # noqa: E402
from cryptography.hazmat.primitives import hashes, serialization  # noqa: E402
from cryptography.hazmat.primitives.asymmetric import ec  # noqa: E402
from cryptography.x509.oid import ExtensionOID, NameOID  # noqa: E402


def make_cert(
    cn: str,
    key: ec.EllipticCurvePrivateKey,
    issuer: x509.Certificate | None = None,
    issuer_key: ec.EllipticCurvePrivateKey | None = None,
    ca: bool | None = False,
    san: list[str] | None = None,
) -> x509.Certificate:
    """Build a certificate. Without an issuer the certificate is self-signed.

    `ca=None` leaves out the basic constraints extension.
    """
    now = datetime.datetime.now(datetime.timezone.utc)
    subject = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, cn)])
    builder = (
        x509.CertificateBuilder()
        .subject_name(subject)
        .issuer_name(issuer.subject if issuer else subject)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=30))
    )
    if ca is not None:
        builder = builder.add_extension(x509.BasicConstraints(ca=ca, path_length=None), critical=True)
    if san:
        builder = builder.add_extension(x509.SubjectAlternativeName([x509.DNSName(n) for n in san]), critical=False)
    return builder.sign(issuer_key or key, hashes.SHA256())


@pytest.fixture(scope="session")
def certs() -> dict[str, x509.Certificate]:
    root_key = ec.generate_private_key(ec.SECP256R1())
    root = make_cert("Test Root CA", root_key, ca=True)

    impostor_key = ec.generate_private_key(ec.SECP256R1())
    impostor = make_cert("Test Root CA", impostor_key, ca=True)

    other_key = ec.generate_private_key(ec.SECP256R1())
    other = make_cert("Other Root CA", other_key, ca=True)

    leaf_key = ec.generate_private_key(ec.SECP256R1())
    leaf = make_cert("host.example", leaf_key, issuer=root, issuer_key=root_key, san=["host.example"])

    bare_key = ec.generate_private_key(ec.SECP256R1())
    bare = make_cert("bare.example", bare_key, ca=None)

    # The basic constraints extension carries bytes that are not valid DER.
    now = datetime.datetime.now(datetime.timezone.utc)
    broken_key = ec.generate_private_key(ec.SECP256R1())
    broken_name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "broken.example")])
    broken = (
        x509.CertificateBuilder()
        .subject_name(broken_name)
        .issuer_name(broken_name)
        .public_key(broken_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=30))
        .add_extension(x509.UnrecognizedExtension(ExtensionOID.BASIC_CONSTRAINTS, b"\x01\x02garbage"), critical=True)
        .sign(broken_key, hashes.SHA256())
    )

    return {"root": root, "impostor": impostor, "other": other, "leaf": leaf, "bare": bare, "broken": broken}


@pytest.fixture(scope="session")
def cert_files(certs, tmp_path_factory) -> dict[str, str]:
    """Paths to the certificates in PEM format, plus `leaf_der`, `garbage` and `missing`. `broken` has a basic constraints extension that does not parse."""
    folder: Path = tmp_path_factory.mktemp("certs")
    paths = {}
    for name, cert in certs.items():
        fp = folder / f"{name}.pem"
        fp.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
        paths[name] = str(fp)

    der = folder / "leaf.der"
    der.write_bytes(certs["leaf"].public_bytes(serialization.Encoding.DER))
    paths["leaf_der"] = str(der)

    garbage = folder / "garbage.pem"
    garbage.write_text("-----BEGIN CERTIFICATE-----\nnot a certificate\n-----END CERTIFICATE-----\n")
    paths["garbage"] = str(garbage)

    paths["missing"] = str(folder / "does-not-exist.pem")
    return paths
