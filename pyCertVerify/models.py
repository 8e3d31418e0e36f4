"""Models used by the tools."""

from dataclasses import dataclass, field
from enum import IntEnum, StrEnum, auto

from pyCertVerify import guard


class VerificationMode(StrEnum):
    """The verification question being asked of the supplied certificates."""

    CN_MATCH = auto()
    "Compare the expected common name with the common name of the certificate."

    CHAIN_VERIFY = auto()
    "Verify that the certificate was signed by the CA certificate."

    CA_IDENTITY = auto()
    "Verify that the CA certificate is a valid certificate authority (basic constraints CA flag)."

    INSPECT_ONLY = auto()
    "Print the certificate. No trust decision is made."

    NO_OP = auto()
    "Nothing was supplied, so nothing is checked."


class ServiceState(IntEnum):
    """Monitoring states, valued as the process exit code that reports them.

    Only two levels are used: the tool never reports WARNING or UNKNOWN.
    """

    OK = 0
    CRITICAL = 2


# Exit code of the CLI when a certificate cannot be loaded. Not a monitoring state.
EXIT_LOAD_FAILURE = 1


@dataclass(frozen=True)
class VerificationRequest:
    """The inputs of a single verification. Fields that were not supplied are None."""

    cn: str | None = None
    cert_path: str | None = None
    ca_cert_path: str | None = None

    def __post_init__(self):
        guard.supplied_values_are_not_empty(cn=self.cn, cert=self.cert_path, cacert=self.ca_cert_path)


@dataclass(frozen=True)
class SignatureCheck:
    """The result of checking a certificate signature against an issuer.

    `error` is set when the check could not be completed at all, e.g. the issuer name does not match or the key
    type is not supported. Otherwise `signed` holds the answer.
    """

    signed: bool
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class VerificationOutcome:
    """The single result of a verification request."""

    mode: VerificationMode
    state: ServiceState = ServiceState.OK
    message: str = ""
    subject_cn: str | None = None
    reports: tuple[str, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return self.state is ServiceState.OK

    def __rich_repr__(self):  # noqa: PLW3201
        yield self.mode.capitalize()
        yield "State", self.state.name
        yield "Message", self.message, ""
        yield "Subject_cn", self.subject_cn, None
