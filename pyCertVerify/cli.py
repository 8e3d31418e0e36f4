"""The command line interface to the package."""

import logging
from typing import Annotated

import rich
import typer
from rich.console import Console
from rich.markup import escape
from rich.padding import Padding
from typer import Typer

from pyCertVerify import logs, status, strategies
from pyCertVerify.main import PkiVerifier
from pyCertVerify.models import EXIT_LOAD_FAILURE
from pyCertVerify.ops import CertificateLoadError

app = Typer()
console = Console(highlight=False)
logger = logs.get_logger(logs.SOURCE_LABEL)


def _print_errors(err: Exception) -> None:
    """Print an exception and the chain of exceptions that caused it."""
    exceptions = []
    while err:
        exceptions.append(err)
        err = err.__cause__
    for ex in reversed(exceptions):
        rich.print(Padding(f"[bold]- {type(ex).__name__}[/bold]: {escape(str(ex))}", (0, 0, 0, 2)))


@app.command()
def verify(
    cn: Annotated[
        str,
        typer.Option("--cn", help="Common Name (optional). Use with '--cert' to check the CN in the certificate."),
    ] = None,
    cert: Annotated[
        str,
        typer.Option(
            "--cert",
            help="Certificate file path (optional). Standalone: print certificate. With '--cacert': Verify against CA.",
        ),
    ] = None,
    cacert: Annotated[
        str,
        typer.Option(
            "--cacert",
            help="CA certificate file path (optional). If passed standalone, verifies whether this is a CA certificate.",
        ),
    ] = None,
    verbose: Annotated[int, typer.Option("--verbose", "-v", count=True)] = 0,
):
    """Verify TLS certificates: CN, signed by CA, is CA; print certificate.

    Exits with 0 (OK) or 2 (CRITICAL), following the monitoring plugin convention. Exits with 1 if a certificate
    file cannot be loaded.
    """

    if verbose > 0:
        logs.set_logger_level(logging.DEBUG)
    else:
        logs.set_logger_level(logging.INFO)

    try:
        verifier = PkiVerifier(cn=cn, cert=cert, cacert=cacert)
        outcome = verifier.verify()
    except (CertificateLoadError, ValueError) as err:
        logger.error(str(err))
        rich.print("[bold red]Errors during verification")
        rich.print(f"[i]The log file may have more info, found in {logs.OUTPUT_DIR}")
        _print_errors(err)
        raise typer.Exit(code=EXIT_LOAD_FAILURE) from err

    for report in outcome.reports:
        console.print(report, markup=False, soft_wrap=True)
        console.print()

    raise typer.Exit(code=status.exit_code(outcome.state))


@app.command(name="modes")
def list_modes():
    """List the verification modes and the options that select them."""
    modes = strategies.get_strategies()
    rich.print("[bold]Verification Modes")
    rich.print("[i]Modes are tried in the order listed. The first one whose options are supplied is run.")
    for k, v in modes.items():
        rich.print(Padding(f"- [bold]{k}[/bold]: {v}", pad=(0, 0, 0, 2)))


if __name__ == "__main__":
    app()
