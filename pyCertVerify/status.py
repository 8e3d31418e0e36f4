"""Map verification outcomes onto monitoring states, exit codes and log lines."""

import logging

from pyCertVerify.logs import SOURCE_LABEL, get_logger
from pyCertVerify.models import ServiceState, VerificationOutcome

logger = get_logger(SOURCE_LABEL)

_LOG_LEVELS = {
    ServiceState.OK: logging.INFO,
    ServiceState.CRITICAL: logging.CRITICAL,
}


def exit_code(state: ServiceState) -> int:
    """Return the process exit code reporting the given state: 0 for OK, 2 for CRITICAL."""
    return int(state)


def log_outcome(outcome: VerificationOutcome) -> None:
    """Write the diagnostic of an outcome to the log.

    OK outcomes are logged at INFO and CRITICAL outcomes at CRITICAL. Outcomes without a message (nothing was
    verified) are not logged.
    """
    if not outcome.message:
        return
    logger.log(_LOG_LEVELS[outcome.state], outcome.message)
