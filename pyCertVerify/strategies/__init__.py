"""All of the verification strategies, one for each verification mode."""

import inspect
from collections.abc import Callable

from pyCertVerify.models import VerificationMode, VerificationOutcome, VerificationRequest
from pyCertVerify.strategies._ca_identity import ca_identity
from pyCertVerify.strategies._chain_verify import chain_verify
from pyCertVerify.strategies._cn_match import cn_match
from pyCertVerify.strategies._inspect_only import inspect_only
from pyCertVerify.strategies._no_op import no_op

__all__ = [
    "cn_match",
    "chain_verify",
    "ca_identity",
    "inspect_only",
    "no_op",
    "get_strategy",
    "get_strategies",
]

Strategy = Callable[[VerificationRequest], VerificationOutcome]

_STRATEGIES: dict[VerificationMode, Strategy] = {
    VerificationMode.CN_MATCH: cn_match,
    VerificationMode.CHAIN_VERIFY: chain_verify,
    VerificationMode.CA_IDENTITY: ca_identity,
    VerificationMode.INSPECT_ONLY: inspect_only,
    VerificationMode.NO_OP: no_op,
}


def get_strategy(mode: VerificationMode) -> Strategy:
    """Return the strategy that answers the given verification mode."""
    return _STRATEGIES[mode]


def get_strategies() -> dict[str, str]:
    """Return the available strategies and their descriptions.

    Returns:
        dict: The strategies, formatted as {mode_name: description}

    """

    strategies = {}
    for mode, func in _STRATEGIES.items():
        # Get the docstring for the module.
        strategies[str(mode)] = inspect.getmodule(func).__doc__
    return strategies
