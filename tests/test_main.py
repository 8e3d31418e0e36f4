"""Tests for the main.py file."""

# pylint: disable=W0212:protected-access
# pylint: disable=C0116:missing-function-docstring

import logging

import pytest

from pyCertVerify import main, ops, status
from pyCertVerify.models import ServiceState, VerificationMode

OUTCOME_LOGGER = "pyCertVerify.cli"


def outcome_records(caplog):
    return [r for r in caplog.records if r.name == OUTCOME_LOGGER]


def test_all_options_only_check_the_cn(cert_files):
    """The chain would not verify against the other CA, but it is never checked."""
    verifier = main.PkiVerifier(cn="host.example", cert=cert_files["leaf"], cacert=cert_files["other"])
    assert verifier.mode is VerificationMode.CN_MATCH

    outcome = verifier.verify()
    assert outcome.mode is VerificationMode.CN_MATCH
    assert outcome.state is ServiceState.OK
    assert len(outcome.reports) == 1


def test_ok_outcome_is_logged_at_info(cert_files, caplog):
    caplog.set_level(logging.DEBUG, logger="pyCertVerify")
    main.PkiVerifier(cn="host.example", cert=cert_files["leaf"]).verify()

    records = outcome_records(caplog)
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert records[0].getMessage().startswith("OK: CN 'host.example' matches")


def test_critical_outcome_is_logged_at_critical(cert_files, caplog):
    caplog.set_level(logging.DEBUG, logger="pyCertVerify")
    outcome = main.PkiVerifier(cn="other", cert=cert_files["leaf"]).verify()

    assert outcome.state is ServiceState.CRITICAL
    assert status.exit_code(outcome.state) == 2
    records = outcome_records(caplog)
    assert len(records) == 1
    assert records[0].levelno == logging.CRITICAL
    assert "'other'" in records[0].getMessage()
    assert "'host.example'" in records[0].getMessage()


def test_no_op_logs_nothing(caplog):
    caplog.set_level(logging.DEBUG, logger="pyCertVerify")
    outcome = main.PkiVerifier().verify()

    assert outcome.mode is VerificationMode.NO_OP
    assert outcome.state is ServiceState.OK
    assert status.exit_code(outcome.state) == 0
    assert outcome_records(caplog) == []


def test_load_error_propagates_without_outcome(cert_files, caplog):
    caplog.set_level(logging.DEBUG, logger="pyCertVerify")
    with pytest.raises(ops.CertificateLoadError):
        main.PkiVerifier(cert=cert_files["missing"]).verify()
    assert outcome_records(caplog) == []


def test_each_verify_loads_again(cert_files, monkeypatch):
    calls = []
    real_load = ops.load_certificate

    def counting_load(fp):
        calls.append(fp)
        return real_load(fp)

    monkeypatch.setattr(ops, "load_certificate", counting_load)
    verifier = main.PkiVerifier(cert=cert_files["leaf"], cacert=cert_files["root"])
    verifier.verify()
    verifier.verify()
    assert calls == [cert_files["leaf"], cert_files["root"]] * 2


def test_blank_value_is_rejected():
    with pytest.raises(ValueError, match="--cert"):
        main.PkiVerifier(cert="")
