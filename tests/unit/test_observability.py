"""Unit tests for metrics and structured logging"""

import json
import logging

import pytest
from prometheus_client import REGISTRY

from ohmyfin import ApiError
from ohmyfin.observability.logging import setup_logging


def _count(operation: str, outcome: str) -> float:
    return REGISTRY.get_sample_value("ohmyfin_requests_total", {"operation": operation, "outcome": outcome}) or 0.0


async def test_request_outcomes_are_counted(make_client, sample_ssi_result):
    before_success = _count("getssi", "success")
    before_error = _count("getssi", "api_error")

    await make_client(json_body=sample_ssi_result).get_ssi(swift="CHASUS33", currency="USD")
    with pytest.raises(ApiError):
        await make_client(status_code=503, json_body={"message": "down"}).get_ssi(swift="CHASUS33", currency="USD")

    assert _count("getssi", "success") == before_success + 1
    assert _count("getssi", "api_error") == before_error + 1


async def test_latency_is_observed(make_client):
    before = REGISTRY.get_sample_value("ohmyfin_request_duration_seconds_count", {"operation": "change"}) or 0.0

    await make_client(json_body={"message": "ok"}).change(ref="REF1", status="success", role="other")

    assert REGISTRY.get_sample_value("ohmyfin_request_duration_seconds_count", {"operation": "change"}) == before + 1


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_emits_json(restore_root_logger, capsys):
    setup_logging("INFO", service="ohmyfin-test")

    logging.getLogger("ohmyfin.client").warning("Ohmyfin track failed", extra={"status_code": 404})

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["message"] == "Ohmyfin track failed"
    assert record["level"] == "WARNING"
    assert record["service"] == "ohmyfin-test"
    assert record["status_code"] == 404
    assert "timestamp" in record


async def test_api_errors_are_logged(make_client, caplog):
    client = make_client(status_code=404, json_body={"message": "not found"})

    with caplog.at_level(logging.WARNING, logger="ohmyfin.client"), pytest.raises(ApiError):
        await client.get_ssi(swift="NOPEXXXX", currency="USD")

    assert "Ohmyfin getssi failed: not found" in caplog.text
