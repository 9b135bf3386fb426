from __future__ import annotations

import logging

import pytest

from pybaas._redact import redact_for_log
from pybaas._trace import LoggingSink, emit


def test_redact_for_log_redacts_sensitive_keys() -> None:
    payload = {
        "method": "GET",
        "headers": {"authCode": "accessId=a&signature=s", "session-token": "tok", "Accept": "*/*"},
        "accessKey": "KEY",
        "password": "pw",
        "nested": [{"appToken": "app", "pageNum": 1}],
    }

    redacted = redact_for_log(payload)
    assert redacted["method"] == "GET"
    assert redacted["headers"]["authCode"] == "<redacted>"
    assert redacted["headers"]["session-token"] == "<redacted>"
    assert redacted["headers"]["Accept"] == "*/*"
    assert redacted["accessKey"] == "<redacted>"
    assert redacted["password"] == "<redacted>"
    assert redacted["nested"][0] == {"appToken": "<redacted>", "pageNum": 1}


def test_redact_for_log_truncates_long_strings() -> None:
    long_value = "x" * 600
    redacted = redact_for_log({"value": long_value}, max_string=10)
    assert redacted["value"].startswith("x" * 10)
    assert "<truncated>" in redacted["value"]


def test_redact_for_log_summarizes_bytes() -> None:
    assert redact_for_log(b"\x00\x01\x02") == "<bytes:3b>"


def test_logging_sink_hides_secret_stages(caplog: pytest.LogCaptureFixture) -> None:
    sink = LoggingSink(logging.getLogger("pybaas.test.trace"))
    with caplog.at_level(logging.DEBUG, logger="pybaas.test.trace"):
        sink("signingKey", "SECRET-SIGNING-KEY")
        sink("signatureContent", "GET-a=1")

    assert "SECRET-SIGNING-KEY" not in caplog.text
    assert "signingKey: <redacted>" in caplog.text
    assert "signatureContent: GET-a=1" in caplog.text


def test_emit_contains_sink_failures() -> None:
    def broken(_stage: str, _value: object) -> None:
        raise ValueError("boom")

    emit(broken, "request", {})
    emit(None, "request", {})
