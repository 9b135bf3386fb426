from __future__ import annotations

import base64
import hashlib
import hmac
from urllib.parse import quote, unquote

import pytest

from pybaas._crypto import signing
from pybaas._crypto.hashing import hmac_sha1_base64
from pybaas._crypto.signing import (
    build_auth_prefix,
    build_signature_content,
    canonical_value,
    compute_auth_code,
    encode_uri_component,
)


def _reference_hmac(message: str, key: str) -> str:
    digest = hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


def _split_auth_code(auth_code: str) -> dict[str, str]:
    return dict(part.split("=", 1) for part in auth_code.split("&"))


def test_hmac_sha1_base64_matches_stdlib() -> None:
    assert hmac_sha1_base64("message", "key") == _reference_hmac("message", "key")


def test_auth_prefix_keeps_protocol_order() -> None:
    assert build_auth_prefix("AID", "N1", 1000) == "accessId=AID&nonce=N1&timestamp=1000"


def test_reference_example_end_to_end() -> None:
    auth_code = compute_auth_code("get", "AID", "KEY", {"z": "1", "a": ""}, nonce="N1", timestamp=1000)

    prefix = "accessId=AID&nonce=N1&timestamp=1000"
    signing_key = _reference_hmac(prefix, "KEY")
    signature = _reference_hmac("GET-z=1", signing_key)
    assert auth_code == f"{prefix}&signature={quote(signature, safe='')}"


def test_signature_content_sorts_keys_and_drops_empty() -> None:
    content = build_signature_content("post", {"b": 2, "a": "x y", "c": None, "d": ""})
    assert content == "POST-a=x%20y&b=2"


def test_empty_parameter_set_signs_method_only() -> None:
    assert build_signature_content("DELETE", {}) == "DELETE-"


def test_session_token_never_signed() -> None:
    assert build_signature_content("GET", {"sessionToken": "secret", "a": "1"}) == "GET-a=1"


def test_falsy_numbers_and_booleans_are_kept() -> None:
    content = build_signature_content("GET", {"zero": 0, "flag": False, "on": True})
    assert content == "GET-flag=false&on=true&zero=0"


def test_arrays_and_objects_sign_as_compact_json() -> None:
    assert build_signature_content("GET", {"ids": [1, 2]}) == "GET-ids=%5B1%2C2%5D"
    assert canonical_value({"k": "v"}) == '{"k":"v"}'
    assert canonical_value([]) == "[]"


def test_non_ascii_json_is_not_escaped() -> None:
    assert canonical_value(["设备"]) == '["设备"]'
    assert build_signature_content("GET", {"name": "设备"}) == f"GET-name={quote('设备', safe='')}"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a b", "a%20b"),
        ("-_.!~*'()", "-_.!~*'()"),
        ("a/b?c=d&e", "a%2Fb%3Fc%3Dd%26e"),
        ("+", "%2B"),
    ],
)
def test_encode_uri_component(raw: str, expected: str) -> None:
    assert encode_uri_component(raw) == expected


def test_integer_valued_float_renders_without_fraction() -> None:
    assert canonical_value(2.0) == "2"
    assert canonical_value(2.5) == "2.5"


def test_determinism_and_key_order_invariance() -> None:
    first = compute_auth_code("GET", "AID", "KEY", {"a": 1, "b": 2}, nonce="N", timestamp=5)
    second = compute_auth_code("GET", "AID", "KEY", {"b": 2, "a": 1}, nonce="N", timestamp=5)
    assert first == second


def test_parameters_are_not_mutated() -> None:
    params = {"sessionToken": "t", "a": None, "b": [1]}
    snapshot = {"sessionToken": "t", "a": None, "b": [1]}
    compute_auth_code("GET", "AID", "KEY", params, nonce="N", timestamp=5)
    assert params == snapshot


def test_fresh_nonce_and_timestamp_per_call(monkeypatch: pytest.MonkeyPatch) -> None:
    nonces = iter(["nonce-1", "nonce-2"])
    monkeypatch.setattr(signing, "new_nonce", lambda: next(nonces))
    monkeypatch.setattr(signing, "now_ms", lambda: 1234)

    first = _split_auth_code(compute_auth_code("GET", "AID", "KEY", {"a": "1"}))
    second = _split_auth_code(compute_auth_code("GET", "AID", "KEY", {"a": "1"}))

    assert first["nonce"] == "nonce-1"
    assert second["nonce"] == "nonce-2"
    assert first["timestamp"] == "1234"
    assert first["signature"] != second["signature"]


def test_default_nonce_is_uuid1() -> None:
    nonce = _split_auth_code(compute_auth_code("GET", "AID", "KEY", {}))["nonce"]
    assert len(nonce) == 36
    assert nonce[14] == "1"


def test_signature_verifies_with_decoded_value() -> None:
    parts = _split_auth_code(compute_auth_code("PUT", "AID", "KEY", {"x": "a/b"}, nonce="N", timestamp=9))
    signing_key = _reference_hmac("accessId=AID&nonce=N&timestamp=9", "KEY")
    assert unquote(parts["signature"]) == _reference_hmac("PUT-x=a%2Fb", signing_key)


def test_trace_receives_each_stage() -> None:
    stages: list[tuple[str, object]] = []
    auth_code = compute_auth_code(
        "GET", "AID", "KEY", {"a": "1"}, nonce="N", timestamp=1, trace=lambda s, v: stages.append((s, v))
    )
    assert [s for s, _ in stages] == ["authPrefix", "signingKey", "signatureContent", "authCode"]
    assert stages[0][1] == "accessId=AID&nonce=N&timestamp=1"
    assert stages[2][1] == "GET-a=1"
    assert stages[3][1] == auth_code


def test_failing_trace_sink_does_not_change_result() -> None:
    def broken(_stage: str, _value: object) -> None:
        raise RuntimeError("sink failure")

    expected = compute_auth_code("GET", "AID", "KEY", {"a": "1"}, nonce="N", timestamp=1)
    assert compute_auth_code("GET", "AID", "KEY", {"a": "1"}, nonce="N", timestamp=1, trace=broken) == expected


def test_nested_floats_follow_json_stringify() -> None:
    assert canonical_value([1.0, 2.5]) == "[1,2.5]"
    assert canonical_value({"t": float("nan")}) == '{"t":null}'
    assert canonical_value({"a": [float("inf"), -0.0, None, True]}) == '{"a":[null,0,null,true]}'
    assert canonical_value({"big": 1e21, "small": 1e-7}) == '{"big":1e+21,"small":1e-7}'


def test_nested_float_body_signature_matches_integer_form() -> None:
    with_floats = build_signature_content("POST", {"points": [1.0, 2.0]})
    with_ints = build_signature_content("POST", {"points": [1, 2]})
    assert with_floats == with_ints


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (2.0, "2"),
        (2.5, "2.5"),
        (-0.0, "0"),
        (0.1, "0.1"),
        (100.0, "100"),
        (123.456, "123.456"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e22, "1.5e+22"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (-1.5e-7, "-1.5e-7"),
        (float("nan"), "NaN"),
        (float("-inf"), "-Infinity"),
    ],
)
def test_float_text_matches_javascript_string(value: float, expected: str) -> None:
    assert signing.scalar_text(value) == expected
