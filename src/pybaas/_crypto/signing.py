"""Request signing for the BaaS platform.

Every request carries an ``authCode`` header::

    accessId=<id>&nonce=<nonce>&timestamp=<ms>&signature=<urlencoded base64>

The server recomputes the signature from the same inputs, so the
canonicalization below (key order, value coercion, percent-encoding) has to
match it byte for byte:

  1. auth prefix = ``accessId=..&nonce=..&timestamp=..`` in that fixed order
  2. signing key = Base64(HMAC-SHA1(auth prefix, access key))
  3. signature content = ``<METHOD>-`` + sorted ``key=encodedValue`` pairs
  4. signature = Base64(HMAC-SHA1(signature content, signing key)), URI-encoded

Nonce and timestamp are generated per call; an auth code is never reused.
"""

from __future__ import annotations

import decimal
import json
import math
import time
import uuid
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from pybaas._constants import SESSION_TOKEN_PARAM, URI_COMPONENT_SAFE
from pybaas._crypto.hashing import hmac_sha1_base64
from pybaas._trace import TraceSink, emit


def new_nonce() -> str:
    """Fresh time-based (version 1) UUID string."""
    return str(uuid.uuid1())


def now_ms() -> int:
    """Current epoch timestamp in milliseconds."""
    return int(time.time() * 1000)


def encode_uri_component(value: str) -> str:
    """Percent-encode *value* like ECMAScript ``encodeURIComponent``."""
    return quote(value, safe=URI_COMPONENT_SAFE)


def _js_number_text(value: float) -> str:
    """Format a finite float the way ECMAScript ``Number.prototype.toString`` does."""
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    parsed = decimal.Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in parsed.digits)
    k = len(digits)
    n = int(parsed.exponent) + k
    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = f"0.{'0' * -n}{digits}"
    else:
        exponent = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if exponent > 0 else '-'}{abs(exponent)}"
    return sign + text


def scalar_text(value: Any) -> str:
    """Render a scalar as JavaScript ``String(value)`` would."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _js_number_text(value)
    return str(value)


def js_json(value: Any) -> str:
    """Compact JSON text as ECMAScript ``JSON.stringify`` produces it.

    Numbers follow :func:`scalar_text`; NaN and infinities become ``null``.
    Objects keep insertion order.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return scalar_text(value) if math.isfinite(value) else "null"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, Mapping):
        members = (f"{json.dumps(str(k), ensure_ascii=False)}:{js_json(v)}" for k, v in value.items())
        return "{" + ",".join(members) + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(js_json(v) for v in value) + "]"
    return json.dumps(str(value), ensure_ascii=False)


def canonical_value(value: Any) -> str | None:
    """Return the text that represents *value* in the signature, or ``None`` to drop it.

    Arrays and objects are signed as compact JSON text.  ``None`` and empty
    strings are dropped; numbers (including ``0``) and booleans (including
    ``False``) are kept.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple, Mapping)):
        return js_json(value)
    if isinstance(value, (bool, int, float)):
        return scalar_text(value)
    text = scalar_text(value)
    return text or None


def build_auth_prefix(access_id: str, nonce: str, timestamp: int) -> str:
    """Join the three prefix pairs in protocol order (not sorted)."""
    return "&".join(
        (
            f"accessId={access_id}",
            f"nonce={nonce}",
            f"timestamp={timestamp}",
        )
    )


def build_signature_content(method: str, parameters: Mapping[str, Any]) -> str:
    """Build ``<METHOD>-k1=v1&k2=v2`` from the canonical parameter set.

    ``sessionToken`` is excluded; it travels as a header and is never signed.
    """
    signed = {str(k): v for k, v in parameters.items() if str(k) != SESSION_TOKEN_PARAM}
    pairs: list[str] = []
    for key in sorted(signed):
        text = canonical_value(signed[key])
        if text is None:
            continue
        pairs.append(f"{key}={encode_uri_component(text)}")
    return f"{method.upper()}-{'&'.join(pairs)}"


def compute_auth_code(
    method: str,
    access_id: str,
    access_key: str,
    parameters: Mapping[str, Any],
    *,
    nonce: str | None = None,
    timestamp: int | None = None,
    trace: TraceSink | None = None,
) -> str:
    """Compute the ``authCode`` header value for one request.

    Parameters
    ----------
    method : str
        HTTP verb; upper-cased for signing.
    access_id : str
        Credential id, sent in clear in the prefix.
    access_key : str
        Credential secret; never transmitted.
    parameters : Mapping
        Merged request parameters.  Not modified.
    nonce : str, optional
        Override for reproducibility.  A new UUID is generated when falsy.
    timestamp : int, optional
        Epoch milliseconds override.  The current time is used when falsy.
    trace : TraceSink, optional
        Receives each intermediate stage.

    Returns
    -------
    str
        ``accessId=..&nonce=..&timestamp=..&signature=..``
    """
    auth_prefix = build_auth_prefix(
        access_id,
        nonce or new_nonce(),
        int(timestamp) if timestamp else now_ms(),
    )
    emit(trace, "authPrefix", auth_prefix)

    signing_key = hmac_sha1_base64(auth_prefix, access_key)
    emit(trace, "signingKey", signing_key)

    signature_content = build_signature_content(method, parameters)
    emit(trace, "signatureContent", signature_content)

    signature = hmac_sha1_base64(signature_content, signing_key)
    auth_code = f"{auth_prefix}&signature={encode_uri_component(signature)}"
    emit(trace, "authCode", auth_code)
    return auth_code
