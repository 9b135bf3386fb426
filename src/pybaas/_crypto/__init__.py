"""Cryptographic primitives for BaaS API communication."""

from __future__ import annotations

from pybaas._crypto.hashing import hmac_sha1_base64
from pybaas._crypto.signing import (
    build_auth_prefix,
    build_signature_content,
    canonical_value,
    compute_auth_code,
    encode_uri_component,
    js_json,
)
from pybaas._crypto.trust import build_ssl_context, load_trust_anchor

__all__ = [
    "build_auth_prefix",
    "build_signature_content",
    "build_ssl_context",
    "canonical_value",
    "compute_auth_code",
    "encode_uri_component",
    "hmac_sha1_base64",
    "js_json",
    "load_trust_anchor",
]
