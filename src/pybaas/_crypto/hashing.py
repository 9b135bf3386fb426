"""Hash helpers for BaaS request signing."""

from __future__ import annotations

import base64
import hashlib
import hmac


def hmac_sha1_base64(message: str, key: str) -> str:
    """Compute HMAC-SHA1 of *message* keyed by *key*, Base64 encoded.

    Both strings are UTF-8 encoded before hashing, matching the platform's
    ``HmacSHA1(message, key).toString(Base64)``.

    Parameters
    ----------
    message : str
        The content to authenticate.
    key : str
        The secret key.

    Returns
    -------
    str
        Standard (padded) Base64 of the 20-byte digest.
    """
    digest = hmac.new(key.encode("utf-8"), message.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")
