"""Custom exception hierarchy for pybaas."""

from __future__ import annotations

import asyncio
from typing import Any

import aiohttp

#: Connection-level failures.  These are never wrapped: the dispatcher lets the
#: transport's own exception reach the caller unchanged.
TRANSPORT_ERRORS: tuple[type[BaseException], ...] = (aiohttp.ClientError, asyncio.TimeoutError)


class BaasError(Exception):
    """Base exception for all pybaas errors."""


class BaasConfigError(BaasError):
    """Invalid or missing configuration."""


class BaasMissingParameterError(BaasError):
    """A required operation parameter is absent.

    Raised before any signing or network I/O takes place, so a request known
    to be incomplete never reaches the platform.
    """

    def __init__(self, message: str, *, parameter: str, operation: str = "") -> None:
        self.parameter = parameter
        self.operation = operation
        super().__init__(message)


class BaasOperationNotFoundError(BaasError):
    """No operation is registered under the requested name."""


class BaasHttpError(BaasError):
    """The platform answered with a non-2xx status.

    ``body`` is the best-effort decoded payload (parsed JSON when the response
    declared a JSON media type and parsed cleanly, raw text otherwise); ``text``
    is always the raw body.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reason: str | None = None,
        body: Any = None,
        text: str = "",
        response: Any = None,
        endpoint: str = "",
        decode_error: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.text = text
        self.response = response
        self.endpoint = endpoint
        self.decode_error = decode_error
        super().__init__(message)


class BaasAuthenticationError(BaasError):
    """Login succeeded at the HTTP level but yielded no session token."""
