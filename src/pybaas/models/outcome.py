"""Classified result of a completed HTTP round trip."""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class OutcomeKind(enum.StrEnum):
    """Three-way classification by HTTP status."""

    SUCCESS = "success"
    EMPTY_SUCCESS = "empty_success"
    FAILURE = "failure"

    @classmethod
    def from_status(cls, status: int) -> OutcomeKind:
        if status == 204:
            return cls.EMPTY_SUCCESS
        if 200 <= status <= 299:
            return cls.SUCCESS
        return cls.FAILURE


class ApiResponse(BaseModel):
    """A successful (2xx) response.

    Failures are never returned; they are raised as
    :class:`pybaas.exceptions.BaasHttpError`.

    Parameters
    ----------
    kind : OutcomeKind
        ``SUCCESS`` or ``EMPTY_SUCCESS`` (status 204, body discarded).
    status : int
        HTTP status code.
    reason : str or None
        HTTP reason phrase.
    body : Any
        Parsed JSON for JSON media types, raw text otherwise or when the JSON
        could not be parsed.  ``None`` for empty successes.
    text : str
        Raw response body.
    decode_error : str or None
        Parser message when a declared-JSON body failed to parse.
    response : Any
        The transport response object (headers, url, ...).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    kind: OutcomeKind
    status: int
    reason: str | None = None
    body: Any = None
    text: str = ""
    decode_error: str | None = None
    response: Any = Field(default=None, repr=False)

    @property
    def headers(self) -> Any:
        """Response headers (case-insensitive mapping for aiohttp responses)."""
        return getattr(self.response, "headers", {})

    @property
    def is_empty(self) -> bool:
        return self.kind is OutcomeKind.EMPTY_SUCCESS
