"""Signed HTTP dispatch and response classification."""

from __future__ import annotations

import json
import logging
import ssl
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pybaas._constants import AUTH_HEADER, SESSION_TOKEN_HEADER, SESSION_TOKEN_PARAM
from pybaas._crypto.signing import compute_auth_code, js_json, scalar_text
from pybaas._trace import TraceSink, emit
from pybaas.config import BaasConfig
from pybaas.exceptions import TRANSPORT_ERRORS, BaasHttpError, BaasMissingParameterError
from pybaas.models.operation import unresolved_placeholders
from pybaas.models.outcome import ApiResponse, OutcomeKind
from pybaas.models.requests import ApiRequest

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by the client.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`SignedTransport`) concrete.
    """

    async def dispatch(self, request: ApiRequest) -> ApiResponse: ...


def is_json_media_type(content_type: str | None) -> bool:
    """``application/json`` or any ``application/*+json`` type."""
    if not content_type:
        return False
    mime = content_type.split(";", 1)[0].strip().lower()
    return mime == "application/json" or (mime.startswith("application/") and mime.endswith("+json"))


def _wire_text(value: Any) -> str:
    if isinstance(value, Mapping):
        return js_json(value)
    return scalar_text(value)


def _query_items(query: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Flatten query parameters; lists become repeated keys, ``None`` is dropped."""
    items: list[tuple[str, str]] = []
    for key, value in query.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            items.extend((key, _wire_text(v)) for v in value if v is not None)
        else:
            items.append((key, _wire_text(value)))
    return items


def _without_header(headers: dict[str, str], name: str) -> dict[str, str]:
    lowered = name.lower()
    return {k: v for k, v in headers.items() if k.lower() != lowered}


def signing_parameters(request: ApiRequest) -> dict[str, Any]:
    """Merge the parameters covered by the signature.

    Precedence, lowest first: path parameters, query parameters, body keys
    (only when the body is a mapping).
    """
    merged: dict[str, Any] = dict(request.path_parameters)
    merged.update(request.query)
    if isinstance(request.body, Mapping):
        merged.update(request.body)
    return merged


class SignedTransport:
    """HTTP transport that signs every request and classifies every response."""

    def __init__(
        self,
        config: BaasConfig,
        http_session: aiohttp.ClientSession,
        *,
        ssl_context: ssl.SSLContext | None = None,
        trace: TraceSink | None = None,
    ) -> None:
        self._config = config
        self._http = http_session
        self._ssl_context = ssl_context
        self._trace = trace

    def _request_kwargs(self, request: ApiRequest, auth_code: str) -> dict[str, Any]:
        headers = dict(request.headers)
        headers[AUTH_HEADER] = auth_code
        kwargs: dict[str, Any] = {}

        # The session token travels only as a header, never in the URL.
        query_values = dict(request.query)
        token = query_values.pop(SESSION_TOKEN_PARAM, None)
        if token is not None and not any(k.lower() == SESSION_TOKEN_HEADER for k in headers):
            headers[SESSION_TOKEN_HEADER] = scalar_text(token)

        query = _query_items(query_values)
        if query:
            kwargs["params"] = query

        if self._ssl_context is not None and self._config.is_https:
            kwargs["ssl"] = self._ssl_context

        if request.form:
            headers = _without_header(headers, "Content-Type")
            kwargs["data"] = {k: _wire_text(v) for k, v in request.form.items() if v is not None}
        elif isinstance(request.body, (bytes, bytearray, str)):
            kwargs["data"] = request.body
        elif request.body is not None:
            kwargs["json"] = request.body

        kwargs["headers"] = headers
        return kwargs

    async def dispatch(self, request: ApiRequest) -> ApiResponse:
        """Sign and send *request*, returning the classified outcome.

        1. Refuse a path with unresolved ``{placeholders}``
        2. Compute the ``authCode`` header over the merged parameters
        3. Attach the trust anchor for HTTPS domains
        4. Encode the body (form fields, raw bytes/text or JSON)
        5. Send; connection-level errors propagate unchanged
        6. Decode JSON bodies best-effort and classify by status

        Raises
        ------
        BaasMissingParameterError
            The path still contains a placeholder.  Nothing is signed or sent.
        BaasHttpError
            The server answered with a non-2xx status.
        aiohttp.ClientError, asyncio.TimeoutError
            Transport failure, re-raised as is.
        """
        missing = unresolved_placeholders(request.path)
        if missing:
            raise BaasMissingParameterError(
                f"Unresolved path parameter {missing[0]!r} in {request.path}",
                parameter=missing[0],
            )

        auth_code = compute_auth_code(
            request.method,
            self._config.access_id,
            self._config.access_key,
            signing_parameters(request),
            trace=self._trace,
        )
        kwargs = self._request_kwargs(request, auth_code)
        url = f"{self._config.base_url}{request.path}"

        emit(
            self._trace,
            "request",
            {
                "method": request.method,
                "url": url,
                "query": kwargs.get("params", []),
                "headers": kwargs["headers"],
                "body": request.body,
                "form": request.form,
            },
        )
        _logger.debug("%s %s", request.method, url)

        try:
            async with self._http.request(request.method, url, **kwargs) as resp:
                raw = await resp.read()
                return self._classify(request, resp, raw)
        except TRANSPORT_ERRORS as exc:
            emit(self._trace, "error", f"{type(exc).__name__}: {exc}")
            raise

    def _decode_body(self, request: ApiRequest, content_type: str | None, text: str) -> tuple[Any, str | None]:
        if not is_json_media_type(content_type) or not text.strip():
            return text, None
        try:
            return json.loads(text), None
        except json.JSONDecodeError as exc:
            _logger.warning(
                "Response from %s %s declared JSON but did not parse: %s",
                request.method,
                request.path,
                exc,
            )
            return text, str(exc)

    def _classify(self, request: ApiRequest, resp: Any, raw: bytes) -> ApiResponse:
        status = int(resp.status)
        kind = OutcomeKind.from_status(status)

        if kind is OutcomeKind.EMPTY_SUCCESS:
            emit(self._trace, "response", {"status": status, "reason": resp.reason})
            return ApiResponse(kind=kind, status=status, reason=resp.reason, response=resp)

        try:
            text = raw.decode(resp.charset or "utf-8", errors="replace")
        except LookupError:
            text = raw.decode("utf-8", errors="replace")
        body, decode_error = self._decode_body(request, resp.content_type, text)
        emit(self._trace, "response", {"status": status, "reason": resp.reason, "body": body})

        if kind is OutcomeKind.FAILURE:
            raise BaasHttpError(
                f"HTTP {status} from {request.method} {request.path}: {text[:200]}",
                status_code=status,
                reason=resp.reason,
                body=body,
                text=text,
                response=resp,
                endpoint=request.path,
                decode_error=decode_error,
            )

        return ApiResponse(
            kind=kind,
            status=status,
            reason=resp.reason,
            body=body,
            text=text,
            decode_error=decode_error,
            response=resp,
        )
