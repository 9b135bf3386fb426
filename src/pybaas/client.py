"""High-level async client for the BaaS platform API."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from pybaas._api import OPERATIONS, build_request, get_operation
from pybaas._constants import DEFAULT_HEADERS, SESSION_TOKEN_HEADER, SESSION_TOKEN_PARAM
from pybaas._crypto.trust import build_ssl_context
from pybaas._trace import LoggingSink, TraceSink, null_sink
from pybaas._transport import SignedTransport, Transport
from pybaas.config import BaasConfig
from pybaas.exceptions import BaasAuthenticationError, BaasError
from pybaas.models.operation import Operation
from pybaas.models.outcome import ApiResponse
from pybaas.models.requests import ApiRequest
from pybaas.session import Session

_logger = logging.getLogger(__name__)


class BaasClient:
    """Async client for the BaaS platform API.

    Usage::

        async with BaasClient(config) as client:
            session = await client.login(app_token=..., login_name=..., password=...)
            result = await client.call("get_devices_list", {"pageNum": 1}, session=session)
    """

    def __init__(
        self,
        config: BaasConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        on_trace: TraceSink | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        # Raises BaasConfigError for unusable CA material before any I/O.
        self._ssl_context = build_ssl_context(config)
        if on_trace is not None:
            self._trace: TraceSink = on_trace
        elif config.debug:
            self._trace = LoggingSink()
        else:
            self._trace = null_sink
        self._transport: Transport | None = None

    @property
    def config(self) -> BaasConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> BaasClient:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._config.timeout),
            )
        self._transport = SignedTransport(
            self._config,
            self._http_session,
            ssl_context=self._ssl_context,
            trace=self._trace,
        )
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._transport = None

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise BaasError("Client not initialized. Use 'async with BaasClient(...) as client:'")
        return self._transport

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    async def dispatch(
        self,
        method: str,
        path: str,
        *,
        parameters: Mapping[str, Any] | None = None,
        body: Any = None,
        headers: Mapping[str, Any] | None = None,
        query: Mapping[str, Any] | None = None,
        form: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Sign and send one request against a fully resolved *path*.

        *parameters* are merged into the query string (explicit *query*
        entries win); a ``sessionToken`` entry is sent as the ``session-token``
        header instead.  Headers start from ``Accept: */*`` and
        ``Content-Type: application/json``.

        Raises
        ------
        BaasMissingParameterError
            *path* still contains a ``{placeholder}``.
        BaasHttpError
            Non-2xx response.
        aiohttp.ClientError, asyncio.TimeoutError
            Transport failure, unchanged.
        """
        merged_query: dict[str, Any] = dict(parameters or {})
        merged_query.update(query or {})
        merged_headers: dict[str, Any] = dict(DEFAULT_HEADERS)
        merged_headers.update(headers or {})
        token = merged_query.pop(SESSION_TOKEN_PARAM, None)
        if token is not None:
            merged_headers.setdefault(SESSION_TOKEN_HEADER, token)
        request = ApiRequest(
            method=method,
            path=path,
            body=body,
            headers=merged_headers,
            query=merged_query,
            form=dict(form or {}),
        )
        return await self._require_transport().dispatch(request)

    async def call(
        self,
        name: str,
        parameters: Mapping[str, Any] | None = None,
        *,
        session: Session | None = None,
        extra_query: Mapping[str, Any] | None = None,
    ) -> ApiResponse:
        """Call a catalog operation by Python name or Swagger ``operationId``.

        Parameters
        ----------
        name : str
            Operation name, e.g. ``get_devices_list`` or ``getDevicesListUsingGET``.
        parameters : Mapping, optional
            Declared parameter values keyed by their platform names.
        session : Session, optional
            Supplies ``sessionToken`` unless *parameters* already does.
        extra_query : Mapping, optional
            Additional query parameters merged over the declared ones.

        Raises
        ------
        BaasOperationNotFoundError
            *name* is not in the catalog.
        BaasMissingParameterError
            A required parameter is absent.  Nothing is sent.
        """
        op = get_operation(name)
        supplied: dict[str, Any] = dict(parameters or {})
        if session is not None and supplied.get(SESSION_TOKEN_PARAM) is None:
            supplied[SESSION_TOKEN_PARAM] = session.session_token
        request = build_request(op, supplied, extra_query=extra_query)
        return await self._require_transport().dispatch(request)

    async def login(self, *, app_token: str, login_name: str, password: str) -> Session:
        """Log in and return a new :class:`Session`.

        Raises
        ------
        BaasAuthenticationError
            The response carries no ``session-token`` header.
        BaasHttpError
            The platform rejected the login.
        """
        result = await self.call(
            "login",
            {"appToken": app_token, "loginName": login_name, "password": password},
        )
        token = result.headers.get(SESSION_TOKEN_HEADER)
        if not token:
            raise BaasAuthenticationError(f"Login for {login_name!r} returned no {SESSION_TOKEN_HEADER} header")
        _logger.debug("Login succeeded for %s", login_name)
        return Session(session_token=token, login_name=login_name)

    @staticmethod
    def operations() -> list[Operation]:
        """All catalog operations, sorted by name."""
        return [OPERATIONS[name] for name in sorted(OPERATIONS)]
