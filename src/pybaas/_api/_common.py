"""Shared helpers for the operation catalog modules.

This module centralizes the patterns every platform endpoint repeats:
- declaring the ``session-token`` header and path/query/body parameters
- checking required parameters before anything is signed
- substituting path templates
- assembling query, header, body and form parts into an :class:`ApiRequest`

It is internal to pybaas and may change at any time.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from pybaas._constants import DEFAULT_HEADERS, SESSION_TOKEN_HEADER, SESSION_TOKEN_PARAM
from pybaas._crypto.signing import scalar_text
from pybaas.exceptions import BaasMissingParameterError
from pybaas.models.operation import Operation, OperationParam, ParamLocation
from pybaas.models.requests import ApiRequest

_logger = logging.getLogger(__name__)


def session_token(*, required: bool = True) -> OperationParam:
    return OperationParam(
        name=SESSION_TOKEN_PARAM,
        location=ParamLocation.HEADER,
        required=required,
        wire_name=SESSION_TOKEN_HEADER,
    )


def path_param(name: str) -> OperationParam:
    return OperationParam(name=name, location=ParamLocation.PATH, required=True)


def query_param(name: str, *, required: bool = False) -> OperationParam:
    return OperationParam(name=name, location=ParamLocation.QUERY, required=required)


def body_param(name: str, *, required: bool = True) -> OperationParam:
    return OperationParam(name=name, location=ParamLocation.BODY, required=required)


def operation(
    name: str,
    swagger_id: str,
    method: str,
    path: str,
    summary: str,
    *params: OperationParam,
) -> Operation:
    return Operation(
        name=name,
        swagger_id=swagger_id,
        method=method,
        path=path,
        summary=summary,
        params=params,
    )


def build_request(
    op: Operation,
    parameters: Mapping[str, Any] | None = None,
    *,
    extra_query: Mapping[str, Any] | None = None,
) -> ApiRequest:
    """Turn caller parameters into a fully resolved :class:`ApiRequest`.

    A parameter whose value is ``None`` counts as absent.  Parameters the
    operation does not declare are ignored.

    Raises
    ------
    BaasMissingParameterError
        A required parameter is absent.
    """
    supplied = dict(parameters or {})
    path = op.path
    path_parameters: dict[str, Any] = {}
    query: dict[str, Any] = {}
    headers: dict[str, str] = dict(DEFAULT_HEADERS)
    form: dict[str, Any] = {}
    body: Any = None

    for param in op.params:
        value = supplied.get(param.name)
        if value is None:
            if param.required:
                raise BaasMissingParameterError(
                    f"Missing required parameter: {param.name} ({op.name})",
                    parameter=param.name,
                    operation=op.name,
                )
            continue

        if param.location is ParamLocation.PATH:
            path = path.replace(f"{{{param.name}}}", quote(scalar_text(value), safe=""))
            path_parameters[param.name] = value
        elif param.location is ParamLocation.QUERY:
            query[param.key] = value
        elif param.location is ParamLocation.HEADER:
            headers[param.key] = scalar_text(value)
        elif param.location is ParamLocation.BODY:
            body = value
        else:
            form[param.key] = value

    if extra_query:
        query.update(extra_query)

    ignored = sorted(set(supplied) - {p.name for p in op.params})
    if ignored:
        _logger.debug("%s ignoring undeclared parameters %s", op.name, ignored)

    return ApiRequest(
        method=op.method,
        path=path,
        path_parameters=path_parameters,
        body=body,
        headers=headers,
        query=query,
        form=form,
    )
