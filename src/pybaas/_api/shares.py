"""Device share operations."""

from __future__ import annotations

from pybaas._api._common import body_param, operation, path_param, query_param, session_token
from pybaas.models.operation import Operation, OperationParam

_BASE = "/v1.0/devices/shares"


def _party_query() -> tuple[OperationParam, ...]:
    return (
        query_param("deviceId"),
        query_param("loginName"),
        query_param("userName"),
        query_param("startDate"),
        query_param("endDate"),
        query_param("pageNum"),
        query_param("pageSize"),
    )


OPERATIONS: tuple[Operation, ...] = (
    operation(
        "get_device_shares_list",
        "getDeviceSharesListUsingGET",
        "GET",
        _BASE,
        "List device shares",
        session_token(),
        query_param("deviceId"),
        query_param("fromUser"),
        query_param("toUser"),
        query_param("startDate"),
        query_param("endDate"),
        query_param("pageNum"),
        query_param("pageSize"),
    ),
    operation(
        "add_device_shares",
        "addDeviceSharesUsingPOST",
        "POST",
        _BASE,
        "Share devices with another user",
        body_param("request"),
        session_token(),
    ),
    operation(
        "get_device_share_others",
        "getDeviceShareOthersUsingGET",
        "GET",
        f"{_BASE}/shareOthers",
        "List devices shared with others",
        session_token(),
        *_party_query(),
    ),
    operation(
        "get_device_share_self",
        "getDeviceShareSelfUsingGET",
        "GET",
        f"{_BASE}/shareSelf",
        "List devices shared with me",
        session_token(),
        *_party_query(),
    ),
    operation(
        "get_device_share",
        "getDeviceSharesByIdUsingGET",
        "GET",
        f"{_BASE}/{{shareId}}",
        "Get one share",
        path_param("shareId"),
        session_token(),
    ),
    operation(
        "delete_device_share",
        "deleteDeviceSharesUsingDELETE",
        "DELETE",
        f"{_BASE}/{{shareId}}",
        "Revoke a share",
        path_param("shareId"),
        session_token(),
    ),
)
