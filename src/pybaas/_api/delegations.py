"""Device delegation operations."""

from __future__ import annotations

from pybaas._api._common import body_param, operation, path_param, query_param, session_token
from pybaas.models.operation import Operation, OperationParam

_BASE = "/v1.0/devices/delegations"


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
        "get_device_delegations_list",
        "getDeviceDelegationsListUsingGET",
        "GET",
        _BASE,
        "List device delegations",
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
        "add_device_delegations",
        "addDeviceDelegationsUsingPOST",
        "POST",
        _BASE,
        "Delegate devices to another user",
        body_param("request"),
        session_token(),
    ),
    operation(
        "get_device_delegate_others",
        "getDeviceDelegateOthersUsingGET",
        "GET",
        f"{_BASE}/delegateOthers",
        "List devices delegated to others",
        session_token(),
        *_party_query(),
    ),
    operation(
        "get_device_delegate_self",
        "getDeviceDelegateSelfUsingGET",
        "GET",
        f"{_BASE}/delegateSelf",
        "List devices delegated to me",
        session_token(),
        *_party_query(),
    ),
    operation(
        "get_device_delegation",
        "getDeviceDelegationsByIdUsingGET",
        "GET",
        f"{_BASE}/{{delegateId}}",
        "Get one delegation",
        path_param("delegateId"),
        session_token(),
    ),
    operation(
        "delete_device_delegation",
        "deleteDeviceDelegationsUsingDELETE",
        "DELETE",
        f"{_BASE}/{{delegateId}}",
        "Revoke a delegation",
        path_param("delegateId"),
        session_token(),
    ),
)
