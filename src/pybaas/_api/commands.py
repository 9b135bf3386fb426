"""Device command operations.

Endpoints:
  - /v1.0/devices/commands/send            (list status, send)
  - /v1.0/devices/commands/send/{cmdUuid}  (status of one command)
"""

from __future__ import annotations

from pybaas._api._common import body_param, operation, path_param, query_param, session_token
from pybaas.models.operation import Operation

OPERATIONS: tuple[Operation, ...] = (
    operation(
        "get_command_status_list",
        "getCommandStatusListUsingGET",
        "GET",
        "/v1.0/devices/commands/send",
        "List command statuses",
        session_token(),
        query_param("commandName"),
        query_param("deviceId"),
        query_param("deviceName"),
        query_param("status"),
        query_param("pageNum"),
        query_param("pageSize"),
    ),
    operation(
        "send_commands",
        "sendCommandsUsingPOST",
        "POST",
        "/v1.0/devices/commands/send",
        "Send commands to devices",
        body_param("sendCommandRequest"),
        session_token(),
    ),
    operation(
        "get_command_status",
        "getCommandStatusByCmdUuidUsingGET",
        "GET",
        "/v1.0/devices/commands/send/{cmdUuid}",
        "Get the status of one command",
        path_param("cmdUuid"),
        session_token(),
    ),
)
