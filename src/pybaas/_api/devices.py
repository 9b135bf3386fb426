"""Device operations.

Endpoints:
  - /v1.0/devices                    (list, add one)
  - /v1.0/devices/import             (bulk import)
  - /v1.0/devices/info/{deviceId}    (get, update)
  - /v1.0/devices/{deviceId}         (delete)
  - /v1.0/devices/enable|disable/{deviceId}
  - /v1.0/devices/assign
  - /v1.0/devices/logs
  - /v1.0/devices/queryAlarms|queryDatas|queryStats
"""

from __future__ import annotations

from pybaas._api._common import body_param, operation, path_param, query_param, session_token
from pybaas.models.operation import Operation

OPERATIONS: tuple[Operation, ...] = (
    operation(
        "get_devices_list",
        "getDevicesListUsingGET",
        "GET",
        "/v1.0/devices",
        "List devices",
        session_token(),
        query_param("deviceName"),
        query_param("status"),
        query_param("groupId"),
        query_param("deviceOwner"),
        query_param("beginTime"),
        query_param("endTime"),
        query_param("pageNum"),
        query_param("pageSize"),
    ),
    operation(
        "add_device",
        "addDeviceUsingPOST",
        "POST",
        "/v1.0/devices",
        "Import a single device",
        body_param("addDevice"),
        session_token(),
    ),
    operation(
        "add_devices",
        "addDevicesUsingPOST",
        "POST",
        "/v1.0/devices/import",
        "Bulk import devices",
        body_param("deviceImport"),
        session_token(),
    ),
    operation(
        "get_device",
        "getDevicesByIdUsingGET",
        "GET",
        "/v1.0/devices/info/{deviceId}",
        "Get device information",
        path_param("deviceId"),
        session_token(),
    ),
    operation(
        "update_device",
        "updateDevicesUsingPUT",
        "PUT",
        "/v1.0/devices/info/{deviceId}",
        "Edit a device",
        path_param("deviceId"),
        body_param("updateDevice"),
        session_token(),
    ),
    operation(
        "delete_device",
        "deleteDevicesUsingDELETE",
        "DELETE",
        "/v1.0/devices/{deviceId}",
        "Delete a device",
        path_param("deviceId"),
        session_token(),
    ),
    operation(
        "disable_device",
        "disableDevicesByIdUsingPUT",
        "PUT",
        "/v1.0/devices/disable/{deviceId}",
        "Disable a device",
        path_param("deviceId"),
        session_token(),
    ),
    operation(
        "enable_device",
        "enableDevicesByIdUsingPUT",
        "PUT",
        "/v1.0/devices/enable/{deviceId}",
        "Enable a device",
        path_param("deviceId"),
        session_token(),
    ),
    operation(
        "assign_devices",
        "assignDevicesUsingPUT",
        "PUT",
        "/v1.0/devices/assign",
        "Assign devices to a user",
        body_param("assignDevice"),
        session_token(),
    ),
    operation(
        "get_device_logs",
        "getDeviceLogsListUsingGET",
        "GET",
        "/v1.0/devices/logs",
        "List device logs",
        session_token(),
        query_param("deviceId"),
        query_param("deviceName"),
        query_param("logType"),
        query_param("beginDate"),
        query_param("endDate"),
        query_param("userName"),
        query_param("operator"),
        query_param("pageNum"),
        query_param("pageSize"),
    ),
    operation(
        "find_device_alarms",
        "findDeviceAlarmUsingPOST",
        "POST",
        "/v1.0/devices/queryAlarms",
        "Query alarm data",
        body_param("findMongoDataRequest"),
        session_token(),
    ),
    operation(
        "find_device_datas",
        "findDeviceDatasUsingPOST",
        "POST",
        "/v1.0/devices/queryDatas",
        "Query global device data",
        body_param("mongoDataRequest"),
        session_token(),
    ),
    operation(
        "find_statistics_datas",
        "findStatisticsDatasUsingPOST",
        "POST",
        "/v1.0/devices/queryStats",
        "Query statistics data",
        body_param("findMongoDataRequest"),
        session_token(),
    ),
)
