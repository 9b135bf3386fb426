"""Device archive operations.

Endpoints:
  - /v1.0/devices/archives            (get, add, update, delete)
  - /v1.0/devices/archivesByDeviceId  (get, delete)
  - /v1.0/devices/queryArchives
  - /v1.0/devices/updateArchives
  - /v1.0/devices/deleteArchives
"""

from __future__ import annotations

from pybaas._api._common import body_param, operation, query_param, session_token
from pybaas.models.operation import Operation

OPERATIONS: tuple[Operation, ...] = (
    operation(
        "find_single_archive",
        "findSingleArchiveUsingGET",
        "GET",
        "/v1.0/devices/archives",
        "Get a single device archive",
        session_token(),
        query_param("archiveName"),
        query_param("archiveId"),
    ),
    operation(
        "add_archives",
        "addArchivesUsingPOST",
        "POST",
        "/v1.0/devices/archives",
        "Add a device archive",
        body_param("addArchive"),
        session_token(),
    ),
    operation(
        "update_archive_by_id",
        "updateArchiveByIdUsingPUT",
        "PUT",
        "/v1.0/devices/archives",
        "Edit a device archive",
        body_param("updateArchive"),
        session_token(),
    ),
    operation(
        "delete_archives",
        "deleteArchivesUsingDELETE",
        "DELETE",
        "/v1.0/devices/archives",
        "Delete a device archive",
        session_token(),
        query_param("archiveName"),
        query_param("archiveId"),
    ),
    operation(
        "find_single_archive_by_device_id",
        "findSingleArchiveByDeviceIdUsingGET",
        "GET",
        "/v1.0/devices/archivesByDeviceId",
        "Get a device archive by device id",
        session_token(),
        query_param("archiveName"),
        query_param("deviceId"),
    ),
    operation(
        "delete_archive_by_device_id",
        "deleteArchiveByDeviceIdUsingDELETE",
        "DELETE",
        "/v1.0/devices/archivesByDeviceId",
        "Delete a device archive by device id",
        session_token(),
        query_param("archiveName", required=True),
        query_param("deviceId", required=True),
    ),
    operation(
        "find_archives",
        "findArchivesUsingPOST",
        "POST",
        "/v1.0/devices/queryArchives",
        "Query device archives",
        body_param("mongoDataRequest"),
        session_token(),
    ),
    operation(
        "update_archives",
        "updateArchivesUsingPUT",
        "PUT",
        "/v1.0/devices/updateArchives",
        "Update device archives matching a SQL statement",
        body_param("findMongoDataRequest"),
        session_token(),
    ),
    operation(
        "delete_archives_by_sql",
        "deleteArchivesBySQLUsingDELETE",
        "DELETE",
        "/v1.0/devices/deleteArchives",
        "Delete device archives matching a SQL statement",
        body_param("findMongoDataRequest"),
        session_token(),
    ),
)
