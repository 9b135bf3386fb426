"""External (custom collection) data operations.

External data lives in named collections outside the device model.  The
``*BySQL`` and ``query*`` variants take a query request body instead of ids.
"""

from __future__ import annotations

from pybaas._api._common import body_param, operation, query_param, session_token
from pybaas.models.operation import Operation

OPERATIONS: tuple[Operation, ...] = (
    operation(
        "find_external_data_by_id",
        "findExternalDataByIdUsingGET",
        "GET",
        "/v1.0/externalData",
        "Get one external data record",
        session_token(),
        query_param("id", required=True),
        query_param("externalDataName", required=True),
    ),
    operation(
        "add_external_data",
        "addExternalDataUsingPOST",
        "POST",
        "/v1.0/externalData",
        "Add an external data record",
        body_param("addExternalData"),
        session_token(),
    ),
    operation(
        "update_external_data_by_id",
        "updateExternalDataByIdUsingPUT",
        "PUT",
        "/v1.0/externalData",
        "Edit an external data record",
        body_param("updateExternalData"),
        session_token(),
    ),
    operation(
        "delete_external_data",
        "deleteExternalDataUsingDELETE",
        "DELETE",
        "/v1.0/externalData",
        "Delete an external data collection or record",
        session_token(),
        query_param("externalDataName", required=True),
        query_param("recordId"),
    ),
    operation(
        "find_external_data",
        "findExternalDataUsingPOST",
        "POST",
        "/v1.0/queryExternalData",
        "Query external data",
        body_param("findMongoDataRequest"),
        session_token(),
    ),
    operation(
        "find_stat_task_data",
        "findStatTaskDataUsingPOST",
        "POST",
        "/v1.0/queryStatTaskData",
        "Query statistics task data",
        body_param("findMongoDataRequest"),
        session_token(),
    ),
    operation(
        "update_external_data",
        "updateExternalDataUsingPUT",
        "PUT",
        "/v1.0/updateExternalData",
        "Update external data matching a SQL statement",
        body_param("findMongoDataRequest"),
        session_token(),
    ),
    operation(
        "delete_external_data_by_sql",
        "deleteExternalDataBySQLUsingDELETE",
        "DELETE",
        "/v1.0/deleteExternalData",
        "Delete external data matching a SQL statement",
        body_param("mongoDataRequest"),
        session_token(),
    ),
)
