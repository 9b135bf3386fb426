"""SQL template operations."""

from __future__ import annotations

from pybaas._api._common import operation, path_param, query_param, session_token
from pybaas.models.operation import Operation

OPERATIONS: tuple[Operation, ...] = (
    operation(
        "get_templates",
        "getTemplatesUsingGET",
        "GET",
        "/v1.0/sqlTemplates",
        "List SQL templates",
        session_token(),
        query_param("sqlTemplateName"),
        query_param("sqlType"),
        query_param("sqlTemplateType"),
        query_param("sqlDataTypes"),
        query_param("pageNum"),
        query_param("pageSize"),
    ),
    operation(
        "find_template",
        "findTemplateByIdUsingGET",
        "GET",
        "/v1.0/sqlTemplates/{sqlTemplateId}",
        "Get one SQL template",
        path_param("sqlTemplateId"),
        session_token(),
    ),
)
