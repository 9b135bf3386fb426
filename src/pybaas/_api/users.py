"""User management operations.

Endpoints:
  - /v1.0/users                       (list, create)
  - /v1.0/users/{userId}              (get)
  - /v1.0/users/child/{userId}        (update, delete)
  - /v1.0/users/{userId}/childQuery
  - /v1.0/users/{userId}/enable|disable|resetPassword
  - /v1.0/users/updatePassword
"""

from __future__ import annotations

from pybaas._api._common import body_param, operation, path_param, query_param, session_token
from pybaas.models.operation import Operation

OPERATIONS: tuple[Operation, ...] = (
    operation(
        "get_users",
        "getUsersUsingGET",
        "GET",
        "/v1.0/users",
        "List users",
        session_token(),
        query_param("loginName"),
        query_param("status"),
        query_param("email"),
        query_param("mobile"),
        query_param("roleId"),
        query_param("pageNum"),
        query_param("pageSize"),
    ),
    operation(
        "insert_user",
        "insertUserUsingPOST",
        "POST",
        "/v1.0/users",
        "Create a child user",
        body_param("addUserRequest"),
        session_token(),
    ),
    operation(
        "get_user",
        "getUserByUserIdUsingGET",
        "GET",
        "/v1.0/users/{userId}",
        "Get one user",
        path_param("userId"),
        session_token(),
    ),
    operation(
        "update_user",
        "updateUserUsingPUT",
        "PUT",
        "/v1.0/users/child/{userId}",
        "Edit a child user",
        path_param("userId"),
        body_param("updateUserRequest"),
        session_token(),
    ),
    operation(
        "delete_user",
        "deleteUserByUserIdUsingDELETE",
        "DELETE",
        "/v1.0/users/child/{userId}",
        "Delete a child user",
        path_param("userId"),
        session_token(),
    ),
    operation(
        "query_child_users",
        "queryChildInfoUsingGET",
        "GET",
        "/v1.0/users/{userId}/childQuery",
        "List a user's children",
        path_param("userId"),
        session_token(),
        query_param("pageNum"),
        query_param("pageSize"),
    ),
    operation(
        "disable_user",
        "disableUserUsingPUT",
        "PUT",
        "/v1.0/users/{userId}/disable",
        "Disable a user",
        path_param("userId"),
        session_token(),
    ),
    operation(
        "enable_user",
        "enableUserUsingPUT",
        "PUT",
        "/v1.0/users/{userId}/enable",
        "Enable a user",
        path_param("userId"),
        session_token(),
    ),
    operation(
        "reset_password",
        "resetPasswordUsingPUT",
        "PUT",
        "/v1.0/users/{userId}/resetPassword",
        "Reset a user's password",
        path_param("userId"),
        session_token(),
    ),
    operation(
        "update_password",
        "updatePasswordUsingPUT",
        "PUT",
        "/v1.0/users/updatePassword",
        "Change the caller's password",
        body_param("password"),
        session_token(),
    ),
)
