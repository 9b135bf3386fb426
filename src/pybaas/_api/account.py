"""Account, registration and permission operations.

Registration and verification endpoints are authenticated by the
application's ``appToken`` rather than a user session.
"""

from __future__ import annotations

from pybaas._api._common import body_param, operation, query_param, session_token
from pybaas.models.operation import Operation

OPERATIONS: tuple[Operation, ...] = (
    operation(
        "login",
        "loginUsingGET",
        "GET",
        "/v1.0/login",
        "Log in; the session token is returned in the session-token response header",
        query_param("appToken"),
        query_param("loginName"),
        query_param("password"),
    ),
    operation(
        "register_user",
        "registerUserUsingPOST",
        "POST",
        "/v1.0/register",
        "Register a user",
        body_param("registerUserRequest"),
        query_param("appToken", required=True),
    ),
    operation(
        "send_email_verification",
        "sendEmailVerificationUsingPOST",
        "POST",
        "/v1.0/mails/sendVerification",
        "Send an email verification code",
        query_param("appToken", required=True),
        query_param("address", required=True),
        query_param("invalid"),
    ),
    operation(
        "verify_email_code",
        "emailVerificationUsingPOST",
        "POST",
        "/v1.0/mails/verification",
        "Check an email verification code",
        body_param("emailVerificationRequest"),
        query_param("appToken", required=True),
    ),
    operation(
        "send_sms_verification",
        "sendSmsVerificationUsingPOST",
        "POST",
        "/v1.0/sms/sendVerification",
        "Send an SMS verification code",
        query_param("appToken", required=True),
        query_param("mobile", required=True),
        query_param("invalid"),
    ),
    operation(
        "verify_sms_code",
        "checkCommandScriptUsingPOST",
        "POST",
        "/v1.0/sms/verification",
        "Check an SMS verification code",
        body_param("smsVerificationRequest"),
        query_param("appToken", required=True),
    ),
    operation(
        "find_roles_allow_register",
        "findRoleAllowRegUsingGET",
        "GET",
        "/v1.0/roles/allowReg",
        "List roles open to self-registration",
        query_param("appToken", required=True),
    ),
    operation(
        "find_role_name_list",
        "findRoleNameListUsingGET",
        "GET",
        "/v1.0/roles/offSpringRole",
        "List the caller's descendant roles",
        session_token(),
    ),
    operation(
        "find_custom_permissions",
        "findCustomPermissionUsingGET",
        "GET",
        "/v1.0/extraPermissions",
        "List custom permissions",
        session_token(),
        query_param("customPermissionId"),
        query_param("permissionName"),
        query_param("pageNum"),
        query_param("pageSize"),
    ),
    operation(
        "find_custom_permissions_by_user",
        "findCustomPermissionByUserUsingGET",
        "GET",
        "/v1.0/extraPermissions/user",
        "List the caller's custom permissions",
        session_token(),
    ),
)
