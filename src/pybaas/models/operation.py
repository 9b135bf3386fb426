"""Declarative descriptors for platform API operations."""

from __future__ import annotations

import enum
import re

from pydantic import field_validator, model_validator

from pybaas._constants import HTTP_METHODS
from pybaas.models._base import BaasBaseModel

_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


class ParamLocation(enum.StrEnum):
    """Where a parameter travels in the HTTP request."""

    PATH = "path"
    QUERY = "query"
    BODY = "body"
    HEADER = "header"
    FORM = "form"


class OperationParam(BaasBaseModel):
    """One declared operation parameter.

    ``wire_name`` is the name used on the wire when it differs from the
    caller-facing ``name`` (e.g. ``sessionToken`` → ``session-token``).
    """

    name: str
    location: ParamLocation
    required: bool = False
    wire_name: str | None = None

    @property
    def key(self) -> str:
        return self.wire_name or self.name


class Operation(BaasBaseModel):
    """A platform endpoint described as data.

    Parameters
    ----------
    name : str
        Python-style operation name (``get_devices_list``).
    swagger_id : str
        The platform's Swagger ``operationId`` (``getDevicesListUsingGET``).
    method : str
        HTTP verb.
    path : str
        Path template relative to the domain, e.g. ``/v1.0/devices/{deviceId}``.
    summary : str
        Short description.
    params : tuple[OperationParam, ...]
        Declared parameters in declaration order.
    """

    name: str
    swagger_id: str
    method: str
    path: str
    summary: str = ""
    params: tuple[OperationParam, ...] = ()

    @field_validator("method")
    @classmethod
    def _method_known(cls, value: str) -> str:
        method = value.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"unsupported HTTP method {value!r}")
        return method

    @model_validator(mode="after")
    def _path_params_declared(self) -> Operation:
        declared = {p.name for p in self.params if p.location is ParamLocation.PATH}
        placeholders = set(_PLACEHOLDER.findall(self.path))
        if placeholders != declared:
            raise ValueError(
                f"{self.name}: path placeholders {sorted(placeholders)} do not match path params {sorted(declared)}"
            )
        return self

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.params if p.required)


def unresolved_placeholders(path: str) -> list[str]:
    """Names of ``{placeholder}`` segments still present in *path*."""
    return _PLACEHOLDER.findall(path)
