"""Validated dispatch input.

:class:`ApiRequest` is the "validate → normalize → execute" step in front of
the signed transport: a fully resolved description of one HTTP call.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from pybaas._constants import HTTP_METHODS
from pybaas._crypto.signing import scalar_text
from pybaas.models._base import BaasBaseModel


class ApiRequest(BaasBaseModel):
    """One fully resolved HTTP call.

    ``path_parameters`` holds the values already substituted into ``path``;
    they take part in signing with the lowest precedence.
    """

    method: str
    path: str
    path_parameters: dict[str, Any] = Field(default_factory=dict)
    body: Any = None
    headers: dict[str, str] = Field(default_factory=dict)
    query: dict[str, Any] = Field(default_factory=dict)
    form: dict[str, Any] = Field(default_factory=dict)

    @field_validator("method")
    @classmethod
    def _method_known(cls, value: str) -> str:
        method = value.strip().upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"unsupported HTTP method {value!r}")
        return method

    @field_validator("path")
    @classmethod
    def _path_absolute(cls, value: str) -> str:
        path = value.strip()
        if not path.startswith("/"):
            raise ValueError("path must start with '/'")
        return path

    @field_validator("headers", mode="before")
    @classmethod
    def _headers_as_text(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k): scalar_text(v) for k, v in value.items() if v is not None}
        return value
