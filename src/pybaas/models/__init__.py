"""Data models for BaaS API requests and responses."""

from pybaas.models._base import BaasBaseModel
from pybaas.models.operation import Operation, OperationParam, ParamLocation, unresolved_placeholders
from pybaas.models.outcome import ApiResponse, OutcomeKind
from pybaas.models.requests import ApiRequest

__all__ = [
    "ApiRequest",
    "ApiResponse",
    "BaasBaseModel",
    "Operation",
    "OperationParam",
    "OutcomeKind",
    "ParamLocation",
    "unresolved_placeholders",
]
