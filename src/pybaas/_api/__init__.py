"""Operation catalog.

Every platform endpoint is declared as data in one of the submodules and
registered here under its Python name.  The platform's Swagger
``operationId`` is accepted as an alias.
"""

from __future__ import annotations

from pybaas._api import (
    account,
    archives,
    commands,
    delegations,
    devices,
    external_data,
    shares,
    templates,
    users,
)
from pybaas._api._common import build_request
from pybaas.exceptions import BaasOperationNotFoundError
from pybaas.models.operation import Operation


def _register(*groups: tuple[Operation, ...]) -> dict[str, Operation]:
    registry: dict[str, Operation] = {}
    for group in groups:
        for op in group:
            if op.name in registry:
                raise ValueError(f"duplicate operation name {op.name!r}")
            registry[op.name] = op
    return registry


OPERATIONS: dict[str, Operation] = _register(
    account.OPERATIONS,
    devices.OPERATIONS,
    archives.OPERATIONS,
    commands.OPERATIONS,
    delegations.OPERATIONS,
    shares.OPERATIONS,
    external_data.OPERATIONS,
    templates.OPERATIONS,
    users.OPERATIONS,
)

_BY_SWAGGER_ID: dict[str, Operation] = {op.swagger_id: op for op in OPERATIONS.values()}


def get_operation(name: str) -> Operation:
    """Look up an operation by Python name or Swagger ``operationId``.

    Raises
    ------
    BaasOperationNotFoundError
        No operation is registered under *name*.
    """
    op = OPERATIONS.get(name) or _BY_SWAGGER_ID.get(name)
    if op is None:
        raise BaasOperationNotFoundError(f"Unknown operation: {name}")
    return op


__all__ = ["OPERATIONS", "build_request", "get_operation"]
