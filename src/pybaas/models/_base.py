"""Base model shared by pybaas data models.

Models are immutable once built: a request description or an operation
descriptor is read by concurrent calls and must never be modified by one
of them.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaasBaseModel(BaseModel):
    """Frozen, strict-by-default pydantic base."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )
