"""Session state returned by a successful login."""

from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field


class Session(BaseModel):
    """Authenticated user session.

    The client never stores a session; callers pass it explicitly to
    :meth:`pybaas.client.BaasClient.call`, so one client can serve several
    users concurrently.

    Parameters
    ----------
    session_token : str
        Token sent as the ``session-token`` header.  It is never signed.
    login_name : str
        Login name the session was opened for.
    created_at : float
        Monotonic timestamp (``time.monotonic()``) when the session was
        created.  Defaults to *now* if not provided.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        str_strip_whitespace=True,
    )

    session_token: str = Field(repr=False)
    login_name: str = ""
    created_at: float = Field(default_factory=time.monotonic)

    @property
    def age(self) -> float:
        """Seconds since the session was created."""
        return time.monotonic() - self.created_at
