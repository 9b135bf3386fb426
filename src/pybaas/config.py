"""Client configuration for pybaas."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pybaas._constants import DEFAULT_DOMAIN
from pybaas.exceptions import BaasConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


@dataclasses.dataclass(frozen=True)
class BaasConfig:
    """Client configuration.

    Parameters
    ----------
    access_id : str
        Access id issued by the platform.
    access_key : str
        Secret paired with ``access_id``; used only as an HMAC key.
    domain : str or None
        API base URL.  ``None`` selects the production endpoint.  A trailing
        ``/`` is removed.
    ca : str, bytes, path-like or None
        Trust anchor for HTTPS domains: PEM text, PEM bytes or a PEM file
        path.  ``None`` uses the system trust store.
    debug : bool
        Log every signing and dispatch stage (secrets redacted).
    timeout : float
        Total request timeout in seconds for client-owned HTTP sessions.
    """

    access_id: str
    access_key: str
    domain: str | None = DEFAULT_DOMAIN
    ca: str | bytes | os.PathLike[str] | None = None
    debug: bool = False
    timeout: float = 30.0

    def __post_init__(self) -> None:
        if not isinstance(self.access_id, str) or not self.access_id.strip():
            raise BaasConfigError("access_id is required")
        if not isinstance(self.access_key, str) or not self.access_key.strip():
            raise BaasConfigError("access_key is required")

        domain = DEFAULT_DOMAIN if self.domain is None else self.domain
        if not isinstance(domain, str):
            raise BaasConfigError(f"domain must be a string, got {type(domain).__name__}")
        domain = domain.strip().rstrip("/")
        if not domain:
            raise BaasConfigError("domain must be a non-empty string")
        if not domain.lower().startswith(("http://", "https://")):
            raise BaasConfigError(f"domain must start with http:// or https://, got {domain!r}")
        object.__setattr__(self, "domain", domain)

        if self.timeout <= 0:
            raise BaasConfigError(f"timeout must be positive, got {self.timeout}")

    @property
    def base_url(self) -> str:
        """Resolved domain (never ``None`` after construction)."""
        return str(self.domain)

    @property
    def is_https(self) -> bool:
        return self.base_url.lower().startswith("https://")

    @classmethod
    def from_env(cls, **overrides: Any) -> BaasConfig:
        """Create configuration from environment variables.

        Reads ``BAAS_ACCESS_ID``, ``BAAS_ACCESS_KEY`` and the optional
        ``BAAS_DOMAIN``, ``BAAS_CA`` (file path), ``BAAS_DEBUG`` and
        ``BAAS_TIMEOUT``.  Explicit keyword arguments override environment
        values.

        Raises
        ------
        BaasConfigError
            Credentials are missing or a value is malformed.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "BAAS_ACCESS_ID": "access_id",
            "BAAS_ACCESS_KEY": "access_key",
            "BAAS_DOMAIN": "domain",
            "BAAS_CA": "ca",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        if "debug" not in overrides:
            config_kwargs["debug"] = _env_bool(env.get("BAAS_DEBUG"), False)

        timeout_env = env.get("BAAS_TIMEOUT")
        if timeout_env is not None and "timeout" not in overrides:
            try:
                config_kwargs["timeout"] = float(timeout_env)
            except ValueError as exc:
                raise BaasConfigError(f"BAAS_TIMEOUT is not a number: {timeout_env!r}") from exc

        config_kwargs.update(overrides)
        config_kwargs.setdefault("access_id", "")
        config_kwargs.setdefault("access_key", "")

        return cls(**config_kwargs)
