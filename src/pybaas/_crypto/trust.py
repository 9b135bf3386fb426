"""Trust anchor (CA certificate) handling for HTTPS domains."""

from __future__ import annotations

import logging
import os
import ssl
from pathlib import Path

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from pybaas.config import BaasConfig
from pybaas.exceptions import BaasConfigError

_logger = logging.getLogger(__name__)

CaMaterial = str | bytes | os.PathLike[str]


def _read_material(ca: CaMaterial) -> bytes:
    if isinstance(ca, (bytes, bytearray)):
        return bytes(ca)
    if isinstance(ca, str) and "-----BEGIN" in ca:
        return ca.encode("ascii", errors="replace")
    path = Path(ca)
    try:
        return path.read_bytes()
    except OSError as exc:
        raise BaasConfigError(f"Cannot read CA certificate file {path}: {exc}") from exc


def load_trust_anchor(ca: CaMaterial) -> str:
    """Load and validate CA material, returning normalized PEM text.

    Parameters
    ----------
    ca : str, bytes or path-like
        PEM text, PEM bytes, or the path of a PEM file.  A bundle with several
        certificates is accepted.

    Raises
    ------
    BaasConfigError
        The material cannot be read or holds no parseable certificate.
    """
    data = _read_material(ca)
    try:
        certificates = x509.load_pem_x509_certificates(data)
    except ValueError as exc:
        raise BaasConfigError(f"Invalid CA certificate material: {exc}") from exc
    _logger.debug(
        "Loaded trust anchor subjects=%s",
        [cert.subject.rfc4514_string() for cert in certificates],
    )
    return "".join(cert.public_bytes(serialization.Encoding.PEM).decode("ascii") for cert in certificates)


def build_ssl_context(config: BaasConfig) -> ssl.SSLContext | None:
    """Build the SSL context shared by every request of one client.

    Returns ``None`` for plain HTTP domains.  For HTTPS the context trusts
    exactly the configured anchor, or the system store when none is set.
    """
    if not config.is_https:
        return None
    if config.ca is None:
        return ssl.create_default_context()
    pem = load_trust_anchor(config.ca)
    try:
        return ssl.create_default_context(cadata=pem)
    except ssl.SSLError as exc:
        raise BaasConfigError(f"CA certificate rejected by SSL backend: {exc}") from exc
