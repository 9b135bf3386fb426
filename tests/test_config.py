from __future__ import annotations

import ssl
from pathlib import Path

import pytest

from pybaas._constants import DEFAULT_DOMAIN
from pybaas._crypto.trust import build_ssl_context, load_trust_anchor
from pybaas.client import BaasClient
from pybaas.config import BaasConfig
from pybaas.exceptions import BaasConfigError


def test_domain_defaults_to_production() -> None:
    assert BaasConfig(access_id="id", access_key="key").base_url == DEFAULT_DOMAIN
    assert BaasConfig(access_id="id", access_key="key", domain=None).base_url == DEFAULT_DOMAIN


def test_domain_trailing_slash_removed() -> None:
    config = BaasConfig(access_id="id", access_key="key", domain="http://localhost:8080/api/")
    assert config.base_url == "http://localhost:8080/api"
    assert config.is_https is False


@pytest.mark.parametrize("domain", ["", "   ", "ftp://example.com", "example.com"])
def test_invalid_domain_rejected(domain: str) -> None:
    with pytest.raises(BaasConfigError):
        BaasConfig(access_id="id", access_key="key", domain=domain)


@pytest.mark.parametrize(("access_id", "access_key"), [("", "key"), ("id", ""), ("  ", "key")])
def test_missing_credentials_rejected(access_id: str, access_key: str) -> None:
    with pytest.raises(BaasConfigError):
        BaasConfig(access_id=access_id, access_key=access_key)


def test_non_positive_timeout_rejected() -> None:
    with pytest.raises(BaasConfigError):
        BaasConfig(access_id="id", access_key="key", timeout=0)


def test_config_is_read_only() -> None:
    config = BaasConfig(access_id="id", access_key="key")
    with pytest.raises(AttributeError):
        config.access_id = "other"  # type: ignore[misc]


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BAAS_ACCESS_ID", "env-id")
    monkeypatch.setenv("BAAS_ACCESS_KEY", "env-key")
    monkeypatch.setenv("BAAS_DOMAIN", "http://127.0.0.1:9000")
    monkeypatch.setenv("BAAS_DEBUG", "yes")
    monkeypatch.setenv("BAAS_TIMEOUT", "5")
    monkeypatch.delenv("BAAS_CA", raising=False)

    config = BaasConfig.from_env()

    assert config.access_id == "env-id"
    assert config.access_key == "env-key"
    assert config.base_url == "http://127.0.0.1:9000"
    assert config.debug is True
    assert config.timeout == 5.0


def test_from_env_overrides_win(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BAAS_ACCESS_ID", "env-id")
    monkeypatch.setenv("BAAS_ACCESS_KEY", "env-key")
    monkeypatch.setenv("BAAS_DEBUG", "1")

    config = BaasConfig.from_env(access_id="explicit", debug=False)

    assert config.access_id == "explicit"
    assert config.debug is False


def test_from_env_without_credentials_fails(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BAAS_ACCESS_ID", raising=False)
    monkeypatch.delenv("BAAS_ACCESS_KEY", raising=False)
    with pytest.raises(BaasConfigError):
        BaasConfig.from_env()


def test_from_env_bad_timeout(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BAAS_ACCESS_ID", "id")
    monkeypatch.setenv("BAAS_ACCESS_KEY", "key")
    monkeypatch.setenv("BAAS_TIMEOUT", "soon")
    with pytest.raises(BaasConfigError):
        BaasConfig.from_env()


def test_load_trust_anchor_accepts_text_bytes_and_path(ca_pem: str, tmp_path: Path) -> None:
    pem_file = tmp_path / "ca.pem"
    pem_file.write_text(ca_pem)

    assert load_trust_anchor(ca_pem) == ca_pem
    assert load_trust_anchor(ca_pem.encode("ascii")) == ca_pem
    assert load_trust_anchor(pem_file) == ca_pem
    assert load_trust_anchor(str(pem_file)) == ca_pem


def test_load_trust_anchor_rejects_garbage(tmp_path: Path) -> None:
    with pytest.raises(BaasConfigError):
        load_trust_anchor(b"not a certificate")
    with pytest.raises(BaasConfigError):
        load_trust_anchor(tmp_path / "missing.pem")


def test_ssl_context_only_for_https(ca_pem: str) -> None:
    plain = BaasConfig(access_id="id", access_key="key", domain="http://localhost", ca=ca_pem)
    assert build_ssl_context(plain) is None

    secure = BaasConfig(access_id="id", access_key="key", ca=ca_pem)
    context = build_ssl_context(secure)
    assert isinstance(context, ssl.SSLContext)
    assert context.verify_mode == ssl.CERT_REQUIRED


def test_ssl_context_without_ca_uses_system_store() -> None:
    context = build_ssl_context(BaasConfig(access_id="id", access_key="key"))
    assert isinstance(context, ssl.SSLContext)


def test_client_rejects_bad_ca_at_construction() -> None:
    config = BaasConfig(access_id="id", access_key="key", ca=b"-----BEGIN CERTIFICATE-----\nbroken\n")
    with pytest.raises(BaasConfigError):
        BaasClient(config)
