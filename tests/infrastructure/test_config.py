# tests/infrastructure/test_config.py
from __future__ import annotations

from collections.abc import Generator

import pytest

from cpf_auth.infrastructure.config import get_settings


@pytest.fixture()
def limpar_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_le_variaveis_de_ambiente(limpar_cache: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AWS_REGION", "sa-east-1")
    monkeypatch.setenv("COGNITO_CLIENT_ID", "cid")
    monkeypatch.setenv("COGNITO_CLIENT_SECRET", "csecret")
    monkeypatch.setenv("COGNITO_USER_POOL_ID", "sa-east-1_Pool")
    monkeypatch.setenv("COGNITO_TIMEOUT_SECONDS", "2.5")

    settings = get_settings()

    assert settings.aws_region == "sa-east-1"
    assert settings.cognito_client_id == "cid"
    assert settings.cognito_client_secret == "csecret"
    assert settings.cognito_user_pool_id == "sa-east-1_Pool"
    assert settings.provider_timeout_seconds == 2.5


def test_valores_ausentes_nao_sao_validados(limpar_cache: None, monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("COGNITO_CLIENT_ID", "COGNITO_CLIENT_SECRET", "COGNITO_USER_POOL_ID", "COGNITO_TIMEOUT_SECONDS"):
        monkeypatch.delenv(var, raising=False)

    settings = get_settings()

    assert settings.cognito_client_id == ""
    assert settings.provider_timeout_seconds == 5.0


def test_settings_e_cacheado(limpar_cache: None) -> None:
    assert get_settings() is get_settings()


def test_repr_nao_expoe_client_secret(limpar_cache: None, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COGNITO_CLIENT_SECRET", "super-secreto")

    assert "super-secreto" not in repr(get_settings())


@pytest.mark.parametrize("raw", ["cinco", "0", "-3", "nan", "inf", ""])
def test_timeout_invalido_usa_padrao(
    raw: str, limpar_cache: None, monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("COGNITO_TIMEOUT_SECONDS", raw)

    assert get_settings().provider_timeout_seconds == 5.0
