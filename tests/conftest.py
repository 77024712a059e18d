# tests/conftest.py
from __future__ import annotations

import pytest

from cpf_auth.domain.autenticacao.entities import AuthError
from cpf_auth.infrastructure.config import Settings
from tests.fakes import FakeProvider


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        aws_region="us-east-1",
        cognito_client_id="test-client-id",
        cognito_client_secret="test-client-secret",
        cognito_user_pool_id="us-east-1_TestPool",
        provider_timeout_seconds=5.0,
    )


@pytest.fixture()
def provider_ok() -> FakeProvider:
    return FakeProvider(token="abc123")


@pytest.fixture()
def provider_falha() -> FakeProvider:
    return FakeProvider(erro=AuthError("NotAuthorizedException", code="NotAuthorizedException"))
