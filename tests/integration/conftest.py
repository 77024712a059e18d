# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from cpf_auth.application.services.auth_service import AuthService
from cpf_auth.infrastructure.config import Settings
from tests.fakes import FakeProvider

# Nunca falar com a AWS real em testes
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("COGNITO_CLIENT_ID", "test-client-id")
os.environ.setdefault("COGNITO_CLIENT_SECRET", "test-client-secret")
os.environ.setdefault("COGNITO_USER_POOL_ID", "us-east-1_TestPool")


@pytest.fixture()
def client_com_provider(settings: Settings) -> Generator[Callable[[FakeProvider], TestClient], None, None]:
    """Fabrica de TestClient com o provedor de identidade substituido."""
    from cpf_auth.infrastructure.config import get_settings
    get_settings.cache_clear()

    from cpf_auth.interfaces.api.dependencies import get_auth_service
    from cpf_auth.interfaces.api.main import app

    clientes: list[TestClient] = []

    def _fabricar(provider: FakeProvider) -> TestClient:
        app.dependency_overrides[get_auth_service] = lambda: AuthService(provider, settings)
        c = TestClient(app)
        c.__enter__()
        clientes.append(c)
        return c

    yield _fabricar

    for c in clientes:
        c.__exit__(None, None, None)
    app.dependency_overrides.clear()
    get_settings.cache_clear()


@pytest.fixture()
def client(
    client_com_provider: Callable[[FakeProvider], TestClient], provider_ok: FakeProvider,
) -> TestClient:
    return client_com_provider(provider_ok)
