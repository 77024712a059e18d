# cpf_auth/interfaces/api/dependencies.py
from functools import lru_cache

from cpf_auth.application.services.auth_service import AuthService
from cpf_auth.infrastructure.cognito_provider import CognitoIdentityProvider
from cpf_auth.infrastructure.config import get_settings


@lru_cache(maxsize=1)
def get_auth_service() -> AuthService:
    settings = get_settings()
    return AuthService(
        provider=CognitoIdentityProvider(settings=settings),
        settings=settings,
    )
