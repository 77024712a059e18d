# cpf_auth/infrastructure/cognito_provider.py
#
# IdentityProvider backed by an AWS Cognito user pool.
#
# Design decisions:
#   - ADMIN_NO_SRP_AUTH: the server holds the client secret and sends the
#     password directly; no SRP challenge round-trip.
#   - One attempt only (total_max_attempts=1). A timeout or throttle is an
#     authentication failure for the caller, never a retry.
#   - Every botocore error becomes AuthError carrying the Cognito error code.
#     The message never includes the password or the secret hash.
#   - A response without AuthenticationResult (e.g. a NEW_PASSWORD_REQUIRED
#     challenge) yields token None, which the orchestrator reports as success
#     without a token.
from __future__ import annotations

from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from cpf_auth.domain.autenticacao.entities import AuthError
from cpf_auth.infrastructure.config import Settings

AUTH_FLOW = "ADMIN_NO_SRP_AUTH"


def build_cognito_client(settings: Settings) -> Any:
    """boto3 cognito-idp client for the configured region, single attempt."""
    config = Config(
        connect_timeout=settings.provider_timeout_seconds,
        read_timeout=settings.provider_timeout_seconds,
        retries={"total_max_attempts": 1, "mode": "standard"},
    )
    return boto3.client(
        "cognito-idp",
        region_name=settings.aws_region or None,
        config=config,
    )


class CognitoIdentityProvider:
    def __init__(self, client: Any = None, settings: Settings | None = None) -> None:
        self._client = client
        if client is not None:
            return
        if settings is None:
            raise ValueError("CognitoIdentityProvider requer client ou settings")
        self._settings: Settings = settings

    def _cliente(self) -> Any:
        # criado sob demanda: regiao ausente vira AuthError na chamada, nao erro de startup
        if self._client is None:
            self._client = build_cognito_client(self._settings)
        return self._client

    def authenticate(
        self,
        username: str,
        password: str,
        secret_hash: str,
        client_id: str,
        pool_id: str,
    ) -> str | None:
        try:
            response = self._cliente().admin_initiate_auth(
                UserPoolId=pool_id,
                ClientId=client_id,
                AuthFlow=AUTH_FLOW,
                AuthParameters={
                    "USERNAME": username,
                    "PASSWORD": password,
                    "SECRET_HASH": secret_hash,
                },
            )
        except ClientError as err:
            code = err.response.get("Error", {}).get("Code", "Unknown")
            raise AuthError(f"Cognito recusou autenticacao: {code}", code=code) from err
        except BotoCoreError as err:
            raise AuthError(
                f"Falha de comunicacao com Cognito: {type(err).__name__}",
                code=type(err).__name__,
            ) from err

        resultado = response.get("AuthenticationResult") or {}
        return resultado.get("AccessToken")
