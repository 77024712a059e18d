# cpf_auth/application/services/auth_service.py
#
# Orquestrador da requisicao de login: Received -> Resolved.
#
# Invariants:
#   - Entrada invalida nunca chega ao provedor de identidade.
#   - Toda falha do provedor vira o mesmo 401, sem distinguir usuario
#     inexistente, senha errada ou indisponibilidade (anti-enumeracao).
#   - O username enviado ao provedor e o CPF bruto, sem normalizar; o
#     SECRET_HASH e calculado sobre esse mesmo valor.
from __future__ import annotations

from collections.abc import Mapping

from cpf_auth.domain.autenticacao.entities import (
    AuthFailure,
    AuthOutcome,
    AuthSuccess,
    Credenciais,
)
from cpf_auth.domain.autenticacao.provider import IdentityProvider
from cpf_auth.domain.identidade.value_objects import is_valid_cpf, mascarar
from cpf_auth.infrastructure.config import Settings
from cpf_auth.infrastructure.log import log
from cpf_auth.infrastructure.secret_hash import derive_secret_hash

from ..dtos.auth_dto import AuthResponse, LoginResponseDTO, MessageDTO

MSG_CAMPOS_OBRIGATORIOS = "CPF and password are required"
MSG_CPF_INVALIDO = "Invalid CPF"
MSG_SUCESSO = "Authentication successful"
MSG_FALHA = "Incorrect CPF or password"


class AuthService:
    def __init__(self, provider: IdentityProvider, settings: Settings) -> None:
        self._provider = provider
        self._settings = settings

    def handle(self, body: Mapping[str, object] | None) -> AuthResponse:
        """Mapeia o corpo JSON da requisicao para (status, corpo) de resposta."""
        body = body or {}
        cpf = body.get("cpf")
        password = body.get("password")

        if not isinstance(cpf, str) or not isinstance(password, str) or not cpf or not password:
            return _resposta(400, MessageDTO(message=MSG_CAMPOS_OBRIGATORIOS))

        if not is_valid_cpf(cpf):
            return _resposta(400, MessageDTO(message=MSG_CPF_INVALIDO))

        outcome = self.autenticar(Credenciais(cpf=cpf, password=password))
        if isinstance(outcome, AuthFailure):
            return _resposta(401, MessageDTO(message=MSG_FALHA))
        return _resposta(200, LoginResponseDTO(message=MSG_SUCESSO, token=outcome.token))

    def autenticar(self, credenciais: Credenciais) -> AuthOutcome:
        """Chama o provedor uma unica vez. Nunca levanta excecao."""
        settings = self._settings
        try:
            secret_hash = derive_secret_hash(
                credenciais.cpf,
                settings.cognito_client_id,
                settings.cognito_client_secret,
            )
            token = self._provider.authenticate(
                username=credenciais.cpf,
                password=credenciais.password,
                secret_hash=secret_hash,
                client_id=settings.cognito_client_id,
                pool_id=settings.cognito_user_pool_id,
            )
        except Exception as err:  # noqa: BLE001
            log(
                f"Authentication error cpf={mascarar(credenciais.cpf)} "
                f"erro={type(err).__name__} code={getattr(err, 'code', None)}",
                level="ERROR",
            )
            return AuthFailure(reason=type(err).__name__)
        return AuthSuccess(token=token)


def _resposta(status_code: int, dto: LoginResponseDTO | MessageDTO) -> AuthResponse:
    return AuthResponse(status_code=status_code, body=dto.model_dump(exclude_none=True))
