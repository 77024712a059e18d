# cpf_auth/domain/autenticacao/entities.py
from __future__ import annotations

from dataclasses import dataclass


class AuthError(Exception):
    """Falha do provedor de identidade: credencial errada, rede ou resposta malformada."""

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.code = code


@dataclass(frozen=True)
class Credenciais:
    """Par (cpf, senha) de uma unica requisicao. Nunca persistido."""

    cpf: str  # bruto, como enviado pelo cliente
    password: str

    def __repr__(self) -> str:
        return "Credenciais(cpf=<redacted>, password=<redacted>)"


@dataclass(frozen=True)
class AuthSuccess:
    token: str | None


@dataclass(frozen=True)
class AuthFailure:
    reason: str


AuthOutcome = AuthSuccess | AuthFailure
