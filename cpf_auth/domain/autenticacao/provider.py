# cpf_auth/domain/autenticacao/provider.py
from __future__ import annotations

from typing import Protocol


class IdentityProvider(Protocol):
    def authenticate(
        self,
        username: str,
        password: str,
        secret_hash: str,
        client_id: str,
        pool_id: str,
    ) -> str | None:
        """Retorna o access token, ou levanta AuthError."""
        ...
