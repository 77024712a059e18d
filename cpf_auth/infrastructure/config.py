# cpf_auth/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    aws_region: str
    cognito_client_id: str
    cognito_client_secret: str
    cognito_user_pool_id: str
    provider_timeout_seconds: float

    def __repr__(self) -> str:
        # client secret fica fora do repr
        return (
            f"Settings(aws_region={self.aws_region!r}, "
            f"cognito_client_id={self.cognito_client_id!r}, "
            f"cognito_user_pool_id={self.cognito_user_pool_id!r})"
        )


_TIMEOUT_PADRAO = 5.0


def _timeout_segundos(raw: str | None) -> float:
    """Valor ausente, nao numerico ou nao positivo usa o padrao em vez de derrubar o processo."""
    try:
        valor = float(raw) if raw else _TIMEOUT_PADRAO
    except ValueError:
        return _TIMEOUT_PADRAO
    return valor if 0 < valor < float("inf") else _TIMEOUT_PADRAO


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        aws_region=os.environ.get("AWS_REGION", ""),
        cognito_client_id=os.environ.get("COGNITO_CLIENT_ID", ""),
        cognito_client_secret=os.environ.get("COGNITO_CLIENT_SECRET", ""),
        cognito_user_pool_id=os.environ.get("COGNITO_USER_POOL_ID", ""),
        provider_timeout_seconds=_timeout_segundos(os.environ.get("COGNITO_TIMEOUT_SECONDS")),
    )
