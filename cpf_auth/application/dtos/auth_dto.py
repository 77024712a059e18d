# cpf_auth/application/dtos/auth_dto.py
from pydantic import BaseModel


class LoginResponseDTO(BaseModel):
    message: str
    token: str | None = None


class MessageDTO(BaseModel):
    message: str


class AuthResponse(BaseModel):
    """Resposta HTTP-agnostica do orquestrador: status + corpo JSON."""

    status_code: int
    body: dict[str, str]
