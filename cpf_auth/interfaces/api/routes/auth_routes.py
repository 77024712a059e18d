# cpf_auth/interfaces/api/routes/auth_routes.py
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from cpf_auth.application.services.auth_service import AuthService
from cpf_auth.interfaces.api.dependencies import get_auth_service
from cpf_auth.interfaces.corpo import ler_corpo_json

router = APIRouter()


@router.post("/auth/login")
async def login(
    request: Request,
    service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> JSONResponse:
    body = ler_corpo_json(await request.body())
    # chamada boto3 e bloqueante
    resposta = await run_in_threadpool(service.handle, body)
    return JSONResponse(status_code=resposta.status_code, content=resposta.body)
