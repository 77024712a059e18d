# cpf_auth/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from cpf_auth.infrastructure.config import get_settings
    from cpf_auth.infrastructure.log import log
    settings = get_settings()  # carrega .env uma vez no startup
    log(f"Startup {settings!r}")
    yield


app = FastAPI(
    title="CPF Auth API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Cache-Control"] = "no-store"
    return response  # type: ignore[return-value]


from cpf_auth.interfaces.api.routes.auth_routes import router as auth_router  # noqa: E402
from cpf_auth.interfaces.api.routes.health_routes import router as health_router  # noqa: E402

app.include_router(auth_router, prefix="/api")
app.include_router(health_router, prefix="/api")
