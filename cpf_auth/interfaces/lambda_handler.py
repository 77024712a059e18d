# cpf_auth/interfaces/lambda_handler.py
#
# Entry point para API Gateway + Lambda (proxy integration).
#
# Design decisions:
#   - Mesmo AuthService da API HTTP, obtido pela mesma fabrica cacheada
#     (get_auth_service); aqui so se traduz o evento.
#   - event["body"] chega como string JSON (opcionalmente base64), None, ou
#     dict em invocacao direta. Corpo que nao e objeto JSON cai no 400 de
#     campos obrigatorios.
#   - O servico e construido uma vez por container e reaproveitado entre
#     invocacoes (cliente boto3 reutilizado).
from __future__ import annotations

import json
from typing import Any

from cpf_auth.interfaces.api.dependencies import get_auth_service
from cpf_auth.interfaces.corpo import ler_corpo_json


def handler(event: dict[str, Any] | None, context: object = None) -> dict[str, Any]:
    event = event or {}
    body = ler_corpo_json(event.get("body"), base64_encoded=bool(event.get("isBase64Encoded")))
    resposta = get_auth_service().handle(body)
    return {
        "statusCode": resposta.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(resposta.body),
    }
