# cpf_auth/interfaces/corpo.py
from __future__ import annotations

import base64
import binascii
import json


def ler_corpo_json(raw: object, base64_encoded: bool = False) -> dict[str, object]:
    """Corpo de requisicao como dict. Qualquer coisa que nao seja objeto JSON vira {}.

    Aceita str, bytes ou um dict ja decodificado (invocacao direta da Lambda).
    """
    if isinstance(raw, dict):
        return raw
    if not isinstance(raw, (str, bytes)) or not raw:
        return {}
    try:
        if base64_encoded:
            raw = base64.b64decode(raw, validate=True)
        parsed = json.loads(raw)
    except (binascii.Error, UnicodeDecodeError, ValueError, RecursionError):
        # RecursionError: JSON valido mas aninhado demais para o decoder
        return {}
    return parsed if isinstance(parsed, dict) else {}
