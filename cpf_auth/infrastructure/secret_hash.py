# cpf_auth/infrastructure/secret_hash.py
#
# Cognito SECRET_HASH derivation (HMAC-SHA256, base64).
#
# Design decisions:
#   - Key is the app client secret, message is username + client_id with no
#     separator, both UTF-8. This is the exact construction Cognito verifies
#     for app clients that have a secret.
#   - Output is standard base64 (with padding) of the 32-byte digest, always
#     44 characters.
#   - Recomputed per request: the value depends on the username, so it is not
#     a static secret and is never cached or logged.
#
# Invariants:
#   - derive_secret_hash is pure: same (username, client_id, secret) -> same output.
from __future__ import annotations

import base64
import hashlib
import hmac as _hmac_stdlib


def derive_secret_hash(username: str, client_id: str, client_secret: str) -> str:
    """Compute the SECRET_HASH sent with a Cognito auth request.

    Args:
        username:      Username exactly as sent to Cognito (the raw CPF).
        client_id:     App client id.
        client_secret: App client secret, used as the HMAC key.

    Returns:
        Base64 text of the 256-bit HMAC digest.
    """
    digest = _hmac_stdlib.new(
        client_secret.encode("utf-8"),
        (username + client_id).encode("utf-8"),
        hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("ascii")
