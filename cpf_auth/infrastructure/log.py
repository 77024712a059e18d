# cpf_auth/infrastructure/log.py
#
# Shared service logger.
#
# Design decisions:
#   - Single log() function used by the orchestrator and the entry points.
#   - Plain stdout with flush so CloudWatch / container logs see each line
#     immediately. No external dependencies.
#   - Callers pass already-masked values: this module never sees raw CPFs,
#     passwords, secret hashes or tokens.
from __future__ import annotations

import sys
from datetime import datetime, timezone


def log(message: str, level: str = "INFO") -> None:
    """Write a timestamped log line to stdout."""
    agora = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    sys.stdout.write(f"[cpf-auth {agora}] {level} {message}\n")
    sys.stdout.flush()
