# cpf_auth/domain/identidade/value_objects.py
from __future__ import annotations

from dataclasses import dataclass

_DIGITOS_ASCII = frozenset("0123456789")


def _normalizar(raw: str) -> str:
    # str.isdigit aceita digitos unicode (ex: "٣"), que nao sao CPF
    return "".join(c for c in raw if c in _DIGITOS_ASCII)


def _digito_verificador(digitos: str, peso_inicial: int) -> int:
    soma = sum(int(d) * (peso_inicial - i) for i, d in enumerate(digitos))
    resto = (soma * 10) % 11
    return 0 if resto >= 10 else resto


def _verificar_cpf(digitos: str) -> bool:
    """Algoritmo padrao brasileiro de verificacao de CPF."""
    if _digito_verificador(digitos[:9], 10) != int(digitos[9]):
        return False
    return _digito_verificador(digitos[:10], 11) == int(digitos[10])


def is_valid_cpf(raw: str) -> bool:
    """Valida estrutura e digitos verificadores. Funcao total, nunca levanta excecao.

    Caracteres de formatacao (pontos, tracos, espacos) sao ignorados, entao
    "529.982.247-25" e "52998224725" tem o mesmo resultado.
    """
    digitos = _normalizar(raw)
    if len(digitos) != 11 or len(set(digitos)) == 1:
        return False
    return _verificar_cpf(digitos)


@dataclass(frozen=True, repr=False)
class CPF:
    """CPF validado, guardado como 11 digitos. repr/str mostram apenas a forma mascarada (LGPD)."""

    valor: str

    def __post_init__(self) -> None:
        digitos = _normalizar(self.valor)
        if len(digitos) != 11:
            raise ValueError(f"CPF invalido: comprimento {len(digitos)}, esperado 11")
        if len(set(digitos)) == 1:
            raise ValueError("CPF invalido: todos digitos iguais")
        if not _verificar_cpf(digitos):
            raise ValueError("CPF invalido: digitos verificadores incorretos")
        object.__setattr__(self, "valor", digitos)

    @property
    def mascarado(self) -> str:
        d = self.valor
        return f"***.{d[3:6]}.{d[6:9]}-**"

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


def mascarar(raw: str) -> str:
    """Versao segura para log de um CPF bruto, valido ou nao."""
    try:
        return CPF(raw).mascarado
    except ValueError:
        return "***.***.***-**"
