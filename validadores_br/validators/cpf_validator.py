"""
Validador de CPF
Formato: NNN.NNN.NNN-DD
"""

import logging
from typing import Optional

from validadores_br.core.exceptions import FormatError
from validadores_br.services import generator
from validadores_br.services.checksum import SchemeChecksum, mod11_standard
from validadores_br.services.formatter import format_if_valid
from validadores_br.services.normalizer import clean, is_repeated, normalize, to_digits

logger = logging.getLogger(__name__)

CPF_LENGTH = 11
BASE_LENGTH = 9
MASK = "###.###.###-##"

# Primeiro DV: pesos 10..2 sobre 9 dígitos; segundo: 11..2 sobre 9 dígitos + DV1
FIRST_DIGIT = SchemeChecksum("cpf_dv1", tuple(range(10, 1, -1)), 11, mod11_standard)
SECOND_DIGIT = SchemeChecksum("cpf_dv2", tuple(range(11, 1, -1)), 11, mod11_standard)

__all__ = ["normalize", "is_valid", "format_cpf", "format", "generate", "checksum"]


def checksum(base: str) -> str:
    """
    Calcula os dois dígitos verificadores de uma base de 9 dígitos

    Args:
        base: Os 9 primeiros dígitos do CPF

    Returns:
        str: Os 2 dígitos verificadores

    Exemplo: '335451269' -> '51'
    """
    digits = to_digits(base)
    if len(digits) != BASE_LENGTH:
        raise FormatError(f"Base de CPF deve ter {BASE_LENGTH} dígitos")

    first = FIRST_DIGIT.compute(digits)
    second = SECOND_DIGIT.compute(digits + [first])
    return f"{first}{second}"


def is_valid(cpf: str) -> bool:
    """
    Valida CPF pelo algoritmo dos dígitos verificadores

    Args:
        cpf: CPF (com ou sem formatação)

    Returns:
        True se válido, False caso contrário
    """
    try:
        cpf = clean(cpf, CPF_LENGTH)
    except FormatError as e:
        logger.debug(f"CPF rejeitado no formato: {e}")
        return False

    # Verificar se todos os dígitos são iguais
    if is_repeated(cpf):
        return False

    return cpf[BASE_LENGTH:] == checksum(cpf[:BASE_LENGTH])


def format_cpf(cpf: str) -> Optional[str]:
    """
    Formata um CPF canônico e válido para exibição

    Args:
        cpf: CPF somente com dígitos

    Returns:
        str | None: 'NNN.NNN.NNN-DD' ou None se inválido

    Exemplo: '82178537464' -> '821.785.374-64'
    """
    return format_if_valid(cpf, MASK, is_valid)


format = format_cpf


def generate() -> str:
    """
    Gera um CPF aleatório válido

    Returns:
        str: CPF com 11 dígitos
    """
    return generator.build(
        lambda: generator.random_base(BASE_LENGTH, reject_repeated=True),
        checksum,
        reject_repeated=True,
    )
