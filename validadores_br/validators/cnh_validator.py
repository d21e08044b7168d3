"""
Validador de CNH (Carteira Nacional de Habilitação)
11 dígitos: 9 de base + 2 dígitos verificadores
"""

import logging
from typing import Optional

from validadores_br.core.exceptions import FormatError
from validadores_br.services import generator
from validadores_br.services.checksum import SchemeChecksum, mod11_remainder_clamped
from validadores_br.services.formatter import format_if_valid
from validadores_br.services.normalizer import clean, is_repeated, normalize, to_digits

logger = logging.getLogger(__name__)

CNH_LENGTH = 11
BASE_LENGTH = 9
MASK = "#########-##"

FIRST_DIGIT = SchemeChecksum("cnh_dv1", tuple(range(9, 0, -1)), 11, mod11_remainder_clamped)
SECOND_DIGIT = SchemeChecksum("cnh_dv2", tuple(range(1, 10)), 11, mod11_remainder_clamped)

# Desconto aplicado ao segundo DV quando o resto do primeiro passou de 9
CARRY_DISCOUNT = 2

__all__ = ["normalize", "is_valid", "format_cnh", "format", "generate", "checksum"]


def checksum(base: str) -> str:
    """
    Calcula os dois dígitos verificadores de uma base de 9 dígitos

    O primeiro DV é o resto de sum(d_i * (9 - i)) por 11, com 10 virando 0.
    O segundo é o resto de sum(d_i * (i + 1)) por 11, descontado de 2
    (módulo 11) quando o resto do primeiro foi 10, e também limitado a 0-9.

    Args:
        base: Os 9 primeiros dígitos da CNH

    Returns:
        str: Os 2 dígitos verificadores

    Exemplo: '987654321' -> '09'

    O desconto usa o resto do primeiro DV antes do limite. Na regra
    antiga, que olhava o dígito já limitado, o desconto nunca se aplicava:
    '98765432100' era aceito e hoje é inválido; '98765432109' é o válido.
    """
    digits = to_digits(base)
    if len(digits) != BASE_LENGTH:
        raise FormatError(f"Base de CNH deve ter {BASE_LENGTH} dígitos")

    first_remainder = FIRST_DIGIT.remainder(digits)
    first = FIRST_DIGIT.rule(first_remainder)

    second_remainder = SECOND_DIGIT.remainder(digits)
    if first_remainder > 9:
        second_remainder = (second_remainder - CARRY_DISCOUNT) % 11
    second = SECOND_DIGIT.rule(second_remainder)

    return f"{first}{second}"


def is_valid(cnh: str) -> bool:
    """
    Valida CNH pelos dígitos verificadores

    Args:
        cnh: Número da CNH (com ou sem formatação)

    Returns:
        True se válido, False caso contrário
    """
    try:
        cnh = clean(cnh, CNH_LENGTH)
    except FormatError as e:
        logger.debug(f"CNH rejeitada no formato: {e}")
        return False

    if is_repeated(cnh):
        return False

    return cnh[BASE_LENGTH:] == checksum(cnh[:BASE_LENGTH])


def format_cnh(cnh: str) -> Optional[str]:
    return format_if_valid(cnh, MASK, is_valid)


format = format_cnh


def generate() -> str:
    """Gera uma CNH aleatória válida"""
    return generator.build(
        lambda: generator.random_base(BASE_LENGTH, reject_repeated=True),
        checksum,
        reject_repeated=True,
    )
