"""
Validador de RENAVAM (Registro Nacional de Veículos Automotores)
11 dígitos, sendo o último o dígito verificador
"""

import logging
from typing import Optional

from validadores_br.core.exceptions import FormatError
from validadores_br.services import generator
from validadores_br.services.checksum import SchemeChecksum, mod11_eleven_minus_or_zero
from validadores_br.services.formatter import format_if_valid
from validadores_br.services.normalizer import clean, is_repeated, normalize, to_digits

logger = logging.getLogger(__name__)

RENAVAM_LENGTH = 11
BASE_LENGTH = 10
MASK = "##########-#"

# Pesos aplicados à base lida da direita para a esquerda
DV_WEIGHTS = (2, 3, 4, 5, 6, 7, 8, 9, 2, 3)
CHECK_DIGIT = SchemeChecksum(
    "renavam", DV_WEIGHTS, 11, mod11_eleven_minus_or_zero, reverse=True
)

__all__ = ["normalize", "is_valid", "format_renavam", "format", "generate", "checksum"]


def checksum(base: str) -> str:
    """
    Calcula o dígito verificador de uma base de 10 dígitos

    Exemplo: '1234567890' -> '0'
    """
    digits = to_digits(base)
    if len(digits) != BASE_LENGTH:
        raise FormatError(f"Base de RENAVAM deve ter {BASE_LENGTH} dígitos")
    return str(CHECK_DIGIT.compute(digits))


def is_valid(renavam: str) -> bool:
    """
    Valida RENAVAM pelo dígito verificador

    Args:
        renavam: RENAVAM (com ou sem formatação)

    Returns:
        True se válido, False caso contrário
    """
    try:
        renavam = clean(renavam, RENAVAM_LENGTH)
    except FormatError as e:
        logger.debug(f"RENAVAM rejeitado no formato: {e}")
        return False

    if is_repeated(renavam):
        return False

    return renavam[-1] == checksum(renavam[:BASE_LENGTH])


def format_renavam(renavam: str) -> Optional[str]:
    return format_if_valid(renavam, MASK, is_valid)


format = format_renavam


def generate() -> str:
    """Gera um RENAVAM aleatório válido"""
    return generator.build(
        lambda: generator.random_base(BASE_LENGTH, reject_repeated=True),
        checksum,
        reject_repeated=True,
    )
