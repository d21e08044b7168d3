"""
Validador de PIS/PASEP/NIT
Formato: NNN.NNNNN.NN-D
"""

import logging
from typing import Optional

from validadores_br.core.exceptions import FormatError
from validadores_br.services import generator
from validadores_br.services.checksum import SchemeChecksum, mod11_eleven_minus_or_zero
from validadores_br.services.formatter import format_if_valid
from validadores_br.services.normalizer import clean, normalize, to_digits

logger = logging.getLogger(__name__)

PIS_LENGTH = 11
BASE_LENGTH = 10
MASK = "###.#####.##-#"

WEIGHTS = (3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CHECK_DIGIT = SchemeChecksum("pis", WEIGHTS, 11, mod11_eleven_minus_or_zero)

__all__ = ["normalize", "is_valid", "format_pis", "format", "generate", "checksum"]


def checksum(base: str) -> str:
    """
    Calcula o dígito verificador de uma base de 10 dígitos

    Args:
        base: Os 10 primeiros dígitos do PIS

    Returns:
        str: O dígito verificador
    """
    digits = to_digits(base)
    if len(digits) != BASE_LENGTH:
        raise FormatError(f"Base de PIS deve ter {BASE_LENGTH} dígitos")
    return str(CHECK_DIGIT.compute(digits))


def is_valid(pis: str) -> bool:
    """
    Valida PIS pelo dígito verificador

    Args:
        pis: PIS (com ou sem formatação)

    Returns:
        True se válido, False caso contrário
    """
    try:
        pis = clean(pis, PIS_LENGTH)
    except FormatError as e:
        logger.debug(f"PIS rejeitado no formato: {e}")
        return False

    return pis[-1] == checksum(pis[:BASE_LENGTH])


def format_pis(pis: str) -> Optional[str]:
    """
    Formata um PIS canônico e válido

    Exemplo: '12038619494' -> '120.38619.49-4'
    """
    return format_if_valid(pis, MASK, is_valid)


format = format_pis


def generate() -> str:
    """Gera um PIS aleatório válido"""
    return generator.build(lambda: generator.random_base(BASE_LENGTH), checksum)
