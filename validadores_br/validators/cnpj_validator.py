"""
Validador de CNPJ
Formato: NN.NNN.NNN/FFFF-DD (FFFF = número da filial)
"""

import logging
from typing import Optional

from validadores_br.core.exceptions import FormatError
from validadores_br.services import generator
from validadores_br.services.checksum import SchemeChecksum, mod11_standard
from validadores_br.services.formatter import format_if_valid
from validadores_br.services.normalizer import clean, is_repeated, normalize, to_digits

logger = logging.getLogger(__name__)

CNPJ_LENGTH = 14
BASE_LENGTH = 12
MASK = "##.###.###/####-##"

multiplicadores1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
multiplicadores2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

FIRST_DIGIT = SchemeChecksum("cnpj_dv1", multiplicadores1, 11, mod11_standard)
SECOND_DIGIT = SchemeChecksum("cnpj_dv2", multiplicadores2, 11, mod11_standard)

__all__ = ["normalize", "is_valid", "format_cnpj", "format", "generate", "checksum"]


def checksum(base: str) -> str:
    """
    Calcula os dois dígitos verificadores de uma base de 12 dígitos

    Args:
        base: Raiz (8 dígitos) + filial (4 dígitos)

    Returns:
        str: Os 2 dígitos verificadores

    Exemplo: '035607140001' -> '42'
    """
    digits = to_digits(base)
    if len(digits) != BASE_LENGTH:
        raise FormatError(f"Base de CNPJ deve ter {BASE_LENGTH} dígitos")

    first = FIRST_DIGIT.compute(digits)
    second = SECOND_DIGIT.compute(digits + [first])
    return f"{first}{second}"


def is_valid(cnpj: str) -> bool:
    """
    Valida CNPJ pelos dígitos verificadores

    Args:
        cnpj: CNPJ (com ou sem formatação)

    Returns:
        True se válido, False caso contrário
    """
    try:
        cnpj = clean(cnpj, CNPJ_LENGTH)
    except FormatError as e:
        logger.debug(f"CNPJ rejeitado no formato: {e}")
        return False

    if is_repeated(cnpj):
        return False

    return cnpj[BASE_LENGTH:] == checksum(cnpj[:BASE_LENGTH])


def format_cnpj(cnpj: str) -> Optional[str]:
    """
    Formata um CNPJ canônico e válido

    Exemplo: '03560714000142' -> '03.560.714/0001-42'
    """
    return format_if_valid(cnpj, MASK, is_valid)


format = format_cnpj


def generate(branch: int = 1) -> str:
    """
    Gera um CNPJ aleatório válido

    Args:
        branch: Número da filial; reduzido módulo 10000, com 0 tratado como 1

    Returns:
        str: CNPJ com 14 dígitos
    """
    branch = branch % 10_000
    if branch == 0:
        branch = 1
    branch_str = str(branch).zfill(4)

    return generator.build(
        lambda: generator.random_base(8) + branch_str,
        checksum,
        reject_repeated=True,
    )
