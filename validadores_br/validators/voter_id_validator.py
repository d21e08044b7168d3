"""
Validador de Título de Eleitor
Formato: NNNN NNNN [N]UU DD

- NNNNNNNN: Número sequencial (8 dígitos)
- UU: Código da unidade federativa (01-28, 28 = exterior)
- DD: Dígitos verificadores

Títulos de SP (01) e MG (02) podem ter 13 dígitos.
"""

import logging
from types import MappingProxyType
from typing import Optional

from validadores_br.core.exceptions import FormatError
from validadores_br.services import generator
from validadores_br.services.checksum import SchemeChecksum
from validadores_br.services.normalizer import clean, normalize, normalizer, to_digits

logger = logging.getLogger(__name__)

STANDARD_LENGTH = 12
EXTENDED_LENGTH = 13
SEQUENTIAL_LENGTH = 8

UF_CODES = MappingProxyType({
    'SP': '01', 'MG': '02', 'RJ': '03', 'RS': '04',
    'BA': '05', 'PR': '06', 'CE': '07', 'PE': '08',
    'SC': '09', 'GO': '10', 'MA': '11', 'PB': '12',
    'PA': '13', 'ES': '14', 'PI': '15', 'RN': '16',
    'AL': '17', 'MT': '18', 'MS': '19', 'DF': '20',
    'SE': '21', 'AM': '22', 'RO': '23', 'AC': '24',
    'AP': '25', 'RR': '26', 'TO': '27', 'ZZ': '28',
})

# SP e MG: resto 0 vira 1, e o título pode ter 13 dígitos
SP_MG_CODES = ('01', '02')


def _raw_remainder(remainder: int) -> int:
    return remainder


FIRST_DIGIT = SchemeChecksum("voter_id_dv1", tuple(range(2, 10)), 11, _raw_remainder)
SECOND_DIGIT = SchemeChecksum("voter_id_dv2", (7, 8, 9), 11, _raw_remainder)

__all__ = ["normalize", "is_valid", "format_voter_id", "format", "generate", "checksum", "UF_CODES"]


def _is_union_valid(federative_union: str) -> bool:
    return 1 <= int(federative_union) <= 28


def _adjust(remainder: int, federative_union: str) -> int:
    if remainder == 0 and federative_union in SP_MG_CODES:
        return 1
    if remainder == 10:
        return 0
    return remainder


def checksum(sequential_number: str, federative_union: str) -> str:
    """
    Calcula os dois dígitos verificadores

    Args:
        sequential_number: Número sequencial (8 dígitos)
        federative_union: Código da UF (2 dígitos, '01' a '28')

    Returns:
        str: Os 2 dígitos verificadores

    Exemplo: ('69084709', '28') -> '28'
    """
    sequential = to_digits(sequential_number)
    union = to_digits(federative_union)
    if len(sequential) != SEQUENTIAL_LENGTH or len(union) != 2:
        raise FormatError("Título de eleitor exige sequencial de 8 e UF de 2 dígitos")

    first = _adjust(FIRST_DIGIT.remainder(sequential), federative_union)
    second = _adjust(SECOND_DIGIT.remainder(union + [first]), federative_union)
    return f"{first}{second}"


def is_valid(voter_id: str) -> bool:
    """
    Valida título de eleitor

    Args:
        voter_id: Título (com ou sem formatação)

    Returns:
        True se válido, False caso contrário
    """
    try:
        voter_id = clean(voter_id, STANDARD_LENGTH, EXTENDED_LENGTH)
    except FormatError as e:
        logger.debug(f"Título de eleitor rejeitado no formato: {e}")
        return False

    federative_union = voter_id[-4:-2]
    if len(voter_id) == EXTENDED_LENGTH and federative_union not in SP_MG_CODES:
        return False

    if not _is_union_valid(federative_union):
        return False

    return voter_id[-2:] == checksum(voter_id[:SEQUENTIAL_LENGTH], federative_union)


def format_voter_id(voter_id: str) -> Optional[str]:
    """
    Formata um título canônico e válido

    Exemplo: '690847092828' -> '6908 4709 28 28'
    """
    if not normalizer.is_canonical(voter_id) or not is_valid(voter_id):
        return None
    return f"{voter_id[:4]} {voter_id[4:8]} {voter_id[8:-2]} {voter_id[-2:]}"


format = format_voter_id


def generate(federative_union: str = "ZZ") -> Optional[str]:
    """
    Gera um título de eleitor válido (12 dígitos)

    Args:
        federative_union: Sigla da UF ('SP', 'MG', ... ou 'ZZ' para exterior)

    Returns:
        str | None: Título gerado, ou None se a UF for desconhecida
    """
    if not isinstance(federative_union, str):
        return None

    union_code = UF_CODES.get(federative_union.upper())
    if union_code is None:
        logger.debug(f"UF desconhecida para título de eleitor: {federative_union}")
        return None

    return generator.build(
        lambda: generator.random_base(SEQUENTIAL_LENGTH) + union_code,
        lambda base: checksum(base[:SEQUENTIAL_LENGTH], union_code),
    )
