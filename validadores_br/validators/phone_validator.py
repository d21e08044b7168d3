"""
Validador de Telefone
Celular: DDD + 9 + 8 dígitos; Fixo: DDD + [2-5] + 7 dígitos
"""

import re
import logging
from typing import Optional

from validadores_br.services import generator
from validadores_br.services.formatter import apply_mask
from validadores_br.services.normalizer import normalize, normalizer

logger = logging.getLogger(__name__)

MOBILE_PATTERN = re.compile(r'^[1-9]{2}9\d{8}$')
LANDLINE_PATTERN = re.compile(r'^[1-9]{2}[2-5]\d{7}$')
INTERNATIONAL_CODE_PATTERN = re.compile(r'\+?55')

MOBILE = "mobile"
LANDLINE = "landline"

MOBILE_MASK = "(##)#####-####"
LANDLINE_MASK = "(##)####-####"

__all__ = [
    "normalize",
    "is_valid",
    "format_phone",
    "format",
    "generate",
    "remove_international_dialing_code",
]


def is_valid(phone: str, phone_type: Optional[str] = None) -> bool:
    """
    Valida telefone brasileiro (sem código do país)

    Args:
        phone: Telefone (com ou sem formatação)
        phone_type: 'mobile', 'landline' ou None para aceitar ambos

    Returns:
        True se válido para o tipo informado
    """
    if not isinstance(phone, str):
        return False

    digits = normalize(phone)
    if phone_type is None:
        return bool(MOBILE_PATTERN.match(digits) or LANDLINE_PATTERN.match(digits))
    if phone_type == MOBILE:
        return bool(MOBILE_PATTERN.match(digits))
    if phone_type == LANDLINE:
        return bool(LANDLINE_PATTERN.match(digits))

    logger.debug(f"Tipo de telefone desconhecido: {phone_type}")
    return False


def format_phone(phone: str) -> Optional[str]:
    """
    Formata um telefone canônico e válido

    Exemplos:
        '11994029275' -> '(11)99402-9275'
        '1635014415' -> '(16)3501-4415'
    """
    if not normalizer.is_canonical(phone) or not is_valid(phone):
        return None
    mask = MOBILE_MASK if MOBILE_PATTERN.match(phone) else LANDLINE_MASK
    return apply_mask(phone, mask)


format = format_phone


def remove_international_dialing_code(phone: str) -> str:
    """
    Remove o código do país (55) de um telefone

    Args:
        phone: Telefone, ex: '+5511994029275'

    Returns:
        str: Telefone sem o primeiro '55'; inalterado se não houver código
    """
    if not isinstance(phone, str):
        return ""

    if INTERNATIONAL_CODE_PATTERN.search(phone) and len(phone.replace(" ", "")) > 11:
        return phone.replace("55", "", 1)
    return phone


def _generate_ddd() -> str:
    return f"{generator.random_int(1, 9)}{generator.random_int(1, 9)}"


def generate(phone_type: Optional[str] = None) -> Optional[str]:
    """
    Gera um telefone válido

    Args:
        phone_type: 'mobile', 'landline' ou None (sorteado)

    Returns:
        str | None: Telefone gerado, ou None para tipo desconhecido
    """
    if phone_type is None:
        phone_type = generator.choice((MOBILE, LANDLINE))

    if phone_type == MOBILE:
        return f"{_generate_ddd()}9{generator.random_digits(8)}"
    if phone_type == LANDLINE:
        return f"{_generate_ddd()}{generator.random_int(2, 5)}{generator.random_digits(7)}"
    return None
