"""
Validador de CEP (Código de Endereçamento Postal)
Formato: NNNNN-NNN
"""

import logging
from typing import Optional

from validadores_br.core.exceptions import FormatError
from validadores_br.services import generator
from validadores_br.services.formatter import format_if_valid
from validadores_br.services.normalizer import clean, normalize

logger = logging.getLogger(__name__)

CEP_LENGTH = 8
MASK = "#####-###"

__all__ = ["normalize", "is_valid", "format_cep", "format", "generate"]


def is_valid(cep: str) -> bool:
    """
    Valida o formato de um CEP (não verifica se ele existe)

    Args:
        cep: CEP (com ou sem formatação)

    Returns:
        True se tiver 8 dígitos
    """
    try:
        clean(cep, CEP_LENGTH)
    except FormatError as e:
        logger.debug(f"CEP rejeitado no formato: {e}")
        return False
    return True


def format_cep(cep: str) -> Optional[str]:
    """
    Formata um CEP canônico

    Exemplo: '01310200' -> '01310-200'
    """
    return format_if_valid(cep, MASK, is_valid)


format = format_cep


def generate() -> str:
    """Gera um CEP aleatório (formato válido, sem garantia de existência)"""
    return generator.random_digits(CEP_LENGTH)
