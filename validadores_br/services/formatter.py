"""
Formatter Service
Aplicação de máscaras de exibição sobre identificadores canônicos
"""

from typing import Callable, Optional

from validadores_br.core.exceptions import FormatError
from validadores_br.services.normalizer import normalizer

PLACEHOLDER = "#"


def apply_mask(value: str, mask: str, placeholder: str = PLACEHOLDER) -> str:
    """
    Preenche os marcadores da máscara com os caracteres do valor

    Args:
        value: Valor canônico
        mask: Máscara, ex: '###.###.###-##'
        placeholder: Caractere que marca cada posição

    Returns:
        str: Valor formatado

    Raises:
        FormatError: Se o valor não tiver exatamente uma posição por marcador
    """
    slots = mask.count(placeholder)
    if len(value) != slots:
        raise FormatError(f"Máscara '{mask}' espera {slots} caracteres, recebeu {len(value)}")

    chars = iter(value)
    return "".join(next(chars) if symbol == placeholder else symbol for symbol in mask)


def format_if_valid(value, mask: str, is_valid: Callable[[str], bool]) -> Optional[str]:
    """
    Formata apenas identificadores canônicos e válidos

    Args:
        value: Identificador (somente dígitos)
        mask: Máscara de exibição
        is_valid: Validador do esquema

    Returns:
        str | None: Valor formatado, ou None se não canônico ou inválido
    """
    if not normalizer.is_canonical(value) or not is_valid(value):
        return None
    return apply_mask(value, mask)
