"""
Validador de Placa de Veículo
Padrão antigo: LLLNNNN (exibido como LLL-NNNN)
Padrão Mercosul: LLLNLNN
"""

import re
import string
from typing import Optional

from validadores_br.services import generator

OLD_FORMAT_PATTERN = re.compile(r'^[A-Za-z]{3}\d{4}$')
MERCOSUL_PATTERN = re.compile(r'^[A-Z]{3}\d[A-Z]\d{2}$')

OLD_FORMAT = "LLLNNNN"
MERCOSUL_FORMAT = "LLLNLNN"

PLATE_TYPES = {
    "old_format": OLD_FORMAT_PATTERN,
    "mercosul": MERCOSUL_PATTERN,
}

__all__ = [
    "normalize",
    "is_valid",
    "format_license_plate",
    "format",
    "convert_to_mercosul",
    "get_format",
    "generate",
]


def normalize(plate) -> str:
    """
    Remove hífens e espaços e converte para maiúsculas

    Exemplo: 'abc-1234' -> 'ABC1234'
    """
    if not isinstance(plate, str):
        return ""
    return plate.replace("-", "").replace(" ", "").upper()


def is_valid(plate: str, plate_type: Optional[str] = None) -> bool:
    """
    Valida placa

    Args:
        plate: Placa (com ou sem hífen)
        plate_type: 'old_format', 'mercosul' ou None para aceitar ambos

    Returns:
        True se válida para o tipo informado
    """
    if not isinstance(plate, str):
        return False

    clean = normalize(plate)
    if plate_type is None:
        return any(pattern.match(clean) for pattern in PLATE_TYPES.values())

    pattern = PLATE_TYPES.get(plate_type)
    return pattern is not None and pattern.match(clean) is not None


def get_format(plate: str) -> Optional[str]:
    """'LLLNNNN', 'LLLNLNN' ou None"""
    if not isinstance(plate, str):
        return None

    clean = normalize(plate)
    if OLD_FORMAT_PATTERN.match(clean):
        return OLD_FORMAT
    if MERCOSUL_PATTERN.match(clean):
        return MERCOSUL_FORMAT
    return None


def format_license_plate(plate: str) -> Optional[str]:
    """
    Formata uma placa válida

    Exemplos:
        'abc1234' -> 'ABC-1234'
        'abc1e34' -> 'ABC1E34'
    """
    plate_format = get_format(plate)
    if plate_format is None:
        return None

    clean = normalize(plate)
    if plate_format == OLD_FORMAT:
        return f"{clean[:3]}-{clean[3:]}"
    return clean


format = format_license_plate


def convert_to_mercosul(plate: str) -> Optional[str]:
    """
    Converte uma placa do padrão antigo para o Mercosul

    O quinto caractere (dígito) vira a letra correspondente: 0 -> A, 1 -> B, ...

    Exemplo: 'ABC4567' -> 'ABC4F67'
    """
    if get_format(plate) != OLD_FORMAT:
        return None

    chars = list(normalize(plate))
    chars[4] = chr(ord("A") + int(chars[4]))
    return "".join(chars)


def generate(fmt: str = MERCOSUL_FORMAT) -> Optional[str]:
    """
    Gera uma placa aleatória

    Args:
        fmt: 'LLLNLNN' (Mercosul) ou 'LLLNNNN' (antigo)

    Returns:
        str | None: Placa gerada, ou None para formato desconhecido
    """
    if not isinstance(fmt, str) or fmt.upper() not in (OLD_FORMAT, MERCOSUL_FORMAT):
        return None

    return "".join(
        generator.choice(string.ascii_uppercase) if symbol == "L" else generator.random_digits(1)
        for symbol in fmt.upper()
    )
