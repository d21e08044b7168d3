"""
Validador de Boleto Bancário (linha digitável)
Formato: AAAAA.AAAAA BBBBB.BBBBBB CCCCC.CCCCCC D EEEEEEEEEEEEEE

A linha digitável tem 47 dígitos: três campos com DV módulo 10, o DV geral
(módulo 11 do código de barras) e o fator de vencimento + valor.
"""

import logging
from typing import Optional

from validadores_br.core.exceptions import FormatError
from validadores_br.services import generator
from validadores_br.services.checksum import (
    CYCLE_2_TO_9,
    SchemeChecksum,
    luhn_reduce,
    mod10_complement,
    mod11_boleto,
)
from validadores_br.services.formatter import format_if_valid
from validadores_br.services.normalizer import clean, normalize, to_digits

logger = logging.getLogger(__name__)

DIGITABLE_LINE_LENGTH = 47
BARCODE_LENGTH = 44
MASK = "#####.##### #####.###### #####.###### # ##############"

# (início, fim, posição do DV) de cada campo verificado por módulo 10
PARTIALS_TO_VERIFY_MOD10 = (
    (0, 9, 9),
    (10, 20, 20),
    (21, 31, 31),
)

# Trechos da linha digitável que, concatenados, formam o código de barras
DIGITABLE_LINE_TO_BARCODE_POSITIONS = (
    (0, 4),
    (32, 47),
    (4, 9),
    (10, 20),
    (21, 31),
)

CHECK_DIGIT_MOD11_POSITION = 4

FIELD_DIGIT = SchemeChecksum(
    "boleto_mod10", (2, 1), 10, mod10_complement, reverse=True, reduce_product=luhn_reduce
)
GENERAL_DIGIT = SchemeChecksum("boleto_mod11", CYCLE_2_TO_9, 11, mod11_boleto, reverse=True)

# Código de moeda do Real
CURRENCY_CODE = "9"

__all__ = [
    "normalize",
    "is_valid",
    "format_boleto",
    "format",
    "generate",
    "checksum",
    "mod10",
    "to_barcode",
]


def mod10(partial: str) -> int:
    """
    DV módulo 10 de um campo da linha digitável

    Args:
        partial: Dígitos do campo (sem o DV)

    Returns:
        int: Dígito verificador
    """
    return FIELD_DIGIT.compute(to_digits(partial))


def checksum(barcode_without_dv: str) -> str:
    """
    DV geral do código de barras (módulo 11)

    Args:
        barcode_without_dv: Os 43 dígitos do código de barras sem a posição 4

    Returns:
        str: Dígito verificador geral
    """
    digits = to_digits(barcode_without_dv)
    if len(digits) != BARCODE_LENGTH - 1:
        raise FormatError(f"Código de barras sem DV deve ter {BARCODE_LENGTH - 1} dígitos")
    return str(GENERAL_DIGIT.compute(digits))


def _barcode_from_line(line: str) -> str:
    return "".join(line[start:end] for start, end in DIGITABLE_LINE_TO_BARCODE_POSITIONS)


def _partials_are_valid(line: str) -> bool:
    return all(
        int(line[digit_index]) == mod10(line[start:end])
        for start, end, digit_index in PARTIALS_TO_VERIFY_MOD10
    )


def _general_digit_is_valid(barcode: str) -> bool:
    without_dv = barcode[:CHECK_DIGIT_MOD11_POSITION] + barcode[CHECK_DIGIT_MOD11_POSITION + 1:]
    return barcode[CHECK_DIGIT_MOD11_POSITION] == checksum(without_dv)


def is_valid(digitable_line: str) -> bool:
    """
    Valida a linha digitável de um boleto

    Args:
        digitable_line: Linha digitável (com ou sem formatação)

    Returns:
        True se os três DVs de campo e o DV geral conferem
    """
    try:
        line = clean(digitable_line, DIGITABLE_LINE_LENGTH)
    except FormatError as e:
        logger.debug(f"Linha digitável rejeitada no formato: {e}")
        return False

    if not _partials_are_valid(line):
        return False

    return _general_digit_is_valid(_barcode_from_line(line))


def to_barcode(digitable_line: str) -> Optional[str]:
    """
    Converte a linha digitável no código de barras de 44 dígitos

    Args:
        digitable_line: Linha digitável (com ou sem formatação)

    Returns:
        str | None: Código de barras, ou None se a linha for inválida
    """
    if not is_valid(digitable_line):
        return None
    return _barcode_from_line(normalize(digitable_line))


def format_boleto(digitable_line: str) -> Optional[str]:
    """
    Formata uma linha digitável canônica e válida

    Exemplo:
        '00190000090114971860168524522114675860000102656'
        -> '00190.00009 01149.718601 68524.522114 6 75860000102656'
    """
    return format_if_valid(digitable_line, MASK, is_valid)


format = format_boleto


def _field(digits: str) -> str:
    return digits + str(mod10(digits))


def _line_from_barcode(barcode: str) -> str:
    return (
        _field(barcode[0:4] + barcode[19:24])
        + _field(barcode[24:34])
        + _field(barcode[34:44])
        + barcode[4]
        + barcode[5:19]
    )


def generate() -> str:
    """
    Gera uma linha digitável válida

    Sorteia banco, fator de vencimento, valor e campo livre, calcula o DV
    geral do código de barras e os DVs dos três campos.

    Returns:
        str: Linha digitável com 47 dígitos
    """
    without_dv = (
        generator.random_digits(3)
        + CURRENCY_CODE
        + generator.random_digits(4)
        + generator.random_digits(10)
        + generator.random_digits(25)
    )
    position = CHECK_DIGIT_MOD11_POSITION
    barcode = without_dv[:position] + checksum(without_dv) + without_dv[position:]
    return _line_from_barcode(barcode)
