"""
Validador de Número de Processo Judicial (padrão CNJ)
Formato: NNNNNNN-DD.AAAA.J.TR.OOOO
"""

import logging
from datetime import date
from pathlib import Path
from typing import Optional, Union

from validadores_br.core.exceptions import FormatError
from validadores_br.services import generator
from validadores_br.services.formatter import format_if_valid
from validadores_br.services.normalizer import clean, normalize, to_digits
from validadores_br.services.reference_data import ORGAOS, get_legal_process_table

logger = logging.getLogger(__name__)

LEGAL_PROCESS_LENGTH = 20
BASE_LENGTH = 18
MASK = "#######-##.####.#.##.####"

TablePath = Optional[Union[str, Path]]

__all__ = ["normalize", "is_valid", "format_legal_process", "format", "generate", "checksum"]


def checksum(base: str) -> str:
    """
    Calcula o dígito verificador (módulo 97)

    Args:
        base: NNNNNNN + AAAA + J + TR + OOOO (18 dígitos, sem o DD)

    Returns:
        str: DD com 2 dígitos

    Exemplo: '684765020233030000' -> '60'
    """
    if len(to_digits(base)) != BASE_LENGTH:
        raise FormatError(f"Base do processo deve ter {BASE_LENGTH} dígitos")

    result = 97 - ((int(base) * 100) % 97)
    return str(result).zfill(2)


def _split(legal_process: str):
    """
    Extrai os componentes do número

    - NNNNNNN: Número sequencial (7 dígitos)
    - DD: Dígito verificador (2 dígitos)
    - AAAA: Ano (4 dígitos)
    - J: Órgão do Judiciário (1 dígito)
    - TR: Tribunal (2 dígitos)
    - OOOO: Origem/foro (4 dígitos)
    """
    return (
        legal_process[0:7],
        legal_process[7:9],
        legal_process[9:13],
        legal_process[13],
        legal_process[14:16],
        legal_process[16:20],
    )


def is_valid(legal_process: str, table_path: TablePath = None) -> bool:
    """
    Valida número de processo pelo DV e pela tabela de tribunais/foros

    Args:
        legal_process: Número do processo (com ou sem formatação)
        table_path: Caminho alternativo da tabela de referência

    Returns:
        True se válido, False caso contrário (inclusive sem tabela disponível)
    """
    try:
        legal_process = clean(legal_process, LEGAL_PROCESS_LENGTH)
    except FormatError as e:
        logger.debug(f"Processo rejeitado no formato: {e}")
        return False

    sequencial, dd, ano, orgao, tribunal, foro = _split(legal_process)

    if dd != checksum(sequencial + ano + orgao + tribunal + foro):
        return False

    table = get_legal_process_table(table_path)
    if table is None:
        return False

    referencia = table.get(int(orgao))
    if referencia is None:
        return False

    return referencia.contem(int(tribunal), int(foro))


def format_legal_process(legal_process: str, table_path: TablePath = None) -> Optional[str]:
    """
    Formata um número de processo canônico e válido

    Exemplo: '68476506020233030000' -> '6847650-60.2023.3.03.0000'
    """
    return format_if_valid(
        legal_process, MASK, lambda value: is_valid(value, table_path=table_path)
    )


format = format_legal_process


def generate(
    year: Optional[int] = None,
    orgao: Optional[int] = None,
    table_path: TablePath = None,
) -> Optional[str]:
    """
    Gera um número de processo válido

    Args:
        year: Ano do processo (padrão: ano corrente; anos passados são recusados)
        orgao: Órgão do Judiciário, 1 a 9 (padrão: sorteado)
        table_path: Caminho alternativo da tabela de referência

    Returns:
        str | None: Número com 20 dígitos, ou None se os parâmetros forem
        inválidos ou a tabela estiver indisponível
    """
    current_year = date.today().year
    if year is None:
        year = current_year
    if orgao is None:
        orgao = generator.choice(ORGAOS)

    if year < current_year or year > 9999:
        logger.debug(f"Ano inválido para geração de processo: {year}")
        return None
    if orgao not in ORGAOS:
        logger.debug(f"Órgão inválido para geração de processo: {orgao}")
        return None

    table = get_legal_process_table(table_path)
    if table is None:
        return None

    referencia = table.get(orgao)
    if referencia is None or not referencia.tribunais or not referencia.foros:
        return None

    tribunal = str(generator.choice(referencia.tribunais)).zfill(2)
    foro = str(generator.choice(referencia.foros)).zfill(4)
    sequencial = generator.random_digits(7)
    ano = str(year).zfill(4)

    dd = checksum(sequencial + ano + str(orgao) + tribunal + foro)
    return f"{sequencial}{dd}{ano}{orgao}{tribunal}{foro}"
