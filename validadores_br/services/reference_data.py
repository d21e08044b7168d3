"""
Reference Data Service
Carregamento da tabela de tribunais e foros por órgão do Judiciário

Formato esperado do JSON:
    {"orgao_<1..9>": {"id_tribunal": [int, ...], "id_foro": [int, ...]}}

A tabela é lida uma vez por caminho e mantida em cache, imutável.
"""

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union

from validadores_br.core.config import get_settings
from validadores_br.core.exceptions import ReferenceDataUnavailable

logger = logging.getLogger(__name__)

DEFAULT_TABLE_PATH = Path(__file__).resolve().parent.parent / "data" / "legal_process_ids.json"

ORGAOS = range(1, 10)


@dataclass(frozen=True)
class OrgaoReferencia:
    """Tribunais e foros válidos de um órgão (segmento J)"""

    tribunais: Tuple[int, ...]
    foros: Tuple[int, ...]

    def contem(self, tribunal: int, foro: int) -> bool:
        return tribunal in self.tribunais and foro in self.foros


LegalProcessTable = Mapping[int, OrgaoReferencia]


def resolve_table_path(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve o caminho da tabela: argumento > LEGAL_PROCESS_TABLE_PATH > tabela embutida
    """
    if path is not None:
        return Path(path)
    configured = get_settings().LEGAL_PROCESS_TABLE_PATH
    return Path(configured) if configured else DEFAULT_TABLE_PATH


def _parse_orgao(key: str, entry) -> OrgaoReferencia:
    if not isinstance(entry, dict):
        raise ReferenceDataUnavailable(f"Entrada '{key}' não é um objeto")

    try:
        tribunais = tuple(int(value) for value in entry["id_tribunal"])
        foros = tuple(int(value) for value in entry["id_foro"])
    except (KeyError, TypeError, ValueError) as e:
        raise ReferenceDataUnavailable(f"Entrada '{key}' malformada: {e}") from e

    return OrgaoReferencia(tribunais=tribunais, foros=foros)


@lru_cache(maxsize=8)
def _load_table(path: Path) -> LegalProcessTable:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError as e:
        raise ReferenceDataUnavailable(f"Tabela de referência não encontrada: {path}") from e
    except (OSError, json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ReferenceDataUnavailable(f"Tabela de referência ilegível: {path} ({e})") from e

    if not isinstance(raw, dict):
        raise ReferenceDataUnavailable(f"Tabela de referência deve ser um objeto JSON: {path}")

    table = {}
    for orgao in ORGAOS:
        key = f"orgao_{orgao}"
        if key in raw:
            table[orgao] = _parse_orgao(key, raw[key])

    logger.debug(f"Tabela de processos carregada de {path}: {len(table)} órgãos")
    return MappingProxyType(table)


def load_legal_process_table(path: Optional[Union[str, Path]] = None) -> LegalProcessTable:
    """
    Carrega a tabela de referência (modo estrito)

    Args:
        path: Caminho alternativo do JSON

    Returns:
        Mapping[int, OrgaoReferencia]: Órgão (1-9) -> tribunais/foros

    Raises:
        ReferenceDataUnavailable: Arquivo ausente, ilegível ou malformado
    """
    return _load_table(resolve_table_path(path))


def get_legal_process_table(path: Optional[Union[str, Path]] = None) -> Optional[LegalProcessTable]:
    """
    Carrega a tabela de referência, retornando None quando indisponível

    Args:
        path: Caminho alternativo do JSON

    Returns:
        Mapping | None: Tabela carregada ou None
    """
    try:
        return load_legal_process_table(path)
    except ReferenceDataUnavailable as e:
        logger.warning(f"⚠️ Tabela de processos indisponível: {e}")
        return None


def clear_cache() -> None:
    """Descarta as tabelas em cache (útil após trocar LEGAL_PROCESS_TABLE_PATH)"""
    _load_table.cache_clear()
