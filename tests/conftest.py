# -*- coding: utf-8 -*-
"""
Configuração global para os testes do Validadores BR
"""

import json
import random
import pytest
from typing import Dict, Any
from pathlib import Path

from validadores_br.core.config import get_settings
from validadores_br.services import cep_service, reference_data
from validadores_br.services.generator import IdentifierGenerator

project_root = Path(__file__).parent.parent

# Quantidade de gerações por esquema nos testes de ida e volta
ROUNDTRIP_SAMPLES = 100


@pytest.fixture(scope="session")
def test_config() -> Dict[str, Any]:
    """Configuração global para todos os testes"""
    return {
        'roundtrip_samples': ROUNDTRIP_SAMPLES,
        'default_table': reference_data.DEFAULT_TABLE_PATH,
    }


@pytest.fixture(autouse=True)
def reset_caches():
    """Descarta configurações e tabelas em cache entre testes"""
    get_settings.cache_clear()
    reference_data.clear_cache()
    cep_service._cep_service = None
    yield
    get_settings.cache_clear()
    reference_data.clear_cache()
    cep_service._cep_service = None


@pytest.fixture
def seeded_generator():
    """Gerador determinístico (semente fixa)"""
    return IdentifierGenerator(rng=random.Random(42))


@pytest.fixture
def sample_documents() -> Dict[str, Dict[str, str]]:
    """Identificadores conhecidos, válidos e inválidos"""
    return {
        'cpf': {'valid': '82178537464', 'formatted': '821.785.374-64', 'invalid': '82178537465'},
        'cnpj': {'valid': '03560714000142', 'formatted': '03.560.714/0001-42', 'invalid': '03560714000143'},
        'pis': {'valid': '12038619494', 'formatted': '120.38619.49-4', 'invalid': '12038619495'},
        'renavam': {'valid': '12345678900', 'formatted': '1234567890-0', 'invalid': '12345678901'},
        'cnh': {'valid': '98765432109', 'formatted': '987654321-09', 'invalid': '98765432100'},
        'voter_id': {'valid': '690847092828', 'formatted': '6908 4709 28 28', 'invalid': '690847092829'},
        'legal_process': {
            'valid': '68476506020233030000',
            'formatted': '6847650-60.2023.3.03.0000',
            'invalid': '68476506120233030000',
        },
        'boleto': {
            'valid': '00190000090114971860168524522114675860000102656',
            'formatted': '00190.00009 01149.718601 68524.522114 6 75860000102656',
            'invalid': '00190000020114971860168524522114675860000102656',
        },
    }


@pytest.fixture
def legal_process_table_file(tmp_path):
    """Fábrica de tabelas de processo em arquivo temporário"""

    def _write(content, name: str = "legal_process_ids.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write
