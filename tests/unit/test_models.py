# -*- coding: utf-8 -*-
"""
Testes unitários para os modelos Address e UF
"""

import pytest
from pydantic import ValidationError

from validadores_br.models import UF, UF_NAMES, Address


@pytest.mark.unit
class TestAddress:
    """Testes para o modelo Address"""

    def test_from_viacep_payload(self):
        payload = {
            "cep": "01310-200",
            "logradouro": "Avenida Paulista",
            "complemento": "",
            "bairro": "Bela Vista",
            "localidade": "São Paulo",
            "uf": "SP",
            "estado": "São Paulo",
            "ibge": "3550308",
            "gia": "1004",
            "ddd": "11",
            "siafi": "7107",
        }
        address = Address(**payload)

        assert address.cep == "01310-200"
        assert address.localidade == "São Paulo"
        assert not hasattr(address, "estado")

    def test_all_fields_optional(self):
        address = Address()
        assert address.cep is None
        assert address.model_dump() == {
            "cep": None,
            "logradouro": None,
            "complemento": None,
            "bairro": None,
            "localidade": None,
            "uf": None,
            "ibge": None,
            "gia": None,
            "ddd": None,
            "siafi": None,
        }

    def test_frozen(self):
        address = Address(cep="01310-200")
        with pytest.raises(ValidationError):
            address.cep = "00000-000"


@pytest.mark.unit
class TestUF:
    """Testes para o enum UF"""

    def test_has_27_units(self):
        assert len(UF) == 27
        assert set(UF_NAMES) == {uf.value for uf in UF}

    def test_nome(self):
        assert UF.SP.nome == "São Paulo"
        assert UF.DF.nome == "Distrito Federal"

    def test_from_code(self):
        assert UF.from_code("sp") is UF.SP
        assert UF.from_code(" rj ") is UF.RJ
        assert UF.from_code("ZZ") is None
        assert UF.from_code(None) is None

    def test_from_name(self):
        assert UF.from_name("Minas Gerais") is UF.MG
        assert UF.from_name("Gotham") is None

    def test_is_str(self):
        assert UF.BA == "BA"
