# -*- coding: utf-8 -*-
"""
Testes unitários para o validador de boleto (linha digitável)
"""

import pytest

from validadores_br.validators import boleto_validator

VALID_LINE = "00190000090114971860168524522114675860000102656"
# DV do primeiro campo (posição 9) trocado de 9 para 2
TAMPERED_LINE = "00190000020114971860168524522114675860000102656"


@pytest.mark.unit
class TestBoletoValidator:
    """Testes para o validador de linha digitável"""

    def test_valid_line(self):
        assert boleto_validator.is_valid(VALID_LINE) is True

    def test_valid_formatted_line(self):
        assert boleto_validator.is_valid("00190.00009 01149.718601 68524.522114 6 75860000102656") is True

    def test_corrupted_first_field_digit(self):
        """DV do primeiro campo (posição 9) alterado"""
        tampered = VALID_LINE[:9] + "2" + VALID_LINE[10:]
        assert boleto_validator.is_valid(tampered) is False

    def test_corrupted_general_digit(self):
        """DV geral (posição 32) alterado"""
        tampered = VALID_LINE[:32] + "5" + VALID_LINE[33:]
        assert boleto_validator.is_valid(tampered) is False

    def test_wrong_length(self):
        assert boleto_validator.is_valid(VALID_LINE[:-1]) is False
        assert boleto_validator.is_valid("") is False
        assert boleto_validator.is_valid(None) is False

    def test_mod10(self):
        assert boleto_validator.mod10("001900000") == 9

    def test_to_barcode(self):
        barcode = boleto_validator.to_barcode(VALID_LINE)
        assert barcode == "00196758600001026560000001149718606852452211"
        assert len(barcode) == 44

    def test_to_barcode_invalid(self):
        assert boleto_validator.to_barcode(TAMPERED_LINE) is None

    def test_format(self):
        assert (
            boleto_validator.format_boleto(VALID_LINE)
            == "00190.00009 01149.718601 68524.522114 6 75860000102656"
        )

    def test_format_invalid(self):
        assert boleto_validator.format_boleto(TAMPERED_LINE) is None

    def test_generate(self):
        line = boleto_validator.generate()
        assert len(line) == 47
        assert line[3] == "9"
        assert boleto_validator.is_valid(line) is True

    def test_generated_barcode_check_digit(self):
        line = boleto_validator.generate()
        barcode = boleto_validator.to_barcode(line)
        assert barcode[4] == boleto_validator.checksum(barcode[:4] + barcode[5:])
