# -*- coding: utf-8 -*-
"""
Testes unitários para o validador de título de eleitor
"""

import pytest

from validadores_br.validators import voter_id_validator


@pytest.mark.unit
class TestVoterIdValidator:
    """Testes para o validador de título de eleitor"""

    def test_valid_voter_id(self):
        assert voter_id_validator.is_valid("690847092828") is True
        assert voter_id_validator.is_valid("6908 4709 28 28") is True

    def test_tampered_voter_id(self):
        assert voter_id_validator.is_valid("690847092829") is False

    def test_checksum(self):
        assert voter_id_validator.checksum("69084709", "28") == "28"

    def test_sp_mg_remainder_zero_becomes_one(self):
        """SP/MG: resto 0 vira 1"""
        assert voter_id_validator.checksum("00000000", "01") == "16"
        assert voter_id_validator.is_valid("000000000116") is True

    def test_remainder_zero_elsewhere(self):
        assert voter_id_validator.checksum("00000000", "28") == "01"
        assert voter_id_validator.is_valid("000000002801") is True

    def test_thirteen_digits_only_for_sp_mg(self):
        assert voter_id_validator.is_valid("123456780191") is True
        assert voter_id_validator.is_valid("1234567890191") is True
        assert voter_id_validator.is_valid("123456780396") is True
        assert voter_id_validator.is_valid("1234567890396") is False

    def test_union_code_out_of_range(self):
        assert voter_id_validator.is_valid("123456780000") is False
        assert voter_id_validator.is_valid("123456782900") is False

    def test_wrong_length_or_type(self):
        assert voter_id_validator.is_valid("12345678019") is False
        assert voter_id_validator.is_valid(None) is False

    def test_format(self):
        assert voter_id_validator.format_voter_id("690847092828") == "6908 4709 28 28"
        assert voter_id_validator.format_voter_id("1234567890191") == "1234 5678 901 91"
        assert voter_id_validator.format_voter_id("690847092829") is None

    def test_generate_default_abroad(self):
        voter_id = voter_id_validator.generate()
        assert len(voter_id) == 12
        assert voter_id[-4:-2] == "28"
        assert voter_id_validator.is_valid(voter_id) is True

    def test_generate_by_uf(self):
        for uf, code in voter_id_validator.UF_CODES.items():
            voter_id = voter_id_validator.generate(uf.lower())
            assert voter_id[-4:-2] == code
            assert voter_id_validator.is_valid(voter_id) is True

    def test_generate_unknown_uf(self):
        assert voter_id_validator.generate("XX") is None
        assert voter_id_validator.generate(None) is None
