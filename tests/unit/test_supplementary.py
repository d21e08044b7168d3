# -*- coding: utf-8 -*-
"""
Testes unitários para CEP, telefone, placa, natureza jurídica e e-mail
"""

import pytest

from validadores_br.validators import (
    cep_validator,
    email_validator,
    legal_nature_validator,
    license_plate_validator,
    phone_validator,
)


@pytest.mark.unit
class TestCEPValidator:
    """Testes para o validador de CEP"""

    def test_valid_cep(self):
        assert cep_validator.is_valid("01310200") is True
        assert cep_validator.is_valid("01310-200") is True

    def test_invalid_cep(self):
        assert cep_validator.is_valid("0131020") is False
        assert cep_validator.is_valid("013102000") is False
        assert cep_validator.is_valid(1310200) is False

    def test_format(self):
        assert cep_validator.format_cep("01310200") == "01310-200"
        assert cep_validator.format_cep("01310-200") is None
        assert cep_validator.format_cep("123") is None

    def test_generate(self):
        cep = cep_validator.generate()
        assert len(cep) == 8
        assert cep_validator.is_valid(cep) is True


@pytest.mark.unit
class TestPhoneValidator:
    """Testes para o validador de telefone"""

    def test_valid_mobile(self):
        assert phone_validator.is_valid("11994029275") is True
        assert phone_validator.is_valid("11994029275", phone_type="mobile") is True
        assert phone_validator.is_valid("(11)99402-9275", phone_type="mobile") is True

    def test_valid_landline(self):
        assert phone_validator.is_valid("1635014415") is True
        assert phone_validator.is_valid("1635014415", phone_type="landline") is True

    def test_type_mismatch(self):
        assert phone_validator.is_valid("11994029275", phone_type="landline") is False
        assert phone_validator.is_valid("1635014415", phone_type="mobile") is False

    def test_invalid_phone(self):
        assert phone_validator.is_valid("01994029275") is False
        assert phone_validator.is_valid("1615014415") is False
        assert phone_validator.is_valid(None) is False
        assert phone_validator.is_valid("11994029275", phone_type="fax") is False

    def test_format(self):
        assert phone_validator.format_phone("11994029275") == "(11)99402-9275"
        assert phone_validator.format_phone("1635014415") == "(16)3501-4415"
        assert phone_validator.format_phone("(11)99402-9275") is None
        assert phone_validator.format_phone("123") is None

    def test_remove_international_dialing_code(self):
        assert phone_validator.remove_international_dialing_code("+5511994029275") == "+11994029275"
        assert phone_validator.remove_international_dialing_code("5511994029275") == "11994029275"
        assert phone_validator.remove_international_dialing_code("11994029275") == "11994029275"
        assert phone_validator.remove_international_dialing_code(None) == ""

    def test_generate(self):
        assert phone_validator.is_valid(phone_validator.generate("mobile"), phone_type="mobile") is True
        assert phone_validator.is_valid(phone_validator.generate("landline"), phone_type="landline") is True
        assert phone_validator.is_valid(phone_validator.generate()) is True
        assert phone_validator.generate("fax") is None


@pytest.mark.unit
class TestLicensePlateValidator:
    """Testes para o validador de placa"""

    def test_old_format(self):
        assert license_plate_validator.is_valid("ABC1234") is True
        assert license_plate_validator.is_valid("abc-1234") is True
        assert license_plate_validator.is_valid("ABC1234", plate_type="old_format") is True
        assert license_plate_validator.is_valid("ABC1234", plate_type="mercosul") is False

    def test_mercosul(self):
        assert license_plate_validator.is_valid("ABC1D23") is True
        assert license_plate_validator.is_valid("ABC1D23", plate_type="mercosul") is True
        assert license_plate_validator.is_valid("ABC1D23", plate_type="old_format") is False

    def test_invalid_plate(self):
        assert license_plate_validator.is_valid("AB12345") is False
        assert license_plate_validator.is_valid("") is False
        assert license_plate_validator.is_valid(None) is False
        assert license_plate_validator.is_valid("ABC1234", plate_type="moto") is False

    def test_get_format(self):
        assert license_plate_validator.get_format("ABC-1234") == "LLLNNNN"
        assert license_plate_validator.get_format("ABC1D23") == "LLLNLNN"
        assert license_plate_validator.get_format("1234567") is None

    def test_format(self):
        assert license_plate_validator.format_license_plate("abc1234") == "ABC-1234"
        assert license_plate_validator.format_license_plate("abc1e34") == "ABC1E34"
        assert license_plate_validator.format_license_plate("ABCD123") is None

    def test_convert_to_mercosul(self):
        assert license_plate_validator.convert_to_mercosul("ABC4567") == "ABC4F67"
        assert license_plate_validator.convert_to_mercosul("abc-1034") == "ABC1A34"
        assert license_plate_validator.convert_to_mercosul("ABC1D23") is None

    def test_generate(self):
        assert license_plate_validator.get_format(license_plate_validator.generate()) == "LLLNLNN"
        assert license_plate_validator.get_format(license_plate_validator.generate("lllnnnn")) == "LLLNNNN"
        assert license_plate_validator.generate("NNNLLLL") is None


@pytest.mark.unit
class TestLegalNatureValidator:
    """Testes para a tabela de natureza jurídica"""

    def test_is_valid(self):
        assert legal_nature_validator.is_valid("2062") is True
        assert legal_nature_validator.is_valid("206-2") is True
        assert legal_nature_validator.is_valid("9999") is False
        assert legal_nature_validator.is_valid("20620") is False
        assert legal_nature_validator.is_valid(2062) is False

    def test_get_description(self):
        assert legal_nature_validator.get_description("2062") == "Sociedade Empresária Limitada"
        assert legal_nature_validator.get_description("9999") is None

    def test_list_all_is_a_copy(self):
        table = legal_nature_validator.list_all()
        table["0000"] = "x"
        assert "0000" not in legal_nature_validator.LEGAL_NATURE

    def test_list_by_category(self):
        category = legal_nature_validator.list_by_category(4)
        assert set(category) == {"4014", "4022", "4081"}
        assert legal_nature_validator.list_by_category("9") == {}

    def test_get_category(self):
        assert legal_nature_validator.get_category("5002") == 5
        assert legal_nature_validator.get_category("5003") is None


@pytest.mark.unit
class TestEmailValidator:
    """Testes para o validador de e-mail"""

    def test_valid_email(self):
        assert email_validator.is_valid("joao.silva@example.com.br") is True
        assert email_validator.is_valid("a+tag@dominio.io") is True

    def test_invalid_email(self):
        assert email_validator.is_valid(".joao@example.com") is False
        assert email_validator.is_valid("joao@example") is False
        assert email_validator.is_valid("joao@example.c") is False
        assert email_validator.is_valid("joao example.com") is False
        assert email_validator.is_valid("joao@example.com\n") is False
        assert email_validator.is_valid(None) is False
