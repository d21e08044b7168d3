# -*- coding: utf-8 -*-
"""
Testes unitários para o serviço de formatação
"""

import pytest

from validadores_br.core.exceptions import FormatError
from validadores_br.services.formatter import apply_mask, format_if_valid


@pytest.mark.unit
class TestFormatter:
    """Testes para apply_mask e format_if_valid"""

    def test_apply_mask(self):
        assert apply_mask("01310200", "#####-###") == "01310-200"

    def test_apply_mask_custom_placeholder(self):
        assert apply_mask("1234", "XX/XX", placeholder="X") == "12/34"

    def test_apply_mask_length_mismatch(self):
        with pytest.raises(FormatError):
            apply_mask("123", "#####-###")

    def test_format_if_valid_requires_canonical_input(self):
        """Entrada já formatada não é reformatada"""
        assert format_if_valid("01310-200", "#####-###", lambda value: True) is None

    def test_format_if_valid_requires_validity(self):
        assert format_if_valid("01310200", "#####-###", lambda value: False) is None

    def test_format_if_valid_rejects_non_string(self):
        assert format_if_valid(1310200, "#####-###", lambda value: True) is None

    def test_format_if_valid(self):
        assert format_if_valid("01310200", "#####-###", lambda value: True) == "01310-200"
