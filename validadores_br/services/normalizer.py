"""
Normalizer Service
Serviço para normalização de identificadores (remoção de símbolos de formatação)
"""

import re
import logging
from typing import List

from validadores_br.core.exceptions import FormatError

logger = logging.getLogger(__name__)


class Normalizer:
    """Normalizador de identificadores numéricos"""

    def __init__(self):
        # [^0-9] e não \D: \D aceitaria dígitos Unicode (ex: '٣')
        self._non_digit_pattern = re.compile(r'[^0-9]')

    def normalize(self, raw) -> str:
        """
        Remove tudo que não for dígito ASCII, preservando a ordem

        Args:
            raw: Valor bruto (qualquer tipo)

        Returns:
            str: Apenas dígitos 0-9; string vazia para None ou não-str

        Exemplo: '123.456.789-09' -> '12345678909'
        """
        if not isinstance(raw, str):
            return ""
        return self._non_digit_pattern.sub('', raw)

    def is_canonical(self, value) -> bool:
        """
        Verifica se o valor já está na forma canônica (não vazia, só dígitos)

        Args:
            value: Valor a verificar

        Returns:
            bool: True se normalize(value) == value e value não é vazio
        """
        return isinstance(value, str) and value != "" and self.normalize(value) == value

    def clean(self, raw, *lengths: int) -> str:
        """
        Normaliza e exige um dos comprimentos informados

        Args:
            raw: Valor bruto (deve ser str)
            *lengths: Comprimentos aceitos após a normalização

        Returns:
            str: Identificador normalizado

        Raises:
            FormatError: Tipo diferente de str ou comprimento inválido
        """
        if not isinstance(raw, str):
            raise FormatError(f"Esperado str, recebido {type(raw).__name__}")

        digits = self.normalize(raw)
        if lengths and len(digits) not in lengths:
            raise FormatError(
                f"Comprimento inválido: {len(digits)} (esperado {' ou '.join(map(str, lengths))})"
            )
        return digits

    def to_digits(self, value: str) -> List[int]:
        """
        Converte uma string canônica em lista de inteiros

        Raises:
            FormatError: Se houver qualquer caractere que não seja dígito ASCII
        """
        if not self.is_canonical(value):
            raise FormatError(f"Valor não canônico: {value!r}")
        return [int(char) for char in value]

    @staticmethod
    def is_repeated(value: str) -> bool:
        """True para sequências de um único dígito repetido ('00000000000', ...)"""
        return len(set(value)) == 1


# Instância global do normalizador
normalizer = Normalizer()


def normalize(raw) -> str:
    """
    Função de conveniência para normalização

    Args:
        raw: Valor bruto

    Returns:
        str: Apenas dígitos
    """
    return normalizer.normalize(raw)


def clean(raw, *lengths: int) -> str:
    """Função de conveniência: normaliza e valida comprimento (lança FormatError)"""
    return normalizer.clean(raw, *lengths)


def to_digits(value: str) -> List[int]:
    return normalizer.to_digits(value)


def is_repeated(value: str) -> bool:
    return normalizer.is_repeated(value)
