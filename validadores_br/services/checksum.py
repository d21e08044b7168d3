"""
Weighted Checksum Service
Primitiva genérica de dígito verificador: soma ponderada, módulo e regra de resto

Todos os esquemas de módulo 10/11 do pacote são configurações de SchemeChecksum:
pesos, módulo, sentido de leitura, redução opcional do produto e a regra que
converte o resto em dígito.
"""

from dataclasses import dataclass
from itertools import cycle as cycle_weights
from typing import Callable, Iterable, Optional, Sequence

RemainderRule = Callable[[int], int]
ProductReducer = Callable[[int], int]


# ============ REGRAS DE RESTO ============

def mod11_standard(remainder: int) -> int:
    """Resto < 2 -> 0, senão 11 - resto (CPF, CNPJ)"""
    return 0 if remainder < 2 else 11 - remainder


def mod11_eleven_minus_or_zero(remainder: int) -> int:
    """11 - resto, com 10 e 11 mapeados para 0 (PIS, RENAVAM)"""
    value = 11 - remainder
    return 0 if value >= 10 else value


def mod11_boleto(remainder: int) -> int:
    """11 - resto, com restos 0 e 1 mapeados para 1 (DV geral do boleto)"""
    return 11 - remainder if remainder not in (0, 1) else 1


def mod11_remainder_clamped(remainder: int) -> int:
    """O próprio resto, com 10 mapeado para 0 (CNH)"""
    return 0 if remainder > 9 else remainder


def mod10_complement(remainder: int) -> int:
    """10 - resto, com resto 0 mapeado para 0 (campos do boleto)"""
    return 0 if remainder == 0 else 10 - remainder


def luhn_reduce(product: int) -> int:
    """Produtos maiores que 9 têm seus dígitos somados: 1 + (produto % 10)"""
    return 1 + (product % 10) if product > 9 else product


# ============ PRIMITIVA ============

def weighted_sum(
    digits: Iterable[int],
    weights: Sequence[int],
    reverse: bool = False,
    cycle: bool = True,
    reduce_product: Optional[ProductReducer] = None,
) -> int:
    """
    Soma ponderada dos dígitos

    Args:
        digits: Dígitos (inteiros 0-9) do mais para o menos significativo
        weights: Pesos
        reverse: Se True, o primeiro peso é aplicado ao dígito menos significativo
        cycle: Repete os pesos ciclicamente se forem menos que os dígitos;
            se False, os dígitos excedentes são ignorados
        reduce_product: Redução aplicada a cada produto antes da soma

    Returns:
        int: Soma dos produtos (reduzidos)
    """
    if not weights:
        raise ValueError("A tabela de pesos não pode estar vazia")

    sequence = list(digits)
    if reverse:
        sequence.reverse()

    total = 0
    for digit, weight in zip(sequence, cycle_weights(weights) if cycle else weights):
        product = digit * weight
        if reduce_product is not None:
            product = reduce_product(product)
        total += product
    return total


def compute(
    digits: Iterable[int],
    weights: Sequence[int],
    modulus: int,
    rule: RemainderRule,
    reverse: bool = False,
    reduce_product: Optional[ProductReducer] = None,
) -> int:
    """
    Calcula um dígito verificador: rule(weighted_sum(...) % modulus)

    Args:
        digits: Dígitos da base
        weights: Tabela de pesos
        modulus: 10 ou 11
        rule: Conversão resto -> dígito do esquema
        reverse: Leitura da direita para a esquerda
        reduce_product: Redução por produto (Luhn no módulo 10 do boleto)

    Returns:
        int: Dígito verificador (0-9)
    """
    total = weighted_sum(digits, weights, reverse=reverse, reduce_product=reduce_product)
    return rule(total % modulus)


@dataclass(frozen=True)
class SchemeChecksum:
    """Configuração de um dígito verificador de um esquema"""

    name: str
    weights: tuple
    modulus: int
    rule: RemainderRule
    reverse: bool = False
    reduce_product: Optional[ProductReducer] = None

    def remainder(self, digits: Iterable[int]) -> int:
        """Resto da soma ponderada, antes da regra de conversão"""
        total = weighted_sum(
            digits, self.weights, reverse=self.reverse, reduce_product=self.reduce_product
        )
        return total % self.modulus

    def compute(self, digits: Iterable[int]) -> int:
        """Dígito verificador para os dígitos informados"""
        return self.rule(self.remainder(digits))


# Pesos 2..9 aplicados da direita para a esquerda, reiniciando em 2
CYCLE_2_TO_9 = tuple(range(2, 10))
