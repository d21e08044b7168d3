"""
Generator Service
Geração de identificadores sintéticos: base aleatória + dígitos verificadores
"""

import logging
import random
from typing import Callable, Optional, Sequence, TypeVar

from validadores_br.services.normalizer import is_repeated

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Limite de sorteios antes de desistir (só atingível com fábricas degeneradas)
MAX_ATTEMPTS = 1000


class IdentifierGenerator:
    """Gerador de identificadores com dígitos verificadores válidos"""

    def __init__(self, rng: Optional[random.Random] = None):
        # SystemRandom não tem estado compartilhado a sincronizar entre threads
        self._rng = rng or random.SystemRandom()

    def random_digits(self, length: int) -> str:
        """
        Sorteia uma sequência de dígitos com distribuição uniforme

        Args:
            length: Quantidade de dígitos

        Returns:
            str: Dígitos sorteados (pode começar com zero)
        """
        return "".join(str(self._rng.randrange(10)) for _ in range(length))

    def random_int(self, start: int, end: int) -> int:
        """Inteiro uniforme em [start, end]"""
        return self._rng.randint(start, end)

    def choice(self, options: Sequence[T]) -> T:
        return self._rng.choice(options)

    def random_base(self, length: int, reject_repeated: bool = False) -> str:
        """
        Sorteia uma base de dígitos, opcionalmente rejeitando dígito único repetido

        Args:
            length: Quantidade de dígitos
            reject_repeated: Sorteia de novo bases como '000000000'

        Returns:
            str: Base sorteada
        """
        base = self.random_digits(length)
        while reject_repeated and length > 1 and is_repeated(base):
            base = self.random_digits(length)
        return base

    @staticmethod
    def append_check_digits(base: str, checksum_fn: Callable[[str], str]) -> str:
        """Anexa à base os dígitos verificadores calculados por checksum_fn"""
        return base + checksum_fn(base)

    def build(
        self,
        base_factory: Callable[[], str],
        checksum_fn: Callable[[str], str],
        reject_repeated: bool = False,
    ) -> str:
        """
        Sorteia uma base e anexa os dígitos verificadores

        Args:
            base_factory: Função que produz a base (sem dígitos verificadores)
            checksum_fn: Função que calcula os dígitos verificadores da base
            reject_repeated: Descarta identificadores de um único dígito repetido

        Returns:
            str: Identificador completo

        Raises:
            RuntimeError: Se nenhuma base aceitável for sorteada em MAX_ATTEMPTS
        """
        for _ in range(MAX_ATTEMPTS):
            identifier = self.append_check_digits(base_factory(), checksum_fn)
            if reject_repeated and is_repeated(identifier):
                logger.debug(f"Descartando identificador repetido: {identifier}")
                continue
            return identifier

        raise RuntimeError("Não foi possível gerar um identificador válido")


# Instância global do gerador
identifier_generator = IdentifierGenerator()


def random_digits(length: int) -> str:
    """Função de conveniência para sorteio de dígitos"""
    return identifier_generator.random_digits(length)


def random_int(start: int, end: int) -> int:
    return identifier_generator.random_int(start, end)


def choice(options: Sequence[T]) -> T:
    return identifier_generator.choice(options)


def random_base(length: int, reject_repeated: bool = False) -> str:
    return identifier_generator.random_base(length, reject_repeated=reject_repeated)


def append_check_digits(base: str, checksum_fn: Callable[[str], str]) -> str:
    return identifier_generator.append_check_digits(base, checksum_fn)


def build(
    base_factory: Callable[[], str],
    checksum_fn: Callable[[str], str],
    reject_repeated: bool = False,
) -> str:
    """Função de conveniência para geração base + dígitos verificadores"""
    return identifier_generator.build(base_factory, checksum_fn, reject_repeated=reject_repeated)
