"""
Modelos de dados
"""

from .address import Address
from .uf import UF, UF_NAMES

__all__ = ["Address", "UF", "UF_NAMES"]
