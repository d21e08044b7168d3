"""
Validador de CPF ou CNPJ (documento de pessoa física ou jurídica)
"""

from typing import Optional

from validadores_br.services.normalizer import normalize
from validadores_br.validators import cnpj_validator, cpf_validator


def validar_cpf_cnpj(documento: str) -> bool:
    """
    Valida CPF ou CNPJ, escolhendo o esquema pelo tamanho

    Args:
        documento: CPF ou CNPJ (com ou sem formatação)

    Returns:
        True se válido, False caso contrário
    """
    if not documento or not isinstance(documento, str):
        return False

    # Verificar tamanho
    tamanho = len(normalize(documento))
    if tamanho == cpf_validator.CPF_LENGTH:
        return cpf_validator.is_valid(documento)
    elif tamanho == cnpj_validator.CNPJ_LENGTH:
        return cnpj_validator.is_valid(documento)
    else:
        return False


def formatar_cpf_cnpj(documento: str) -> Optional[str]:
    """
    Formata CPF ou CNPJ canônico e válido

    Returns:
        str | None: Documento formatado, ou None se inválido
    """
    if not isinstance(documento, str):
        return None
    if len(documento) == cpf_validator.CPF_LENGTH:
        return cpf_validator.format_cpf(documento)
    return cnpj_validator.format_cnpj(documento)
