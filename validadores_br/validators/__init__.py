"""
Validadores de identificadores brasileiros
"""

from . import (
    boleto_validator,
    cep_validator,
    cnh_validator,
    cnpj_validator,
    cpf_validator,
    date_validator,
    email_validator,
    legal_nature_validator,
    legal_process_validator,
    license_plate_validator,
    phone_validator,
    pis_validator,
    renavam_validator,
    voter_id_validator,
)
from .cpf_cnpj_validator import formatar_cpf_cnpj, validar_cpf_cnpj

__all__ = [
    "boleto_validator",
    "cep_validator",
    "cnh_validator",
    "cnpj_validator",
    "cpf_validator",
    "date_validator",
    "email_validator",
    "legal_nature_validator",
    "legal_process_validator",
    "license_plate_validator",
    "phone_validator",
    "pis_validator",
    "renavam_validator",
    "voter_id_validator",
    "validar_cpf_cnpj",
    "formatar_cpf_cnpj",
]
