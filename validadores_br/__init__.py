"""
Validadores BR
Validação, formatação e geração de identificadores brasileiros
"""

import logging

from validadores_br.services.normalizer import normalize
from validadores_br.validators import (
    boleto_validator as boleto,
    cep_validator as cep,
    cnh_validator as cnh,
    cnpj_validator as cnpj,
    cpf_validator as cpf,
    date_validator as holidays,
    email_validator as email,
    legal_nature_validator as legal_nature,
    legal_process_validator as legal_process,
    license_plate_validator as license_plate,
    phone_validator as phone,
    pis_validator as pis,
    renavam_validator as renavam,
    voter_id_validator as voter_id,
)
from validadores_br.validators.cpf_cnpj_validator import validar_cpf_cnpj

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "normalize",
    "boleto",
    "cep",
    "cnh",
    "cnpj",
    "cpf",
    "holidays",
    "email",
    "legal_nature",
    "legal_process",
    "license_plate",
    "phone",
    "pis",
    "renavam",
    "voter_id",
    "validar_cpf_cnpj",
]
