"""
Address Models
Endereço retornado pela consulta de CEP (ViaCEP)
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class Address(BaseModel):
    """
    Endereço postal

    Os campos seguem os nomes da resposta do ViaCEP.
    """

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "cep": "01310-200",
                    "logradouro": "Avenida Paulista",
                    "complemento": "de 1047 a 1865 - lado ímpar",
                    "bairro": "Bela Vista",
                    "localidade": "São Paulo",
                    "uf": "SP",
                    "ibge": "3550308",
                    "gia": "1004",
                    "ddd": "11",
                    "siafi": "7107",
                }
            ]
        },
    )

    cep: Optional[str] = Field(default=None, description="CEP formatado (NNNNN-NNN)")
    logradouro: Optional[str] = Field(default=None, description="Rua, avenida, etc.")
    complemento: Optional[str] = None
    bairro: Optional[str] = None
    localidade: Optional[str] = Field(default=None, description="Município")
    uf: Optional[str] = Field(default=None, description="Sigla da unidade federativa")
    ibge: Optional[str] = Field(default=None, description="Código IBGE do município")
    gia: Optional[str] = None
    ddd: Optional[str] = None
    siafi: Optional[str] = None
