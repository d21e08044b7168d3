"""
Exceções do pacote Validadores BR

Os validadores públicos nunca propagam FormatError nem ReferenceDataUnavailable:
ambas são convertidas em False/None no ponto de entrada. ExternalLookupFailure
só chega ao chamador quando a consulta de CEP é feita em modo estrito.
"""


class ValidadoresBrError(Exception):
    """Exceção base do pacote"""

    pass


class FormatError(ValidadoresBrError, ValueError):
    """Entrada com tipo, comprimento ou caracteres inválidos para o esquema"""

    pass


class ReferenceDataUnavailable(ValidadoresBrError):
    """Tabela de referência (tribunais/foros) ausente ou corrompida"""

    pass


class ExternalLookupFailure(ValidadoresBrError):
    """Falha na consulta a um serviço externo (ViaCEP)"""

    pass


class InvalidCEP(ExternalLookupFailure):
    """CEP com formato inválido enviado para consulta"""

    pass


class CEPNotFound(ExternalLookupFailure):
    """CEP ou endereço não encontrado no serviço externo"""

    pass
