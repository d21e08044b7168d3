"""
Serviços: normalização, dígitos verificadores, geração, formatação,
tabelas de referência e consulta de CEP
"""
