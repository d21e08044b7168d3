"""
Validador de Natureza Jurídica (tabela da Receita Federal)
Códigos de 4 dígitos; o primeiro dígito indica a categoria:

1 - Administração Pública
2 - Entidades Empresariais
3 - Entidades sem Fins Lucrativos
4 - Pessoas Físicas
5 - Organizações Internacionais
"""

from types import MappingProxyType
from typing import Dict, Optional

from validadores_br.services.normalizer import normalize as _digits_only

CODE_LENGTH = 4
CATEGORIES = ("1", "2", "3", "4", "5")

LEGAL_NATURE = MappingProxyType({
    "1015": "Órgão Público do Poder Executivo Federal",
    "1023": "Órgão Público do Poder Executivo Estadual ou do Distrito Federal",
    "1031": "Órgão Público do Poder Executivo Municipal",
    "1040": "Órgão Público do Poder Legislativo Federal",
    "1058": "Órgão Público do Poder Legislativo Estadual ou do Distrito Federal",
    "1066": "Órgão Público do Poder Legislativo Municipal",
    "1074": "Órgão Público do Poder Judiciário Federal",
    "1082": "Órgão Público do Poder Judiciário Estadual",
    "1104": "Autarquia Federal",
    "1112": "Autarquia Estadual ou do Distrito Federal",
    "1120": "Autarquia Municipal",
    "1139": "Fundação Federal",
    "1147": "Fundação Estadual ou do Distrito Federal",
    "1155": "Fundação Municipal",
    "1163": "Órgão Público Autônomo da União",
    "1171": "Órgão Público Autônomo Estadual ou do Distrito Federal",
    "1180": "Órgão Público Autônomo Municipal",

    "2011": "Empresa Pública",
    "2038": "Sociedade de Economia Mista",
    "2046": "Sociedade Anônima Aberta",
    "2054": "Sociedade Anônima Fechada",
    "2062": "Sociedade Empresária Limitada",
    "2070": "Sociedade Empresária em Nome Coletivo",
    "2089": "Sociedade Empresária em Comandita Simples",
    "2097": "Sociedade Empresária em Comandita por Ações",
    "2100": "Sociedade Mercantil de Capital e Indústria (extinta pelo NCC/2002)",
    "2127": "Sociedade Empresária em Conta de Participação",
    "2135": "Empresário (Individual)",
    "2143": "Cooperativa",
    "2151": "Consórcio de Sociedades",
    "2160": "Grupo de Sociedades",
    "2178": "Estabelecimento, no Brasil, de Sociedade Estrangeira",
    "2194": "Estabelecimento, no Brasil, de Empresa Binacional Argentino-Brasileira",
    "2208": "Entidade Binacional Itaipu",
    "2216": "Empresa Domiciliada no Exterior",
    "2224": "Clube/Fundo de Investimento",
    "2232": "Sociedade Simples Pura",
    "2240": "Sociedade Simples Limitada",
    "2259": "Sociedade em Nome Coletivo",
    "2267": "Sociedade em Comandita Simples",
    "2275": "Sociedade Simples em Conta de Participação",
    "2305": "Empresa Individual de Responsabilidade Limitada",

    "3034": "Serviço Notarial e Registral (Cartório)",
    "3042": "Organização Social",
    "3050": "Organização da Sociedade Civil de Interesse Público (Oscip)",
    "3069": "Outras Formas de Fundações Mantidas com Recursos Privados",
    "3077": "Serviço Social Autônomo",
    "3085": "Condomínio Edilícios",
    "3093": "Unidade Executora (Programa Dinheiro Direto na Escola)",
    "3107": "Comissão de Conciliação Prévia",
    "3115": "Entidade de Mediação e Arbitragem",
    "3123": "Partido Político",
    "3131": "Entidade Sindical",
    "3204": "Estabelecimento, no Brasil, de Fundação ou Associação Estrangeiras",
    "3212": "Fundação ou Associação Domiciliada no Exterior",
    "3999": "Outras Formas de Associação",

    "4014": "Empresa Individual Imobiliária",
    "4022": "Segurado Especial",
    "4081": "Contribuinte individual",

    "5002": "Organização Internacional e Outras Instituições Extraterritoriais",
})

__all__ = [
    "normalize",
    "is_valid",
    "get_description",
    "list_all",
    "list_by_category",
    "get_category",
    "LEGAL_NATURE",
]


def normalize(code) -> Optional[str]:
    """
    Normaliza um código de natureza jurídica

    Args:
        code: Código (ex: '206-2', '2062')

    Returns:
        str | None: Os 4 dígitos, ou None se não houver exatamente 4
    """
    if not isinstance(code, str):
        return None
    digits = _digits_only(code)
    return digits if len(digits) == CODE_LENGTH else None


def is_valid(code: str) -> bool:
    """True se o código existe na tabela"""
    normalized = normalize(code)
    return normalized is not None and normalized in LEGAL_NATURE


def get_description(code: str) -> Optional[str]:
    """
    Descrição oficial do código

    Exemplo: '2062' -> 'Sociedade Empresária Limitada'
    """
    normalized = normalize(code)
    if normalized is None:
        return None
    return LEGAL_NATURE.get(normalized)


def list_all() -> Dict[str, str]:
    """Cópia da tabela completa (código -> descrição)"""
    return dict(LEGAL_NATURE)


def list_by_category(category) -> Dict[str, str]:
    """
    Códigos de uma categoria

    Args:
        category: Categoria 1 a 5 (int ou str)

    Returns:
        dict: Código -> descrição; vazio para categoria desconhecida
    """
    category = str(category)
    if category not in CATEGORIES:
        return {}
    return {code: description for code, description in LEGAL_NATURE.items() if code.startswith(category)}


def get_category(code: str) -> Optional[int]:
    """Categoria (1-5) de um código válido"""
    normalized = normalize(code)
    if normalized is None or normalized not in LEGAL_NATURE:
        return None
    return int(normalized[0])
