"""
Validador de Datas
Feriados nacionais e estaduais de data fixa e nomes dos meses
"""

from datetime import date
from types import MappingProxyType
from typing import Optional

from validadores_br.models.uf import UF

MONTH_NAMES = MappingProxyType({
    1: "janeiro",
    2: "fevereiro",
    3: "março",
    4: "abril",
    5: "maio",
    6: "junho",
    7: "julho",
    8: "agosto",
    9: "setembro",
    10: "outubro",
    11: "novembro",
    12: "dezembro",
})

# (mês, dia) -> nome do feriado
NATIONAL_HOLIDAYS = MappingProxyType({
    (1, 1): "Ano Novo",
    (4, 21): "Tiradentes",
    (5, 1): "Dia do Trabalho",
    (9, 7): "Independência do Brasil",
    (10, 12): "Nossa Senhora Aparecida",
    (11, 2): "Finados",
    (11, 15): "Proclamação da República",
    (12, 25): "Natal",
})

STATE_HOLIDAYS = MappingProxyType({
    uf: MappingProxyType(holidays)
    for uf, holidays in {
        "AC": {
            (1, 23): "Dia do Evangélico",
            (6, 15): "Aniversário do Acre",
            (9, 5): "Dia da Amazônia",
            (11, 17): "Assinatura do Tratado de Petrópolis",
        },
        "AL": {
            (6, 24): "São João",
            (6, 29): "São Pedro",
            (9, 16): "Emancipação Política",
            (11, 20): "Morte de Zumbi dos Palmares",
        },
        "AM": {(9, 5): "Elevação do Amazonas à categoria de província"},
        "AP": {
            (3, 19): "Dia de São José",
            (9, 13): "Criação do Território Federal",
        },
        "BA": {(7, 2): "Independência da Bahia"},
        "CE": {
            (3, 19): "São José",
            (3, 25): "Data Magna do Ceará",
        },
        "DF": {
            (4, 21): "Fundação de Brasília",
            (11, 30): "Dia do Evangélico",
        },
        "ES": {(4, 21): "Nossa Senhora da Penha"},
        "GO": {(10, 24): "Pedra fundamental de Goiânia"},
        "MA": {(7, 28): "Adesão do Maranhão à independência do Brasil"},
        "MG": {(4, 21): "Data Magna de Minas Gerais"},
        "MS": {(10, 11): "Criação do estado"},
        "MT": {(11, 20): "Dia da Consciência Negra"},
        "PA": {(8, 15): "Adesão do Grão-Pará à independência do Brasil"},
        "PB": {
            (7, 26): "Homenagem à memória do ex-presidente João Pessoa",
            (8, 5): "Fundação do Estado em 1585",
        },
        "PE": {
            (3, 6): "Revolução Pernambucana de 1817",
            (6, 24): "São João",
        },
        "PI": {(10, 19): "Dia do Piauí"},
        "PR": {(12, 19): "Emancipação política do Paraná"},
        "RJ": {
            (4, 23): "Dia de São Jorge",
            (11, 20): "Dia da Consciência Negra",
        },
        "RN": {
            (6, 29): "Dia de São Pedro",
            (10, 3): "Mártires de Cunhaú e Uruaçu",
        },
        "RO": {
            (1, 4): "Criação do estado",
            (6, 18): "Dia do Evangélico",
        },
        "RR": {(10, 5): "Criação de Roraima"},
        "RS": {(9, 20): "Revolução Farroupilha"},
        "SC": {(8, 11): "Criação da capitania, separando-se de SP"},
        "SE": {(7, 8): "Autonomia política de Sergipe"},
        "SP": {(7, 9): "Revolução Constitucionalista de 1932"},
        "TO": {(10, 5): "Criação de Tocantins"},
    }.items()
})


def month_name(month: int) -> Optional[str]:
    """Número do mês (1-12) -> nome em minúsculas, ou None"""
    return MONTH_NAMES.get(month)


def get_holiday_name(target_date: date, uf: Optional[str] = None) -> Optional[str]:
    """
    Nome do feriado na data, nacional ou da UF informada

    Args:
        target_date: Data (date ou datetime)
        uf: Sigla da UF para incluir feriados estaduais

    Returns:
        str | None: Nome do feriado; None se não for feriado ou a entrada for inválida
    """
    if not isinstance(target_date, date):
        return None

    key = (target_date.month, target_date.day)
    if key in NATIONAL_HOLIDAYS:
        return NATIONAL_HOLIDAYS[key]

    if uf is None:
        return None

    state = UF.from_code(uf)
    if state is None:
        return None
    return STATE_HOLIDAYS.get(state.value, {}).get(key)


def is_holiday(target_date: date, uf: Optional[str] = None) -> Optional[bool]:
    """
    Verifica se a data é feriado nacional ou, com UF, estadual

    Apenas feriados de data fixa; o ano é ignorado.

    Args:
        target_date: Data (date ou datetime)
        uf: Sigla da UF (qualquer caixa)

    Returns:
        True se feriado, False caso contrário, None se a data não for
        date/datetime ou a UF for desconhecida

    Exemplo: is_holiday(date(2024, 7, 9), "SP") -> True
    """
    if not isinstance(target_date, date):
        return None
    if uf is not None and UF.from_code(uf) is None:
        return None

    return get_holiday_name(target_date, uf) is not None
