"""
Validador de E-mail
"""

import re

# Não pode começar com ponto; domínio com TLD alfabético de 2+ letras
EMAIL_PATTERN = re.compile(r'\A(?![.])[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}\Z')


def is_valid(email: str) -> bool:
    """
    Valida e-mail pelo formato

    Args:
        email: Endereço de e-mail

    Returns:
        True se válido, False caso contrário
    """
    if not isinstance(email, str):
        return False
    return EMAIL_PATTERN.match(email) is not None
