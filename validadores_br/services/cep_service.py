"""
Serviço de consulta de CEP (ViaCEP)
Busca de endereço por CEP e de CEPs por endereço
"""

import logging
import unicodedata
from typing import Any, List, Optional
from urllib.parse import quote

import requests
from pydantic import ValidationError

from validadores_br.core.config import get_settings
from validadores_br.core.exceptions import CEPNotFound, InvalidCEP
from validadores_br.models.address import Address
from validadores_br.models.uf import UF
from validadores_br.validators import cep_validator

logger = logging.getLogger(__name__)


class CEPService:
    """Cliente do web service ViaCEP"""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[int] = None):
        settings = get_settings()
        self.settings = settings
        self.base_url = (base_url or settings.CEP_API_URL).rstrip("/")
        self.timeout = timeout or settings.CEP_TIMEOUT
        self.raise_exceptions_default = settings.CEP_RAISE_EXCEPTIONS

        logger.debug(f"CEPService inicializado - Base URL: {self.base_url}")

    def _strict(self, raise_exceptions: Optional[bool]) -> bool:
        if raise_exceptions is None:
            return self.raise_exceptions_default
        return raise_exceptions

    @staticmethod
    def _normalize_text(text: str) -> str:
        """Remove acentos e escapa o texto para uso no path da URL"""
        decomposed = unicodedata.normalize("NFD", str(text))
        ascii_text = decomposed.encode("ascii", "ignore").decode("ascii")
        return quote(ascii_text.strip())

    def _get_json(self, url: str) -> Any:
        """
        Executa o GET e retorna o JSON decodificado

        Raises:
            requests.exceptions.RequestException: Erro de rede ou HTTP
            ValueError: Corpo que não é JSON
        """
        response = requests.get(
            url,
            headers={"Accept": "application/json"},
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()

    def get_address_from_cep(
        self, cep: str, raise_exceptions: Optional[bool] = None
    ) -> Optional[Address]:
        """
        Busca o endereço de um CEP

        Args:
            cep: CEP (com ou sem formatação)
            raise_exceptions: Modo estrito; None usa CEP_RAISE_EXCEPTIONS

        Returns:
            Address | None: Endereço encontrado, ou None no modo não estrito

        Raises:
            InvalidCEP: CEP mal formado (modo estrito)
            CEPNotFound: CEP inexistente ou falha na consulta (modo estrito)
        """
        strict = self._strict(raise_exceptions)
        clean_cep = cep_validator.normalize(cep)

        if not cep_validator.is_valid(cep):
            logger.warning(f"⚠️ CEP inválido: {cep!r}")
            if strict:
                raise InvalidCEP(f"CEP '{cep}' é inválido")
            return None

        url = f"{self.base_url}/{clean_cep}/json/"
        try:
            data = self._get_json(url)
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"❌ Erro ao consultar CEP {clean_cep}: {e}")
            if strict:
                raise CEPNotFound(clean_cep) from e
            return None

        if not isinstance(data, dict) or data.get("erro"):
            logger.warning(f"⚠️ CEP não encontrado: {clean_cep}")
            if strict:
                raise CEPNotFound(clean_cep)
            return None

        try:
            address = Address(**data)
        except ValidationError as e:
            logger.error(f"❌ Resposta inesperada do ViaCEP para {clean_cep}: {e}")
            if strict:
                raise CEPNotFound(clean_cep) from e
            return None

        logger.debug(f"CEP {clean_cep} encontrado: {address.localidade}/{address.uf}")
        return address

    def get_cep_information_from_address(
        self,
        federal_unit: str,
        city: str,
        street: str,
        raise_exceptions: Optional[bool] = None,
    ) -> Optional[List[Address]]:
        """
        Busca CEPs a partir de UF, cidade e logradouro

        Args:
            federal_unit: Sigla ('SP') ou nome ('São Paulo') da UF
            city: Município
            street: Logradouro (ou parte dele)
            raise_exceptions: Modo estrito; None usa CEP_RAISE_EXCEPTIONS

        Returns:
            list[Address] | None: Endereços encontrados

        Raises:
            ValueError: UF inválida (modo estrito)
            CEPNotFound: Nenhum endereço ou falha na consulta (modo estrito)
        """
        strict = self._strict(raise_exceptions)

        uf = UF.from_code(federal_unit) or UF.from_name(federal_unit)
        if uf is None:
            logger.warning(f"⚠️ UF inválida: {federal_unit!r}")
            if strict:
                raise ValueError(f"UF inválida: {federal_unit}")
            return None

        description = f"{federal_unit} - {city} - {street}"
        url = (
            f"{self.base_url}/{uf.value}/"
            f"{self._normalize_text(city)}/{self._normalize_text(street)}/json/"
        )

        try:
            data = self._get_json(url)
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"❌ Erro ao consultar endereço {description}: {e}")
            if strict:
                raise CEPNotFound(description) from e
            return None

        if not isinstance(data, list) or not data:
            logger.warning(f"⚠️ Nenhum CEP encontrado para {description}")
            if strict:
                raise CEPNotFound(description)
            return None

        try:
            addresses = [Address(**item) for item in data if isinstance(item, dict)]
        except ValidationError as e:
            logger.error(f"❌ Resposta inesperada do ViaCEP para {description}: {e}")
            if strict:
                raise CEPNotFound(description) from e
            return None

        logger.debug(f"{len(addresses)} endereço(s) encontrado(s) para {description}")
        return addresses


# Instância global do serviço (recriada quando a configuração muda)
_cep_service: Optional[CEPService] = None


def get_cep_service() -> CEPService:
    global _cep_service
    if _cep_service is None or _cep_service.settings is not get_settings():
        _cep_service = CEPService()
    return _cep_service


def get_address_from_cep(cep: str, raise_exceptions: Optional[bool] = None) -> Optional[Address]:
    """Função de conveniência para busca de endereço por CEP"""
    return get_cep_service().get_address_from_cep(cep, raise_exceptions=raise_exceptions)


def get_cep_information_from_address(
    federal_unit: str,
    city: str,
    street: str,
    raise_exceptions: Optional[bool] = None,
) -> Optional[List[Address]]:
    """Função de conveniência para busca de CEPs por endereço"""
    return get_cep_service().get_cep_information_from_address(
        federal_unit, city, street, raise_exceptions=raise_exceptions
    )
