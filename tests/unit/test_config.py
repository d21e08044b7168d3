# -*- coding: utf-8 -*-
"""
Testes unitários para configuração e logging
"""

import logging
import os
import pytest
from pathlib import Path
from pydantic import ValidationError
from unittest.mock import patch

from validadores_br.core.config import Settings, get_settings
from validadores_br.core.logging_config import PACKAGE_LOGGERS, configure_logging


@pytest.mark.unit
class TestSettings:
    """Testes para a classe Settings"""

    @patch.dict(os.environ, {}, clear=True)
    def test_default_configuration(self):
        """Testa configuração padrão quando não há variáveis de ambiente"""
        config = Settings(_env_file=None)

        assert config.ENVIRONMENT == 'local'
        assert config.LOG_LEVEL == 'INFO'
        assert config.CEP_API_URL == 'https://viacep.com.br/ws'
        assert config.CEP_TIMEOUT == 10
        assert config.CEP_RAISE_EXCEPTIONS is False
        assert config.LEGAL_PROCESS_TABLE_PATH is None

    @patch.dict(os.environ, {
        'ENVIRONMENT': 'production',
        'LOG_LEVEL': 'debug',
        'CEP_API_URL': 'http://cep.local/ws/',
        'CEP_TIMEOUT': '3',
        'CEP_RAISE_EXCEPTIONS': 'true',
        'LEGAL_PROCESS_TABLE_PATH': '/tmp/tabela.json',
    })
    def test_environment_configuration(self):
        """Testa configuração através de variáveis de ambiente"""
        config = Settings(_env_file=None)

        assert config.is_production() is True
        assert config.is_development() is False
        assert config.LOG_LEVEL == 'DEBUG'
        assert config.CEP_API_URL == 'http://cep.local/ws'
        assert config.CEP_TIMEOUT == 3
        assert config.CEP_RAISE_EXCEPTIONS is True
        assert config.LEGAL_PROCESS_TABLE_PATH == Path('/tmp/tabela.json')

    @patch.dict(os.environ, {'LOG_LEVEL': 'VERBOSE'})
    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @patch.dict(os.environ, {'CEP_TIMEOUT': '0'})
    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("ENVIRONMENT=development\nCEP_TIMEOUT=7\n", encoding="utf-8")

        with patch.dict(os.environ, {}, clear=True):
            config = Settings(_env_file=env_file)

        assert config.is_development() is True
        assert config.CEP_TIMEOUT == 7

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


@pytest.mark.unit
class TestConfigureLogging:
    """Testes para configure_logging"""

    def test_sets_package_levels(self):
        with patch.dict(os.environ, {'LOG_LEVEL': 'WARNING'}):
            configure_logging(Settings(_env_file=None))

        for name in PACKAGE_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING

    def test_urllib3_not_below_warning(self):
        with patch.dict(os.environ, {'LOG_LEVEL': 'DEBUG'}):
            configure_logging(Settings(_env_file=None))

        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_returns_logger(self):
        logger = configure_logging()
        assert isinstance(logger, logging.Logger)
