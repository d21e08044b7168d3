"""
Core: configuração, logging e exceções
"""

from .config import Settings, get_settings, settings
from .exceptions import (
    ValidadoresBrError,
    FormatError,
    ReferenceDataUnavailable,
    ExternalLookupFailure,
    InvalidCEP,
    CEPNotFound,
)
from .logging_config import configure_logging

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "configure_logging",
    "ValidadoresBrError",
    "FormatError",
    "ReferenceDataUnavailable",
    "ExternalLookupFailure",
    "InvalidCEP",
    "CEPNotFound",
]
