"""Utility modules for configuration, logging, and error handling."""

from .config import Config
from .errors import ClaimFormError, ConfigurationError, FormInputError

__all__ = [
    'Config',
    'ClaimFormError',
    'ConfigurationError',
    'FormInputError',
]
