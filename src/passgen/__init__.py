"""Generate random passwords from a secure random source."""

from __future__ import annotations

from .charsets import CharacterClass, build_alphabet, enabled_classes
from .errors import (
    ConfigurationError,
    InvalidLengthError,
    PassgenError,
    RandomSourceUnavailableError,
)
from .password_generator import PasswordGenerator, generate_password
from .sampler import sample, secure_index

__version__ = '1.1.0'

__all__ = [
    'CharacterClass',
    'ConfigurationError',
    'InvalidLengthError',
    'PassgenError',
    'PasswordGenerator',
    'RandomSourceUnavailableError',
    '__version__',
    'build_alphabet',
    'enabled_classes',
    'generate_password',
    'sample',
    'secure_index',
]
