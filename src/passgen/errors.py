from __future__ import annotations


class PassgenError(Exception):
    """Base class for all passgen errors."""


class ConfigurationError(PassgenError, ValueError):
    """Raised when the generator is configured with invalid values."""


class InvalidLengthError(ConfigurationError):
    """Raised when a requested password length is out of range."""

    def __init__(self, length: object, minimum: int, maximum: int) -> None:
        self.length = length
        msg = f'Length must be between {minimum} and {maximum}, got {length!r}.'
        super().__init__(msg)


class RandomSourceUnavailableError(PassgenError, RuntimeError):
    """Raised when the secure random source cannot supply entropy."""
