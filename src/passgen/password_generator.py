from __future__ import annotations

import logging

from dataclasses import dataclass
from typing import Final, Optional

from .charsets import build_alphabet, enabled_classes
from .sampler import RandBytes, sample, validate_length

DEFAULT_LENGTH: Final[int] = 36

logger = logging.getLogger(__name__)


@dataclass
class PasswordGenerator:
    """Generate random passwords based on the enabled character classes."""

    length: int = DEFAULT_LENGTH
    include_symbols: bool = True
    include_extended: bool = False
    allow_space: bool = False

    def __post_init__(self) -> None:
        validate_length(self.length)

    @property
    def alphabet(self) -> str:
        """The deduplicated characters passwords are drawn from."""
        return build_alphabet(
            self.include_symbols,
            self.include_extended,
            self.allow_space,
        )

    def generate_password(self, randbytes: Optional[RandBytes] = None) -> str:
        """
        Return a randomly generated password.

        Args:
            randbytes: Optional entropy source, defaults to os.urandom.

        Raises:
            InvalidLengthError: If length is outside the allowed range.
            RandomSourceUnavailableError: If the entropy source fails.
        """
        classes = enabled_classes(
            self.include_symbols,
            self.include_extended,
            self.allow_space,
        )
        logger.debug(
            'Enabled character classes: %s',
            ', '.join(cls.name for cls in classes),
        )
        return sample(self.alphabet, self.length, randbytes)


def generate_password(
    length: int = DEFAULT_LENGTH,
    include_symbols: bool = True,
    include_extended: bool = False,
    allow_space: bool = False,
) -> str:
    """Generate one password without building a PasswordGenerator by hand."""
    generator = PasswordGenerator(
        length=length,
        include_symbols=include_symbols,
        include_extended=include_extended,
        allow_space=allow_space,
    )
    return generator.generate_password()
