from __future__ import annotations

import string

from enum import Enum
from typing import List


class CharacterClass(Enum):
    """Named, fixed sets of characters a password may be drawn from."""

    ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits
    SYMBOLS = '!@#$%^&*()-_=+[]{}|;:,.<>?'
    EXTENDED_SYMBOLS = '`"\'/\\'
    SPACE = ' '

    @property
    def characters(self) -> str:
        return self.value


def enabled_classes(
    include_symbols: bool = True,
    include_extended: bool = False,
    allow_space: bool = False,
) -> List[CharacterClass]:
    """
    Return the character classes selected by the given flags.

    ALPHANUMERIC is always first and always present.
    """
    classes = [CharacterClass.ALPHANUMERIC]

    if include_symbols:
        classes.append(CharacterClass.SYMBOLS)
    if include_extended:
        classes.append(CharacterClass.EXTENDED_SYMBOLS)
    if allow_space:
        classes.append(CharacterClass.SPACE)

    return classes


def build_alphabet(
    include_symbols: bool = True,
    include_extended: bool = False,
    allow_space: bool = False,
) -> str:
    """
    Build the sampling alphabet for the selected character classes.

    Args:
        include_symbols: Include the standard symbol set.
        include_extended: Include quotes, backtick and slashes.
        allow_space: Include the space character.

    Returns:
        The characters of every enabled class, in class order, with
        duplicates removed (first occurrence wins). Never empty.
    """
    classes = enabled_classes(include_symbols, include_extended, allow_space)
    joined = ''.join(cls.characters for cls in classes)
    return ''.join(dict.fromkeys(joined))
