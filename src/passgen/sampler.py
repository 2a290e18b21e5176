from __future__ import annotations

import logging
import os

from typing import Callable, Final, Optional

from .errors import InvalidLengthError, RandomSourceUnavailableError

MIN_LENGTH: Final[int] = 1
MAX_LENGTH: Final[int] = 512

RandBytes = Callable[[int], bytes]

logger = logging.getLogger(__name__)


def validate_length(length: object) -> int:
    """
    Check that a password length lies within [MIN_LENGTH, MAX_LENGTH].

    Returns:
        The length as an int.

    Raises:
        InvalidLengthError: If the length is not an int or is out of range.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(length, MIN_LENGTH, MAX_LENGTH)
    if not MIN_LENGTH <= length <= MAX_LENGTH:
        raise InvalidLengthError(length, MIN_LENGTH, MAX_LENGTH)
    return length


def _read(randbytes: RandBytes, count: int) -> bytes:
    try:
        data = randbytes(count)
    except (OSError, NotImplementedError) as exc:
        msg = 'Secure random source is unavailable.'
        raise RandomSourceUnavailableError(msg) from exc

    if len(data) != count:
        msg = f'Secure random source returned {len(data)} of {count} bytes.'
        raise RandomSourceUnavailableError(msg)
    return data


def secure_index(size: int, randbytes: Optional[RandBytes] = None) -> int:
    """
    Return an integer drawn uniformly from [0, size).

    Random bytes are read big-endian into an integer in [0, 256**n).
    Values at or above the largest multiple of `size` in that range are
    rejected and redrawn, so `value % size` carries no modulo bias.

    Args:
        size: Number of possible outcomes, must be positive.
        randbytes: Entropy source taking a byte count; defaults to os.urandom.

    Raises:
        ValueError: If size is not positive.
        RandomSourceUnavailableError: If the entropy source fails.
    """
    if size < 1:
        msg = 'size must be positive.'
        raise ValueError(msg)

    source = randbytes or os.urandom
    num_bytes = max(1, ((size - 1).bit_length() + 7) // 8)
    span = 256 ** num_bytes
    limit = span - (span % size)

    while True:
        value = int.from_bytes(_read(source, num_bytes), 'big')
        if value < limit:
            return value % size


def sample(
    alphabet: str,
    length: int,
    randbytes: Optional[RandBytes] = None,
) -> str:
    """
    Draw `length` characters independently and uniformly from `alphabet`.

    The length is checked before any entropy is consumed.

    Raises:
        InvalidLengthError: If length is outside [MIN_LENGTH, MAX_LENGTH].
        ValueError: If the alphabet is empty.
        RandomSourceUnavailableError: If the entropy source fails.
    """
    length = validate_length(length)
    if not alphabet:
        msg = 'Alphabet must not be empty.'
        raise ValueError(msg)

    size = len(alphabet)
    logger.debug('Sampling %d characters from an alphabet of %d.', length, size)

    return ''.join(alphabet[secure_index(size, randbytes)] for _ in range(length))
