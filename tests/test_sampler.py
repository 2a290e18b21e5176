from __future__ import annotations

import itertools
import os

from collections import Counter

import pytest

from passgen.errors import (
    ConfigurationError,
    InvalidLengthError,
    RandomSourceUnavailableError,
)
from passgen.sampler import MAX_LENGTH, sample, secure_index

# Chi-squared critical value for 9 degrees of freedom at p = 0.001.
CHI2_CRITICAL_DF9 = 27.877


class CountingSource:
    """Wrap os.urandom and record how many times it was called."""

    def __init__(self):
        self.calls = 0

    def __call__(self, count):
        self.calls += 1
        return os.urandom(count)


def broken_source(count):
    raise OSError('no entropy')


@pytest.mark.parametrize('length', [1, 2, 36, 511, MAX_LENGTH])
def test_sample_length_and_membership(length):
    alphabet = 'abcXYZ019!'
    password = sample(alphabet, length)

    assert len(password) == length
    assert set(password) <= set(alphabet)


@pytest.mark.parametrize('length', [0, -1, MAX_LENGTH + 1, 1.5, True, '10'])
def test_invalid_length_rejected_before_sampling(length):
    source = CountingSource()

    with pytest.raises(InvalidLengthError) as excinfo:
        sample('abc', length, randbytes=source)

    assert isinstance(excinfo.value, ConfigurationError)
    assert excinfo.value.length == length
    assert source.calls == 0


def test_empty_alphabet_rejected():
    with pytest.raises(ValueError):
        sample('', 5)


def test_single_character_alphabet():
    assert sample('x', 8) == 'xxxxxxxx'


def test_broken_source_raises_unavailable():
    with pytest.raises(RandomSourceUnavailableError) as excinfo:
        sample('abc', 4, randbytes=broken_source)

    assert isinstance(excinfo.value.__cause__, OSError)


def test_short_read_raises_unavailable():
    with pytest.raises(RandomSourceUnavailableError):
        secure_index(10, randbytes=lambda count: b'')


def test_rejection_sampling_is_exactly_uniform():
    # Byte values 0..254 map evenly onto 3; 255 would be rejected.
    stream = iter(range(256))

    def exhaustive(count):
        return bytes([next(stream)])

    counts = Counter(secure_index(3, exhaustive) for _ in range(255))

    assert counts == {0: 85, 1: 85, 2: 85}


def test_values_above_limit_are_redrawn():
    # 250 is the first value rejected for size 10 (limit 250).
    stream = iter([250, 255, 7])

    def source(count):
        return bytes([next(stream)])

    assert secure_index(10, source) == 7


def test_large_size_reads_multiple_bytes():
    requested = []

    def source(count):
        requested.append(count)
        return b'\x01\x00'

    assert secure_index(300, source) == 256
    assert requested == [2]


def test_secure_index_rejects_nonpositive_size():
    with pytest.raises(ValueError):
        secure_index(0)


def test_draws_are_uniform_chi_squared():
    alphabet = '0123456789'
    draws = 200_000
    counts = Counter(
        itertools.chain.from_iterable(
            sample(alphabet, MAX_LENGTH) for _ in range(draws // MAX_LENGTH)
        )
    )
    total = sum(counts.values())
    expected = total / len(alphabet)
    chi2 = sum((counts[ch] - expected) ** 2 / expected for ch in alphabet)

    assert set(counts) == set(alphabet)
    assert chi2 < CHI2_CRITICAL_DF9
