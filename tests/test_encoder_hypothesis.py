# SPDX-License-Identifier: MIT
"""Property-based tests for :class:`shuffleid.IdEncoder`."""

from functools import lru_cache

from hypothesis import given, settings
from hypothesis import strategies as st

from shuffleid import IdEncoder
from shuffleid.constants import MAX_VALUE

numbers_strategy = st.lists(st.integers(min_value=0, max_value=MAX_VALUE), max_size=8)
alphabets = st.sampled_from(
    [
        "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789",
        "0123456789abcdef",
        "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
        "".join(chr(code) for code in range(33, 127)),
    ]
)


@lru_cache(maxsize=None)
def _encoder(alphabet: str, min_length: int) -> IdEncoder:
    return IdEncoder(alphabet=alphabet, min_length=min_length)


@given(numbers=numbers_strategy, alphabet=alphabets, min_length=st.integers(0, 40))
@settings(deadline=None)
def test_round_trip(numbers, alphabet, min_length) -> None:
    encoder = _encoder(alphabet, min_length)
    assert encoder.decode(encoder.encode(numbers)) == numbers


@given(numbers=numbers_strategy.filter(bool), alphabet=alphabets)
@settings(deadline=None)
def test_ids_only_use_alphabet_characters(numbers, alphabet) -> None:
    id_ = _encoder(alphabet, 0).encode(numbers)
    assert set(id_) <= set(alphabet)


@given(numbers=numbers_strategy.filter(bool), min_length=st.integers(0, 255))
@settings(deadline=None, max_examples=50)
def test_min_length_law(numbers, min_length) -> None:
    id_ = _encoder(
        "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789", min_length
    ).encode(numbers)
    assert len(id_) >= min_length


@given(numbers=numbers_strategy)
def test_independent_encoders_agree(numbers) -> None:
    assert IdEncoder().encode(numbers) == _encoder(
        "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789", 0
    ).encode(numbers)


@given(id_=st.text(max_size=20))
def test_decode_never_raises(id_) -> None:
    decoded = _encoder("0123456789abcdef", 0).decode(id_)
    assert all(0 <= value <= MAX_VALUE for value in decoded)
