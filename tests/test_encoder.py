# SPDX-License-Identifier: MIT
"""Tests for :mod:`shuffleid.core.encoder`."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from shuffleid import IdEncoder, OutOfRangeError, RegenerationExhaustedError
from shuffleid.constants import DEFAULT_ALPHABET, MAX_VALUE
from shuffleid.core.alphabet import working_alphabet


@pytest.fixture(scope="module")
def encoder() -> IdEncoder:
    return IdEncoder()


@pytest.mark.parametrize(
    ("number", "expected"),
    [
        (0, "bM"),
        (1, "Uk"),
        (2, "gb"),
        (3, "Ef"),
        (4, "Vq"),
        (5, "uw"),
        (6, "OI"),
        (7, "AX"),
        (8, "p6"),
        (9, "nJ"),
    ],
)
def test_single_numbers_match_reference_ids(encoder, number, expected) -> None:
    assert encoder.encode([number]) == expected
    assert encoder.encode_one(number) == expected
    assert encoder.decode(expected) == [number]


@pytest.mark.parametrize(
    ("numbers", "expected"),
    [
        ([1, 2, 3], "86Rf07"),
        ([0, 0], "SvIz"),
        ([0, 1], "n3qa"),
        ([0, 2], "tryF"),
        ([0, 3], "eg6q"),
        ([0, 4], "rSCF"),
        ([0, 5], "sR8x"),
        ([0, 6], "uY2M"),
        ([0, 7], "74dI"),
        ([0, 8], "30WX"),
        ([0, 9], "moxr"),
        ([1, 0], "nWqP"),
        ([2, 0], "tSyw"),
        ([3, 0], "eX68"),
        ([4, 0], "rxCY"),
        ([5, 0], "sV8a"),
        ([6, 0], "uf2K"),
        ([7, 0], "7Cdk"),
        ([8, 0], "3aWP"),
        ([9, 0], "m2xn"),
    ],
)
def test_multiple_numbers_match_reference_ids(encoder, numbers, expected) -> None:
    assert encoder.encode(numbers) == expected
    assert encoder.decode(expected) == numbers


def test_encode_accepts_any_iterable(encoder) -> None:
    assert encoder.encode((1, 2, 3)) == "86Rf07"
    assert encoder.encode(range(1, 4)) == "86Rf07"
    assert encoder.encode(n for n in [1, 2, 3]) == "86Rf07"


def test_empty_input_round_trips(encoder) -> None:
    assert encoder.encode([]) == ""
    assert encoder.decode("") == []
    assert encoder.decode(None) == []


@pytest.mark.parametrize(
    "numbers",
    [
        [0, 0, 0, 1, 2, 3, 100, 1_000, 100_000, 1_000_000, MAX_VALUE],
        list(range(100)),
    ],
)
def test_long_sequences_round_trip(encoder, numbers) -> None:
    assert encoder.decode(encoder.encode(numbers)) == numbers


@pytest.mark.parametrize("number", [-1, MAX_VALUE + 1])
def test_out_of_range_numbers_raise(encoder, number) -> None:
    with pytest.raises(OutOfRangeError) as info:
        encoder.encode([1, number])
    assert info.value.value == number
    assert info.value.maximum == MAX_VALUE


def test_non_integers_raise_type_error(encoder) -> None:
    with pytest.raises(TypeError):
        encoder.encode([1.5])
    with pytest.raises(TypeError):
        encoder.encode(["1"])


def test_decode_rejects_foreign_characters(encoder) -> None:
    assert encoder.decode("*") == []
    assert encoder.decode("86Rf07*") == []
    assert encoder.decode("86 Rf07") == []


def test_decode_prefix_only_yields_nothing(encoder) -> None:
    assert encoder.decode(encoder.encode([7])[0]) == []


def test_decode_treats_oversized_values_as_malformed(encoder) -> None:
    prefix = encoder.encode([0])[0]
    _, working = working_alphabet(encoder.alphabet, encoder.alphabet.index(prefix))
    # The last working character is the largest digit and never the separator.
    assert encoder.decode(prefix + working[-1] * 20) == []


def test_simple_min_length() -> None:
    encoder = IdEncoder(min_length=10)
    assert encoder.encode([1, 2, 3]) == "86Rf07xd4z"
    assert encoder.decode("86Rf07xd4z") == [1, 2, 3]


def test_min_length_pads_single_number() -> None:
    encoder = IdEncoder(min_length=10)
    id_ = encoder.encode([1])
    assert len(id_) == 10
    assert encoder.decode(id_) == [1]


@pytest.mark.parametrize("min_length", [0, 1, 5, 10, len(DEFAULT_ALPHABET), 200, 255])
@pytest.mark.parametrize(
    "numbers",
    [[0], [0, 0, 0, 0, 0], [1, 2, 3, 4, 5, 6, 7, 8, 9, 10], [100, 200, 300], [MAX_VALUE]],
)
def test_min_length_is_honoured(min_length, numbers) -> None:
    encoder = IdEncoder(min_length=min_length)
    id_ = encoder.encode(numbers)
    assert len(id_) >= min_length
    assert encoder.decode(id_) == numbers


def test_custom_alphabet() -> None:
    encoder = IdEncoder(
        alphabet="FxnXM1kBN6cuhsAvjW3Co7l2RePyY8DwaU04Tzt9fHQrqSVKdpimLGIJOgb5ZE"
    )
    assert encoder.encode([1, 2, 3]) == "B4aajs"
    assert encoder.decode("B4aajs") == [1, 2, 3]


def test_hex_alphabet() -> None:
    encoder = IdEncoder(alphabet="0123456789abcdef")
    assert encoder.encode([1, 2, 3]) == "489158"
    assert encoder.decode("489158") == [1, 2, 3]


def test_shortest_alphabet_round_trips() -> None:
    encoder = IdEncoder(alphabet="abc")
    numbers = [1, 2, 3]
    assert encoder.decode(encoder.encode(numbers)) == numbers


def test_printable_ascii_alphabet_round_trips() -> None:
    alphabet = "".join(chr(code) for code in range(33, 127))
    encoder = IdEncoder(alphabet=alphabet)
    numbers = [1, 2, 3]
    assert encoder.decode(encoder.encode(numbers)) == numbers


def test_default_blocklist_regenerates_ids(encoder) -> None:
    assert encoder.decode("aho1e") == [4572721]
    assert encoder.encode([4572721]) == "JExTR"


def test_empty_blocklist_disables_blocking() -> None:
    encoder = IdEncoder(blocklist=[])
    assert encoder.decode("aho1e") == [4572721]
    assert encoder.encode([4572721]) == "aho1e"


def test_custom_blocklist_replaces_default() -> None:
    encoder = IdEncoder(blocklist=["ArUO"])
    assert encoder.encode([4572721]) == "aho1e"
    assert encoder.decode("ArUO") == [100000]
    assert encoder.encode([100000]) == "QyG4"
    assert encoder.decode("QyG4") == [100000]


def test_blocked_id_is_regenerated() -> None:
    encoder = IdEncoder(blocklist=["86Rf07"])
    assert encoder.encode([1, 2, 3]) == "se8ojk"
    assert encoder.decode("se8ojk") == [1, 2, 3]


def test_blocked_ids_still_decode() -> None:
    blocked = ["86Rf07", "se8ojk", "ARsz1p", "Q8AI49", "5sQRZO"]
    encoder = IdEncoder(blocklist=blocked)
    for id_ in blocked:
        assert encoder.decode(id_) == [1, 2, 3]


def test_short_blocklist_word_round_trips() -> None:
    encoder = IdEncoder(blocklist=["pnd"])
    assert encoder.decode(encoder.encode([1000])) == [1000]


def test_blocklist_words_are_matched_case_insensitively() -> None:
    encoder = IdEncoder(alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZ", blocklist=["sxnzkl"])
    assert encoder.encode([1, 2, 3]) == "IBSHOZ"
    assert encoder.decode("IBSHOZ") == [1, 2, 3]


def test_regeneration_is_bounded() -> None:
    encoder = IdEncoder(alphabet="abc", min_length=3, blocklist=["cab", "abc", "bca"])
    with pytest.raises(RegenerationExhaustedError) as info:
        encoder.encode([0])
    assert info.value.attempts == 4


def test_configuration_is_exposed() -> None:
    encoder = IdEncoder(min_length=4, blocklist=["Word", "WORD", "no"])
    assert sorted(encoder.alphabet) == sorted(DEFAULT_ALPHABET)
    assert encoder.min_length == 4
    assert encoder.blocklist == ("Word",)


def test_identical_options_produce_identical_ids() -> None:
    first = IdEncoder(min_length=8)
    second = IdEncoder(min_length=8)
    for numbers in ([0], [1, 2, 3], [MAX_VALUE, 0]):
        assert first.encode(numbers) == second.encode(numbers)


def test_calls_do_not_mutate_base_alphabet(encoder) -> None:
    before = encoder.alphabet
    encoder.encode([1, 2, 3, 4, 5])
    encoder.decode("86Rf07")
    assert encoder.alphabet == before


def test_shared_encoder_is_thread_safe(encoder) -> None:
    inputs = [[i, i * 7, i * 13] for i in range(200)]
    expected = [encoder.encode(numbers) for numbers in inputs]
    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(encoder.encode, inputs))
        decoded = list(pool.map(encoder.decode, ids))
    assert ids == expected
    assert decoded == inputs
