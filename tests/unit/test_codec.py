"""
Tests for the seeded base-128 Hangul codec.
"""

import unicodedata

import pytest

from hangulnum import (
    HANGUL_ALPHABET,
    HangulNumberCodec,
    InvalidNumberError,
    InvalidSeedError,
    TooShortError,
    UnknownSymbolError,
    digits,
    fixed_seed,
    split_symbols,
    symbol_count,
)
from hangulnum.config import MAX_VALUE

VALUES = [0, 1, 127, 128, 255, 1000, 12345, 16383, 16384, 1_000_000, MAX_VALUE // 2, MAX_VALUE]


def test_encode_decode_zero(codec):
    for seed in range(128):
        encoded = codec.encode_with_seed(0, seed)
        assert codec.decode(encoded) == 0


def test_encode_decode_various(codec):
    for num in VALUES:
        for seed in range(128):
            encoded = codec.encode_with_seed(num, seed)
            assert codec.decode(encoded) == num, f"Failed for num={num}, seed={seed}"


def test_zero_is_always_two_symbols(codec):
    for seed in range(128):
        encoded = codec.encode_with_seed(0, seed)
        assert symbol_count(encoded) == 2
        # the zero digit scrambles to the seed itself
        assert encoded == HANGUL_ALPHABET[seed] * 2


@pytest.mark.parametrize(
    "num, expected_digits",
    [
        (0, 1),
        (1, 1),
        (127, 1),
        (128, 2),
        (128**2 - 1, 2),
        (128**2, 3),
        (128**3, 4),
        (MAX_VALUE, 10),
    ],
)
def test_digit_count_is_minimal(codec, num, expected_digits):
    assert len(digits(num)) == expected_digits
    for seed in (0, 1, 64, 127):
        assert symbol_count(codec.encode_with_seed(num, seed)) == 1 + expected_digits


def test_digits_most_significant_first():
    assert digits(0) == [0]
    assert digits(128) == [1, 0]
    assert digits(12345) == [96, 57]
    assert digits(128**2 + 5) == [1, 0, 5]


def test_known_encodings(codec):
    assert codec.encode_with_seed(0, 0) == "가가"
    assert codec.encode_with_seed(0, 5) == "고고"
    assert codec.encode_with_seed(128, 0) == "가간가"
    assert codec.encode_with_seed(12345, 0) == "가크새"
    assert codec.encode_with_seed(12345, 1) == "간키서"


def test_scramble_wraps_around(codec):
    # digit 127 with seed 1 wraps to index 0
    assert codec.encode_with_seed(127, 1) == "간가"
    assert codec.decode("간가") == 127
    assert codec.encode_with_seed(127, 127) == "히" + HANGUL_ALPHABET[126]


def test_encode_with_seed_is_deterministic(codec):
    assert codec.encode_with_seed(987654321, 42) == codec.encode_with_seed(987654321, 42)


def test_all_128_encodings(codec):
    all_encodings = codec.encode_all(12345)
    assert len(all_encodings) == 128

    for seed, encoded in enumerate(all_encodings):
        assert encoded == codec.encode_with_seed(12345, seed)
        assert codec.decode(encoded) == 12345

    assert all_encodings[0] != all_encodings[1]
    assert len(set(all_encodings)) == 128


def test_seed_symbol_leads_every_encoding(codec):
    for seed, encoded in enumerate(codec.encode_all(424242)):
        assert split_symbols(encoded)[0] == HANGUL_ALPHABET[seed]


def test_encode_uses_seed_provider(codec):
    # the fixture codec always seeds with 7
    assert codec.encode(12345) == codec.encode_with_seed(12345, 7)
    assert codec.encode(12345, seed_provider=fixed_seed(3)) == codec.encode_with_seed(
        12345, 3
    )


def test_encode_default_provider_round_trips():
    codec = HangulNumberCodec()
    for num in VALUES:
        assert codec.decode(codec.encode(num)) == num


def test_encode_rejects_bad_provider_output(codec):
    with pytest.raises(InvalidSeedError):
        codec.encode(1, seed_provider=fixed_seed(128))


@pytest.mark.parametrize("seed", [128, 200, -1, 1.5, True, "3"])
def test_invalid_seed(codec, seed):
    with pytest.raises(InvalidSeedError) as exc_info:
        codec.encode_with_seed(100, seed)
    assert exc_info.value.seed == seed


@pytest.mark.parametrize("num", [-1, MAX_VALUE + 1, 1.0, "5", None, False])
def test_invalid_number(codec, num):
    with pytest.raises(InvalidNumberError):
        codec.encode_with_seed(num, 0)


def test_invalid_decode_too_short(codec):
    with pytest.raises(TooShortError) as exc_info:
        codec.decode("가")
    assert exc_info.value.length == 1

    with pytest.raises(TooShortError) as exc_info:
        codec.decode("")
    assert exc_info.value.length == 0

    with pytest.raises(TooShortError):
        codec.decode("   ")


def test_decode_unknown_digit_symbol(codec):
    with pytest.raises(UnknownSymbolError) as exc_info:
        codec.decode("가크A")
    assert exc_info.value.symbol == "A"
    assert exc_info.value.position == 2


def test_decode_unknown_seed_symbol(codec):
    # 힣 is a valid syllable but not part of the table
    with pytest.raises(UnknownSymbolError) as exc_info:
        codec.decode("힣가")
    assert exc_info.value.symbol == "힣"
    assert exc_info.value.position == 0


def test_decode_rejects_non_string(codec):
    with pytest.raises(TypeError):
        codec.decode(b"\xea\xb0\x80\xea\xb0\x80")


def test_decode_rejects_surrounding_whitespace(codec):
    """Whitespace is not in the alphabet, so it is an unknown symbol like any other."""
    with pytest.raises(UnknownSymbolError) as exc_info:
        codec.decode(" 가크새")
    assert exc_info.value.symbol == " "
    assert exc_info.value.position == 0

    with pytest.raises(UnknownSymbolError) as exc_info:
        codec.decode("가 ")
    assert exc_info.value.symbol == " "
    assert exc_info.value.position == 1

    with pytest.raises(UnknownSymbolError) as exc_info:
        codec.decode("가크새\n")
    assert exc_info.value.position == 3


def test_decode_decomposed_input(codec):
    """
    NFD input splits each syllable into jamo code points. The grapheme
    splitter keeps each syllable together so it still decodes.
    """
    encoded = codec.encode_with_seed(12345, 0)
    decomposed = unicodedata.normalize("NFD", encoded)
    assert len(decomposed) > len(encoded)
    assert split_symbols(decomposed) == split_symbols(encoded)
    assert codec.decode(decomposed) == 12345


def test_decode_values_beyond_encoding_range(codec):
    # eleven zero-scrambled digits exceed 64 bits; Python ints do not overflow
    text = "가" + "히" * 11
    assert codec.decode(text) == 128**11 - 1


def test_verify(codec):
    encoded = codec.encode_with_seed(777, 9)
    assert codec.verify(encoded, 777)
    assert not codec.verify(encoded, 778)
    assert not codec.verify("가", 0)
    assert not codec.verify("가A", 0)


def test_module_level_functions():
    import hangulnum

    encoded = hangulnum.encode_with_seed(12345, 0)
    assert encoded == "가크새"
    assert hangulnum.decode(encoded) == 12345
    assert hangulnum.decode(hangulnum.encode(12345)) == 12345
    assert len(hangulnum.encode_all(12345)) == 128
