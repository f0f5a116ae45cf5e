"""
Hangul Number - reversible base-128 number codec with seeded Hangul output.

Example Usage:
    from hangulnum import HangulNumberCodec

    codec = HangulNumberCodec()
    encoded = codec.encode_with_seed(12345, 0)   # 가크새
    codec.decode(encoded)                         # 12345

    variants = codec.encode_all(12345)           # 128 strings, all decode to 12345

Module-level encode/encode_all/encode_with_seed/decode use a shared default
codec built on the standard Hangul alphabet.
"""

from .alphabet import ALPHABET_GROUPS, HANGUL_ALPHABET
from .codec import HangulNumberCodec, digits, split_symbols, symbol_count
from .errors import (
    AlphabetError,
    HangulNumberError,
    InvalidNumberError,
    InvalidSeedError,
    TooShortError,
    UnknownSymbolError,
)
from .seeds import fixed_seed, random_seed, time_seed

__version__ = "0.1.0"
__author__ = "Hangul Number Team"
__description__ = "Reversible base-128 number codec with seeded Hangul output"

default_codec = HangulNumberCodec()

encode = default_codec.encode
encode_with_seed = default_codec.encode_with_seed
encode_all = default_codec.encode_all
decode = default_codec.decode

__all__ = [
    # Codec
    "HangulNumberCodec",
    "default_codec",
    "encode",
    "encode_with_seed",
    "encode_all",
    "decode",
    "digits",
    "split_symbols",
    "symbol_count",
    # Alphabet
    "HANGUL_ALPHABET",
    "ALPHABET_GROUPS",
    # Seed providers
    "time_seed",
    "random_seed",
    "fixed_seed",
    # Errors
    "HangulNumberError",
    "AlphabetError",
    "InvalidNumberError",
    "InvalidSeedError",
    "TooShortError",
    "UnknownSymbolError",
]
