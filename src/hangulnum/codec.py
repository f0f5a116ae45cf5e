"""
Hangul Number Codec

Reversible base-128 encoding of non-negative integers into strings of
Hangul syllables. The first symbol of every encoded string is a seed that
scrambles the digit symbols after it, so one number has 128 different
looking encodings that all decode to the same value.

Encoded layout:
    [seed symbol][digit symbol]...   (most significant digit first)

Algorithm Overview:
1. Split the number into base-128 digits, most significant first
   (zero is the single digit [0])
2. Scramble each digit: (digit + seed) mod 128
3. Map the seed and every scrambled digit to its alphabet symbol

Decoding reverses the steps: the seed symbol gives the offset, each
following symbol is unscrambled with (index - seed + 128) mod 128 and
accumulated big-endian.

The scramble is a plain modular offset. It obfuscates, it does not encrypt.
"""

import logging
import os
import threading
from typing import List, Mapping, Optional, Sequence

from .alphabet import (
    HANGUL_ALPHABET,
    build_reverse_map,
    split_graphemes,
    validate_alphabet,
)
from .config import (
    ALPHABET_SIZE,
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENV,
    MAX_VALUE,
    MIN_ENCODED_SYMBOLS,
)
from .errors import (
    AlphabetError,
    InvalidNumberError,
    InvalidSeedError,
    TooShortError,
    UnknownSymbolError,
)
from .seeds import SeedProvider, time_seed

# Guards the first-use handler setup on the shared logger.
_LOGGING_LOCK = threading.Lock()


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def digits(num: int) -> List[int]:
    """
    Minimal base-128 digits of num, most significant first.

    Zero is the single digit [0]; every other value has no leading zeros.
    """
    if num == 0:
        return [0]

    # least significant first, then flip
    result = []
    while num > 0:
        num, remainder = divmod(num, ALPHABET_SIZE)
        result.append(remainder)
    result.reverse()
    return result


def split_symbols(text: str) -> List[str]:
    """Split an encoded string into whole symbols (grapheme clusters)."""
    return split_graphemes(text)


def symbol_count(encoded: str) -> int:
    """Number of symbols in an encoded string, seed included."""
    return len(split_graphemes(encoded))


class HangulNumberCodec:
    """
    Encodes and decodes integers as seeded Hangul strings.

    The alphabet and its reverse map are fixed at construction and never
    mutated, so one instance can be shared freely between threads.
    """

    # Logger for codec operations
    _logger = logging.getLogger("hangulnum.codec")

    def __init__(
        self,
        alphabet: Sequence[str] = HANGUL_ALPHABET,
        seed_provider: Optional[SeedProvider] = None,
    ):
        """
        Initialize the codec.

        Args:
            alphabet: 128 distinct single-grapheme symbols, index = digit value
            seed_provider: Callable returning a seed for encode(); defaults
                to a time-derived seed

        Raises:
            AlphabetError: If the alphabet is malformed
        """
        try:
            validate_alphabet(alphabet)
        except AlphabetError as e:
            self._log("error", "Rejected alphabet", error=str(e))
            raise

        self._alphabet = tuple(alphabet)
        self._reverse_map = build_reverse_map(self._alphabet)
        self._seed_provider = seed_provider or time_seed

        self._log("debug", "Codec ready", symbols=len(self._alphabet))

    @staticmethod
    def _setup_logging():
        """Setup logging configuration for the codec."""
        if HangulNumberCodec._logger.handlers:
            return

        with _LOGGING_LOCK:
            if HangulNumberCodec._logger.handlers:
                return

            handler = logging.StreamHandler()

            level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
            HangulNumberCodec._logger.setLevel(
                getattr(logging, level, logging.WARNING)
            )

            formatter = logging.Formatter(
                "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
                datefmt="%H:%M:%S",
            )
            handler.setFormatter(formatter)
            HangulNumberCodec._logger.addHandler(handler)

    @staticmethod
    def _log(level: str, message: str, **kwargs):
        """Structured logging with optional context."""
        HangulNumberCodec._setup_logging()
        logger = HangulNumberCodec._logger
        if not logger.isEnabledFor(getattr(logging, level.upper(), logging.INFO)):
            return
        log_method = getattr(logger, level.lower(), logger.info)

        if kwargs:
            context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
            message = f"{message} | {context}"

        log_method(message)

    @staticmethod
    def set_log_level(level: str):
        """Override the level picked up from the environment."""
        HangulNumberCodec._setup_logging()
        HangulNumberCodec._logger.setLevel(
            getattr(logging, level.upper(), logging.WARNING)
        )

    @property
    def alphabet(self) -> Sequence[str]:
        return self._alphabet

    @property
    def reverse_map(self) -> Mapping[str, int]:
        return self._reverse_map

    def encode_with_seed(self, num: int, seed: int) -> str:
        """
        Encode a non-negative integer using a specific seed.

        Args:
            num: The number to encode (0 <= num <= 2^64 - 1)
            seed: The scramble seed (0~127)

        Returns:
            The encoded string (seed symbol + scrambled digit symbols)

        Raises:
            InvalidSeedError: If seed is outside [0, 128)
            InvalidNumberError: If num is negative, too large or not an int
        """
        if not _is_int(seed) or not 0 <= seed < ALPHABET_SIZE:
            raise InvalidSeedError(seed)
        if not _is_int(num) or not 0 <= num <= MAX_VALUE:
            raise InvalidNumberError(num)

        symbols = [self._alphabet[seed]]
        for d in digits(num):
            symbols.append(self._alphabet[(d + seed) % ALPHABET_SIZE])

        encoded = "".join(symbols)
        self._log("debug", "Encoded", num=num, seed=seed, encoded=encoded)
        return encoded

    def encode(self, num: int, seed_provider: Optional[SeedProvider] = None) -> str:
        """
        Encode a non-negative integer with a seed from the seed provider.

        The same number can come out different on every call, but every
        result decodes back to num.

        Args:
            num: The number to encode
            seed_provider: Overrides the codec's provider for this call
        """
        provider = seed_provider or self._seed_provider
        return self.encode_with_seed(num, provider())

    def encode_all(self, num: int) -> List[str]:
        """Return all 128 encodings of num, indexed by seed."""
        return [self.encode_with_seed(num, seed) for seed in range(ALPHABET_SIZE)]

    def decode(self, text: str) -> int:
        """
        Decode an encoded string back to its number.

        Args:
            text: The encoded string (first symbol is the seed)

        Returns:
            The decoded number

        Raises:
            TooShortError: If text has fewer than 2 symbols
            UnknownSymbolError: If a symbol is not in the alphabet
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")

        symbols = split_graphemes(text)
        if len(symbols) < MIN_ENCODED_SYMBOLS:
            raise TooShortError(len(symbols))

        seed = self._reverse_map.get(symbols[0])
        if seed is None:
            raise UnknownSymbolError(symbols[0], 0)

        num = 0
        for position, symbol in enumerate(symbols[1:], start=1):
            scrambled = self._reverse_map.get(symbol)
            if scrambled is None:
                raise UnknownSymbolError(symbol, position)
            original = (scrambled - seed + ALPHABET_SIZE) % ALPHABET_SIZE
            num = num * ALPHABET_SIZE + original

        self._log("debug", "Decoded", text=text, seed=seed, num=num)
        return num

    def verify(self, encoded: str, num: int) -> bool:
        """Check that encoded decodes to num; malformed input counts as a mismatch."""
        try:
            return self.decode(encoded) == num
        except (TooShortError, UnknownSymbolError):
            return False
