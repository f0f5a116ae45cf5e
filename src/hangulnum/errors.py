"""
Exception hierarchy for the Hangul number codec.
"""


class HangulNumberError(ValueError):
    """Base exception for codec errors"""

    pass


class AlphabetError(HangulNumberError):
    """The symbol table is malformed (wrong size, duplicates, multi-grapheme entries)"""

    pass


class InvalidNumberError(HangulNumberError):
    """Value is not an integer in the supported unsigned range"""

    def __init__(self, value, message=None):
        self.value = value
        super().__init__(message or f"Number must be an integer in [0, 2^64 - 1], got {value!r}")


class InvalidSeedError(HangulNumberError):
    """Seed outside [0, 128)"""

    def __init__(self, seed):
        self.seed = seed
        super().__init__(f"Seed must be between 0 and 127, got {seed!r}")


class TooShortError(HangulNumberError):
    """Encoded string has fewer than two symbols"""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Invalid string: must be at least 2 characters, got {length}"
        )


class UnknownSymbolError(HangulNumberError):
    """A symbol in the encoded string is not part of the alphabet"""

    def __init__(self, symbol: str, position: int):
        self.symbol = symbol
        self.position = position
        kind = "seed character" if position == 0 else "character"
        super().__init__(f"Invalid {kind} at position {position}: {symbol!r}")
