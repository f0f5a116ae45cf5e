# Shared application constants

ALPHABET_SIZE = 128

# Largest value the codec accepts for encoding (unsigned 64-bit range).
MAX_VALUE = 2**64 - 1

# Seed symbol plus at least one digit symbol.
MIN_ENCODED_SYMBOLS = 2

# --- Logging Configuration ---
LOG_LEVEL_ENV = "HANGULNUM_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

# --- CLI Configuration ---
# Encodings per row when printing all 128 variants.
GRID_COLUMNS = 8
