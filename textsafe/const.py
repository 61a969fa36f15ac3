"""Constants for the textsafe codecs."""

# Option keys
OPT_EXTRA_SAFE_CHARACTERS = "extra_safe_characters"
OPT_USE_REMAINDER = "use_remainder"
OPT_STRICT = "strict"

# Symbol range (0xFF is reserved and never treated as a symbol or safe byte)
MAX_SYMBOL = 0xFE
BYTE_VALUES = 256

# Alphabet limits
MIN_RADIX = 2
MAX_RADIX = MAX_SYMBOL + 1
MAX_BLOCK_SIZE = 64

# Escape defaults
DEFAULT_MAX_RUN_BLOCKS = 99
MIN_RUN_BLOCKS = 2
DECIMAL_DIGITS = "0123456789"

# Codec used to map literal bytes to characters and back
LITERAL_CODEC = "latin-1"
