"""Configuration constants for the array utilities."""

# Version
VERSION = "0.1.0"

# String forms used as count() keys
NULL_KEY = "null"
TRUE_KEY = "true"
FALSE_KEY = "false"
NAN_KEY = "NaN"
INFINITY_KEYS = {
    "Infinity": float("inf"),
    "+Infinity": float("inf"),
    "-Infinity": float("-inf"),
}
OBJECT_PLACEHOLDER = "[object]"

# Integral floats at or above this magnitude keep their exponent form
MAX_INTEGRAL_KEY = 1e21

# Radix prefixes accepted by numeric strings
RADIX_PREFIXES = {
    "0x": 16,
    "0o": 8,
    "0b": 2,
}

# Sequence types that are not treated as arrays
SEQUENCE_EXCLUDED_TYPES = (str, bytes, bytearray)
