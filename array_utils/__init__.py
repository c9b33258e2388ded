"""Array Utils -- sum, duplicate detection and counting over flat sequences."""

from array_utils.aggregates import sum_values, find_duplicates, count
from array_utils.config import VERSION as __version__
from array_utils.errors import ArrayUtilsError, InvalidArgument, InvalidElement

sum = sum_values

__all__ = [
    "sum",
    "sum_values",
    "find_duplicates",
    "count",
    "ArrayUtilsError",
    "InvalidArgument",
    "InvalidElement",
]
