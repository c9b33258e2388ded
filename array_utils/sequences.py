"""Input validation shared by every operation."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import numpy as np

from array_utils.config import SEQUENCE_EXCLUDED_TYPES
from array_utils.errors import InvalidArgument

logger = logging.getLogger(__name__)


def as_sequence(items: Any, operation: str) -> Sequence:
    """Return items as an indexable sequence or raise InvalidArgument.

    Lists and tuples pass through untouched; other Sequence types and
    one-dimensional numpy arrays are copied into a list. Strings and
    bytes are sequences to Python but not arrays here.
    """
    if isinstance(items, (list, tuple)):
        return items

    if isinstance(items, np.ndarray):
        if items.ndim != 1:
            logger.debug("%s rejected %d-dimensional array", operation, items.ndim)
            raise InvalidArgument(operation, items)
        return items.tolist()

    if isinstance(items, Sequence) and not isinstance(items, SEQUENCE_EXCLUDED_TYPES):
        return list(items)

    logger.debug("%s rejected argument of type %s", operation, type(items).__name__)
    raise InvalidArgument(operation, items)
