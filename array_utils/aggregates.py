"""Summation, duplicate detection and frequency counting over flat sequences."""

from __future__ import annotations

import logging
from typing import Any

from array_utils.coercion import to_number
from array_utils.errors import InvalidElement, NotNumeric
from array_utils.keys import identity_key, to_key
from array_utils.sequences import as_sequence

logger = logging.getLogger(__name__)


def sum_values(items) -> float:
    """Sum numeric values (numbers or numeric strings) left to right.

    Elements are coerced with coercion.to_number, so None, booleans and
    blank strings contribute 0 or 1 rather than failing.

    Args:
        items: Sequence of numbers or numeric strings, e.g. [1, "2.5", 3]

    Returns:
        The IEEE-754 float total, 0.0 for an empty sequence.

    Raises:
        InvalidArgument: items is not a sequence.
        InvalidElement: an element is not numeric; carries its index.
    """
    items = as_sequence(items, "sum")

    total = 0.0
    for index, value in enumerate(items):
        try:
            number = to_number(value)
        except NotNumeric as exc:
            logger.debug("sum rejected element %d: %s", index, exc)
            raise InvalidElement(index, value) from exc
        total += number
    return total


def find_duplicates(items) -> list[Any]:
    """Return the values that appear more than once in items.

    Each duplicate appears once, ordered by its first occurrence in the
    input. Lists, dicts and other unhashable values are matched by
    identity, so two equal but distinct lists are not duplicates.

    Note that find_duplicates(find_duplicates(x)) is usually empty: a
    value seen twice in x is seen once in the result.

    Args:
        items: Sequence of values, e.g. [1, 2, 2, 3, 1]

    Returns:
        New list of duplicate values, e.g. [1, 2]
    """
    items = as_sequence(items, "find_duplicates")

    tally: dict[Any, int] = {}
    pending = set()
    for item in items:
        key = identity_key(item)
        seen = tally.get(key, 0) + 1
        tally[key] = seen
        if seen == 2:
            pending.add(key)

    result = []
    for item in items:
        if not pending:
            break
        key = identity_key(item)
        if key in pending:
            result.append(item)
            pending.discard(key)

    logger.debug(
        "find_duplicates: %d items, %d distinct, %d duplicated",
        len(items), len(tally), len(result),
    )
    return result


def count(items) -> dict[str, int]:
    """Count occurrences of each value, keyed by its string form.

    Keys come from keys.to_key, so 1, 1.0 and "1" share the key "1" and
    objects without their own __str__ all land on "[object]".

    Args:
        items: Sequence of values, e.g. [1, 1, 2, "2"]

    Returns:
        Dict of key -> count in first-seen order, e.g. {"1": 2, "2": 2}
    """
    items = as_sequence(items, "count")

    counts: dict[str, int] = {}
    for item in items:
        key = to_key(item)
        counts[key] = counts.get(key, 0) + 1

    logger.debug("count: %d items, %d keys", len(items), len(counts))
    return counts
