"""Pure predicates behind the built-in guard checks.

None of these know about guards or absence handling; they take a present
value and answer a yes/no question about it.
"""

from __future__ import annotations

import datetime as dt
import math
import re
from collections.abc import Callable, Hashable, Iterable, Mapping, Sequence
from typing import Any

import msgspec

__all__ = [
    'MAX_SAFE_INTEGER',
    'MIN_SAFE_INTEGER',
    'contains',
    'distinct',
    'has_length',
    'has_unique_entries',
    'is_absent',
    'is_array',
    'is_date',
    'is_iso_datetime',
    'is_not_blank',
    'is_not_empty',
    'is_number',
    'is_object',
    'is_safe_integer',
    'is_string',
    'strict_equals',
]

MAX_SAFE_INTEGER = 2**53 - 1
MIN_SAFE_INTEGER = -MAX_SAFE_INTEGER

# Largest distance from the epoch, in milliseconds, that still denotes a valid instant.
_MAX_EPOCH_MILLIS = 8.64e15

# Year and year-month forms; fromisoformat wants at least a full date.
_REDUCED_DATE = re.compile(r'^(\d{4})(?:-(\d{2}))?\Z')

_ARRAY_TYPES = (list, tuple)
_SCALAR_TYPES = (str, bytes, int, float)


def is_absent(value: Any) -> bool:
    """True for None and for msgspec's UNSET marker of an omitted field."""
    return value is None or value is msgspec.UNSET


def is_array(value: Any) -> bool:
    return isinstance(value, _ARRAY_TYPES)


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_number(value: Any) -> bool:
    """True for ints and floats; bools are not numbers here."""
    return isinstance(value, int | float) and not isinstance(value, bool)


def is_date(value: Any) -> bool:
    return isinstance(value, dt.date)


def has_length(value: Any) -> bool:
    return is_string(value) or is_array(value)


def is_safe_integer(value: Any) -> bool:
    """True for whole numbers that survive a round trip through a double."""
    if not is_number(value):
        return False
    if isinstance(value, float) and not (math.isfinite(value) and value.is_integer()):
        return False
    return MIN_SAFE_INTEGER <= value <= MAX_SAFE_INTEGER


def strict_equals(left: Any, right: Any) -> bool:
    """Primitive equality without deep comparison.

    Scalars compare by value (ints and floats numerically, bools only with
    bools, str and bytes only with their own type). Everything else compares
    by identity.
    """
    if left is right:
        return True
    if not (isinstance(left, _SCALAR_TYPES) and isinstance(right, _SCALAR_TYPES)):
        return False
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if is_number(left) and is_number(right):
        return left == right
    return type(left) is type(right) and left == right


def contains(values: Iterable[Any], value: Any) -> bool:
    return any(strict_equals(value, candidate) for candidate in values)


def is_not_empty(value: Any) -> bool:
    """Strings, arrays and mappings must have content; other values pass."""
    if has_length(value) or is_object(value):
        return len(value) > 0
    return True


def is_not_blank(value: Any) -> bool:
    return is_string(value) and len(value.strip()) > 0


def is_iso_datetime(value: Any) -> bool:
    """True if ``value`` denotes a valid instant.

    Strings must parse with ``datetime.fromisoformat`` or be a reduced
    ``YYYY`` / ``YYYY-MM`` date; numbers are taken as epoch milliseconds and
    must be finite and in range; date and datetime instances are always valid.
    """
    if is_date(value):
        return True
    if is_number(value):
        return math.isfinite(value) and abs(value) <= _MAX_EPOCH_MILLIS
    if not is_string(value):
        return False
    reduced = _REDUCED_DATE.match(value)
    try:
        if reduced is not None:
            year, month = reduced.groups()
            dt.date(int(year), int(month or 1), 1)
        else:
            dt.datetime.fromisoformat(value)
    except ValueError:
        return False
    return True


def _identity_key(key: Any) -> Hashable:
    # bool is kept apart from 1/0; every NaN is one key; unhashable keys fall back to object identity
    if isinstance(key, bool):
        return (bool, key)
    if is_number(key):
        if isinstance(key, float) and math.isnan(key):
            return (float, 'nan')
        return (float, key)
    if isinstance(key, Hashable):
        try:
            hash(key)
        except TypeError:
            return (id, id(key))
        return (object, key)
    return (id, id(key))


def distinct[T](items: Iterable[T], key: Callable[[T], Any] | None = None) -> list[T]:
    """Return one item per distinct key, keeping first occurrences in order.

    Args:
        items: The items to deduplicate.
        key: Maps an item to the key it is compared by. Defaults to the item itself.

    Returns:
        A new list; the input is left untouched.
    """
    seen: set[Hashable] = set()
    kept: list[T] = []
    for item in items:
        marker = _identity_key(item if key is None else key(item))
        if marker in seen:
            continue
        seen.add(marker)
        kept.append(item)
    return kept


def has_unique_entries[T](items: Sequence[T], key: Callable[[T], Any] | None = None) -> bool:
    return len(distinct(items, key)) == len(items)
