"""
Dictionary Helpers - Transform Layer

Merge and value transformation helpers for dictionaries.

Each transformation exists in two forms:
- mutating (append_or_replace, append_calc, convert_all) updates the
  caller's dict in place and returns None
- read-only (*_ro, convert_as_castable) returns a new dict and leaves the
  inputs untouched

The mutating helpers do no locking; callers sharing a dict between threads
must serialize the calls themselves.
"""

import logging
from decimal import Decimal
from fractions import Fraction
from typing import Callable, Dict, Hashable, Mapping, Optional, TypeVar, Union

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
W = TypeVar("W")
N = TypeVar("N", bound=Union[int, float, complex, Decimal, Fraction])


def _identity(x):
    return x


def append_or_replace(target: Dict[K, V], source: Mapping[K, V]) -> None:
    """
    Overwrite same-key values of target with those of source, adding the missing ones

    Keys present only in target are kept.
    """
    for key, value in source.items():
        target[key] = value


def append_or_replace_ro(first: Mapping[K, V], second: Mapping[K, V]) -> Dict[K, V]:
    """
    Read-only version of append_or_replace

    Returns:
        Dict: first's entries overwritten/extended by second's, as a new dict
    """
    result: Dict[K, V] = {}
    for key, value in first.items():
        result[key] = value
    for key, value in second.items():
        result[key] = value

    return result


def append_calc(
    target: Dict[K, N],
    source: Mapping[K, N],
    cumulator: Callable[[N, N], N],
    target_modifier: Optional[Callable[[N], N]] = None,
    input_modifier: Optional[Callable[[N], N]] = None,
) -> None:
    """
    Combine the values of source into target with cumulator, matching on keys

    Non-matching keys are added to target. Only meant for numeric values; no
    type checks are made, whatever the cumulator raises propagates.

    Example:
        >>> totals = {"first": 10, "second": 20}
        >>> append_calc(totals, {"first": 5, "second": 2, "third": 30},
        ...             cumulator=lambda x, y: x * y)
        >>> totals
        {'first': 50, 'second': 40, 'third': 30}

        With modifiers applied before the cumulator:

        >>> totals = {"first": 10, "second": 20}
        >>> append_calc(totals, {"first": 5, "second": 2, "third": 30},
        ...             cumulator=lambda x, y: x + y,
        ...             target_modifier=lambda x: x + 1,
        ...             input_modifier=lambda x: x * 5)
        >>> totals
        {'first': 36, 'second': 31, 'third': 150}

    Args:
        target: Dict updated in place
        source: Dict read from, never altered
        cumulator: f(target_value, source_value) for matching keys
        target_modifier: Applied to target values before cumulating
        input_modifier: Applied to every source value
    """
    target_modifier = target_modifier or _identity
    input_modifier = input_modifier or _identity

    for key, value in source.items():
        if key in target:
            target[key] = cumulator(target_modifier(target[key]), input_modifier(value))
        else:
            target[key] = input_modifier(value)


def convert_all(target: Dict[K, V], modifier: Callable[[V], V]) -> None:
    """
    Apply modifier to every value of target, in place

    If modifier raises, target is left unchanged.

    Example:
        >>> values = {"first": 10, "second": 20}
        >>> convert_all(values, lambda x: x // 5)
        >>> values
        {'first': 2, 'second': 4}
    """
    # target is only touched once every value is converted
    converted = [(key, modifier(value)) for key, value in target.items()]
    for key, value in converted:
        target[key] = value


def convert_all_ro(source: Mapping[K, V], modifier: Callable[[V], V]) -> Dict[K, V]:
    """Read-only version of convert_all"""
    return {key: modifier(value) for key, value in source.items()}


def convert_as_castable(source: Mapping[K, V], modifier: Callable[[V], W]) -> Dict[K, W]:
    """
    Convert the values of source with modifier into a new dict of another value type

    Example:
        >>> convert_as_castable({"first": 1, "second": 2}, float)
        {'first': 1.0, 'second': 2.0}
    """
    result: Dict[K, W] = {}
    for key, value in source.items():
        result[key] = modifier(value)

    logger.debug(f"Converted {len(result)} values")
    return result
