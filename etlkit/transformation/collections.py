"""
Collection Helpers - Transform Layer

Pure functions turning sequences into dictionaries and batches.
"""

import logging
from typing import Any, Dict, Hashable, Iterable, List, Tuple, TypeVar

from etlkit.coreutils.env import DEFAULT_BATCH_SIZE
from etlkit.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
T = TypeVar("T")


def zip_to_dict(keys: Iterable[K], values: Iterable[V]) -> Dict[K, V]:
    """
    Zip two sequences of the same length into a dictionary

    Duplicate keys follow dict construction: the last value wins.

    Args:
        keys: Keys, none of which may be None
        values: Values, co-indexed with keys

    Returns:
        Dict: keys[i] -> values[i]

    Raises:
        InvalidArgumentError: On a None key or mismatched lengths
    """
    keys = list(keys)
    values = list(values)

    if any(key is None for key in keys):
        logger.error("❌ zip_to_dict received a None key")
        raise InvalidArgumentError("Keys cannot be None.")

    if len(keys) != len(values):
        logger.error(
            f"❌ zip_to_dict length mismatch: {len(keys)} keys, {len(values)} values"
        )
        raise InvalidArgumentError(
            f"The keys list has {len(keys)} elements, "
            f"while the values list has {len(values)}."
        )

    return dict(zip(keys, values))


def pairs_to_dict(pairs: Iterable[Tuple[K, V]]) -> Dict[K, V]:
    """Turn a sequence of (key, value) tuples into a dictionary, last value wins"""
    return {key: value for key, value in pairs}


def as_batches(items: Iterable[T], batch_size: int = DEFAULT_BATCH_SIZE) -> List[List[T]]:
    """
    Split a sequence into consecutive batches of batch_size elements

    The last batch may be shorter. Batches hold references to the original
    elements, nothing is copied or mutated.

    Args:
        items: Sequence to split
        batch_size: Number of elements per batch

    Returns:
        List: ceil(len(items) / batch_size) batches, empty for empty input
    """
    if batch_size <= 0:
        raise InvalidArgumentError(f"batch_size must be positive, got {batch_size}")

    items = list(items)
    batches = [
        items[position : position + batch_size]
        for position in range(0, len(items), batch_size)
    ]

    logger.debug(f"Split {len(items)} elements into {len(batches)} batches")
    return batches


def is_in(value: Any, *candidates: Any) -> bool:
    """Check whether value equals any of the candidates (native equality)"""
    return value in candidates
