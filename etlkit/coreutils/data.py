from typing import Any, Dict, Hashable, List, Mapping
import logging

import polars as pl

from etlkit.coreutils.env import DEFAULT_BATCH_SIZE
from etlkit.exceptions import InvalidArgumentError
from etlkit.transformation.collections import zip_to_dict

logger = logging.getLogger(__name__)


class DataConverter:
    """Utility class bridging the collection helpers to Polars DataFrames"""

    @staticmethod
    def frame_batches(
        df: pl.DataFrame, batch_size: int = DEFAULT_BATCH_SIZE
    ) -> List[pl.DataFrame]:
        """Split a DataFrame into consecutive row batches

        Batches are zero-copy slices of df; the last one may be shorter.

        Args:
            df: DataFrame to split
            batch_size: Number of rows per batch

        Returns:
            ceil(df.height / batch_size) DataFrames, empty list for an empty df
        """
        if batch_size <= 0:
            raise InvalidArgumentError(f"batch_size must be positive, got {batch_size}")

        batches = [
            df.slice(offset, batch_size) for offset in range(0, df.height, batch_size)
        ]
        logger.debug(f"Split {df.height} rows into {len(batches)} batches")
        return batches

    @staticmethod
    def columns_to_dict(
        df: pl.DataFrame, key_column: str, value_column: str
    ) -> Dict[Hashable, Any]:
        """Build a lookup dictionary from two DataFrame columns

        Args:
            df: Source DataFrame
            key_column: Column holding the keys (no nulls allowed)
            value_column: Column holding the values

        Returns:
            Dictionary key -> value, last row wins on duplicate keys
        """
        for column in (key_column, value_column):
            if column not in df.columns:
                logger.error(f"❌ Column {column!r} not found in {df.columns}")
                raise InvalidArgumentError(f"Column not found: {column}")

        return zip_to_dict(
            df.get_column(key_column).to_list(),
            df.get_column(value_column).to_list(),
        )

    @staticmethod
    def dict_to_frame(
        mapping: Mapping[Hashable, Any],
        key_column: str = "key",
        value_column: str = "value",
    ) -> pl.DataFrame:
        """Turn a dictionary into a two-column DataFrame, one row per entry"""
        return pl.DataFrame(
            {
                key_column: list(mapping.keys()),
                value_column: list(mapping.values()),
            }
        )
