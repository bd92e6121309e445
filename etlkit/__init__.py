"""
etlkit - Lightweight helpers for ETL jobs

Stateless helpers grouped by the values they operate on.
- Collections: zip to dict, pairs to dict, batches, membership
- Dictionaries: append/replace, cumulative append, value conversion
- Time: text and epoch to datetime, epoch and ISO 8601 from datetime
"""

from etlkit.coreutils.data import DataConverter
from etlkit.coreutils.time import (
    DateTimeStyles,
    epoch_to_date_string,
    epoch_to_datetime,
    epoch_to_datetime_utc,
    parse_datetime,
    parse_datetime_utc,
    to_epoch,
    to_iso8601,
)
from etlkit.exceptions import DateFormatError, EtlKitError, InvalidArgumentError
from etlkit.transformation.collections import (
    as_batches,
    is_in,
    pairs_to_dict,
    zip_to_dict,
)
from etlkit.transformation.mappings import (
    append_calc,
    append_or_replace,
    append_or_replace_ro,
    convert_all,
    convert_all_ro,
    convert_as_castable,
)

__version__ = "1.0.0"

__all__ = [
    "DataConverter",
    "DateFormatError",
    "DateTimeStyles",
    "EtlKitError",
    "InvalidArgumentError",
    "append_calc",
    "append_or_replace",
    "append_or_replace_ro",
    "as_batches",
    "convert_all",
    "convert_all_ro",
    "convert_as_castable",
    "epoch_to_date_string",
    "epoch_to_datetime",
    "epoch_to_datetime_utc",
    "is_in",
    "pairs_to_dict",
    "parse_datetime",
    "parse_datetime_utc",
    "to_epoch",
    "to_iso8601",
    "zip_to_dict",
]
