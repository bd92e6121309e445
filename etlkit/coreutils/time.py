"""
Date and time helpers.

Time references map onto datetime objects as:
- unspecified: naive datetime
- local: aware datetime in the system zone (datetime.astimezone())
- universal: aware datetime with tzinfo=timezone.utc
"""

import calendar
import logging
from datetime import datetime, timedelta, timezone
from enum import IntFlag
from typing import Optional

from dateutil import parser

from etlkit.exceptions import DateFormatError, InvalidArgumentError

logger = logging.getLogger(__name__)

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# 0001-01-01T00:00:00Z and 9999-12-31T23:59:59Z
MIN_EPOCH = -62_135_596_800
MAX_EPOCH = 253_402_300_799


class DateTimeStyles(IntFlag):
    """Flags controlling how parsed text is tagged"""

    NONE = 0
    ALLOW_WHITE_SPACES = 1
    ADJUST_TO_UNIVERSAL = 2
    ASSUME_LOCAL = 4
    ASSUME_UNIVERSAL = 8
    ROUNDTRIP_KIND = 16


def parse_datetime(
    text: str,
    culture: Optional[parser.parserinfo] = None,
    style: DateTimeStyles = DateTimeStyles.NONE,
) -> datetime:
    """
    Parse text into a datetime

    Args:
        text: Date/time text, e.g. "2023-06-15 10:30" or "06/15/2023 10:30 PM"
        culture: dateutil parserinfo for the locale, None for the invariant
            convention (month first, English names)
        style: DateTimeStyles flags

    Returns:
        datetime: local when the text carries an offset, naive when it
        doesn't, unless style says otherwise

    Raises:
        DateFormatError: If text is not a recognizable date/time
        InvalidArgumentError: If ASSUME_LOCAL and ASSUME_UNIVERSAL are combined
    """
    if style & DateTimeStyles.ASSUME_LOCAL and style & DateTimeStyles.ASSUME_UNIVERSAL:
        raise InvalidArgumentError("ASSUME_LOCAL and ASSUME_UNIVERSAL are exclusive")

    if not isinstance(text, str):
        raise DateFormatError(f"Expected text to parse, got {type(text).__name__}")

    if style & DateTimeStyles.ALLOW_WHITE_SPACES:
        text = text.strip()

    try:
        parsed = parser.parse(text, parserinfo=culture)
    except (ValueError, OverflowError) as e:
        logger.error(f"❌ Failed to parse datetime from {text!r}: {e}")
        raise DateFormatError(f"Cannot parse {text!r} as a date/time") from e

    has_offset = parsed.tzinfo is not None
    if not has_offset:
        if style & DateTimeStyles.ASSUME_UNIVERSAL:
            parsed = parsed.replace(tzinfo=timezone.utc)
        elif style & DateTimeStyles.ASSUME_LOCAL:
            parsed = parsed.astimezone()
        else:
            return parsed

    if style & DateTimeStyles.ADJUST_TO_UNIVERSAL:
        return parsed.astimezone(timezone.utc)

    if (
        style & DateTimeStyles.ROUNDTRIP_KIND
        and has_offset
        and parsed.utcoffset() == timedelta(0)
    ):
        return parsed.astimezone(timezone.utc)

    return parsed.astimezone()


def parse_datetime_utc(
    text: str,
    culture: Optional[parser.parserinfo] = None,
    style: DateTimeStyles = DateTimeStyles.NONE,
) -> datetime:
    """Parse text like parse_datetime, then convert to UTC (naive results are read as local)"""
    return parse_datetime(text, culture, style).astimezone(timezone.utc)


def to_epoch(dt: datetime) -> int:
    """
    Return the number of whole seconds elapsed since 1970-01-01T00:00:00Z

    WARNING: a naive datetime is treated as UTC, it is not shifted from local
    time first. A naive local datetime a few hours behind UTC will look like
    it is in the past.
    """
    if dt.utcoffset() is None:
        return calendar.timegm(dt.timetuple())
    return calendar.timegm(dt.utctimetuple())


def epoch_to_datetime_utc(epoch: int) -> datetime:
    """Return a UTC datetime from a unix timestamp"""
    if not MIN_EPOCH <= epoch <= MAX_EPOCH:
        raise InvalidArgumentError(
            f"Epoch {epoch} is outside [{MIN_EPOCH}, {MAX_EPOCH}]"
        )
    return UNIX_EPOCH + timedelta(seconds=epoch)


def epoch_to_datetime(epoch: int) -> datetime:
    """Return a local datetime from a unix timestamp"""
    utc = epoch_to_datetime_utc(epoch)
    try:
        return utc.astimezone()
    except (OverflowError, ValueError, OSError) as e:
        logger.error(f"❌ Epoch {epoch} is out of range in the local time zone: {e}")
        raise InvalidArgumentError(
            f"Epoch {epoch} cannot be represented in the local time zone"
        ) from e


def epoch_to_date_string(epoch: int) -> str:
    """Convert UNIX timestamp to YYYY-MM-DD string (UTC)."""
    return epoch_to_datetime_utc(epoch).strftime("%Y-%m-%d")


def _local_utc_offset() -> timedelta:
    return datetime.now().astimezone().utcoffset()


def _format_offset(offset: timedelta) -> str:
    sign = "-" if offset < timedelta(0) else "+"
    hours, minutes = divmod(abs(int(offset.total_seconds())) // 60, 60)
    return f"{sign}{hours:02d}:{minutes:02d}"


def to_iso8601(
    dt: datetime,
    is_year: bool = True,
    is_month: bool = True,
    is_day: bool = True,
    is_hours: bool = True,
    is_minutes: bool = True,
    is_seconds: bool = True,
    is_milliseconds: bool = False,
    is_utc: bool = False,
) -> str:
    """
    Build an ISO 8601 string from the selected components of dt

    Components are emitted in fixed order (YYYY, -MM, -DD, THH, :mm, :ss,
    .fff). A disabled component is dropped together with its leading
    separator. The fields of dt are used as they are, no time zone
    conversion is done.

    If is_utc is True "Z" is appended, otherwise the local offset as
    "+HH:MM". The offset is the one in effect now, not at dt, so it can be
    off by the DST shift for dates on the other side of a transition.
    """
    parts = []
    if is_year:
        parts.append(f"{dt.year:04d}")
    if is_month:
        parts.append(f"-{dt.month:02d}")
    if is_day:
        parts.append(f"-{dt.day:02d}")
    if is_hours:
        parts.append(f"T{dt.hour:02d}")
    if is_minutes:
        parts.append(f":{dt.minute:02d}")
    if is_seconds:
        parts.append(f":{dt.second:02d}")
    if is_milliseconds:
        parts.append(f".{dt.microsecond // 1000:03d}")
    parts.append("Z" if is_utc else _format_offset(_local_utc_offset()))

    return "".join(parts)
