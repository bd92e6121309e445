"""
Exceptions raised by etlkit helpers.

Both concrete errors subclass ValueError so callers catching the builtin
keep working.
"""


class EtlKitError(Exception):
    """Base class for all etlkit errors"""


class InvalidArgumentError(EtlKitError, ValueError):
    """Raised when a helper receives arguments it cannot work with"""


class DateFormatError(EtlKitError, ValueError):
    """Raised when text cannot be parsed as a date/time"""
