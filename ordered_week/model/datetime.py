"""Utility functions for converting date-like objects to dates"""

import datetime

import dateutil.parser
import numpy


class InvalidDateError(ValueError):
    """Raised when a value cannot be converted to a date"""

    def __init__(self, value):
        super(InvalidDateError, self).__init__(
            "'{0}' is not a valid date. Please pass a date, a datetime, an ISO 8601 string"
            " or an object which provides the to_date method.".format(value))
        self.__value = value

    @property
    def value(self):
        """Get a property"""

        return self.__value


def to_date(value) -> datetime.date:
    """Converts a date-like object to a date, dropping the time of day"""

    if isinstance(value, datetime.date):
        return _to_plain_date(value, value)

    if isinstance(value, numpy.datetime64):
        return _from_datetime64(value)

    if isinstance(value, str):
        try:
            return dateutil.parser.isoparse(value).date()
        except (ValueError, OverflowError) as ex:
            raise InvalidDateError(value) from ex

    converter = getattr(value, 'to_date', None)
    if callable(converter):
        try:
            date = converter()
        except (TypeError, ValueError, OverflowError) as ex:
            raise InvalidDateError(value) from ex
        if isinstance(date, datetime.date):
            return _to_plain_date(date, value)

    raise InvalidDateError(value)


def _to_plain_date(date, value):
    # subclasses such as pandas.NaT pass the type checks without holding a valid date
    try:
        if isinstance(date, datetime.datetime):
            date = date.date()
        return datetime.date(date.year, date.month, date.day)
    except (AttributeError, TypeError, ValueError) as ex:
        raise InvalidDateError(value) from ex


def _from_datetime64(value):
    if numpy.isnat(value):
        raise InvalidDateError(value)

    # dates outside of the supported range are returned as integers
    date = value.astype('datetime64[D]').item()
    if not isinstance(date, datetime.date):
        raise InvalidDateError(value)
    return date
