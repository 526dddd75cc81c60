"""Details a day of a week"""

import enum


class InvalidDayError(ValueError):
    """Raised when a value is not a name of a day of a week"""

    def __init__(self, value, valid_days):
        super(InvalidDayError, self).__init__(
            "'{0}' is not a valid day name. Start day should be one of {1}.".format(value, list(valid_days)))
        self.__value = value
        self.__valid_days = tuple(valid_days)

    @property
    def value(self):
        """Get a property"""

        return self.__value

    @property
    def valid_days(self):
        """Get a property"""

        return self.__valid_days


class Day:
    """Details a day of a week

    Days are indexed from Sunday (0) to Saturday (6). A day compares equal to its lowercase name."""

    def __init__(self, index, name):
        self.__index = index
        self.__name = name

    def __eq__(self, other):
        if isinstance(other, Day):
            return self.__index == other.index
        if isinstance(other, str):
            return self.__name == other
        return NotImplemented

    def __lt__(self, other):
        if not isinstance(other, Day):
            return NotImplemented
        return self.__index.__lt__(other.index)

    def __hash__(self):
        return hash(self.__name)

    def __str__(self):
        return self.__name

    def __repr__(self):
        return self.__name

    def matches(self, date):
        """Returns true if the date falls on this day of the week"""

        return date.isoweekday() % 7 == self.__index

    @property
    def index(self):
        """Get a property"""

        return self.__index

    @property
    def name(self):
        """Get a property"""

        return self.__name


SUNDAY = Day(0, 'sunday')
MONDAY = Day(1, 'monday')
TUESDAY = Day(2, 'tuesday')
WEDNESDAY = Day(3, 'wednesday')
THURSDAY = Day(4, 'thursday')
FRIDAY = Day(5, 'friday')
SATURDAY = Day(6, 'saturday')
DAYS = [SUNDAY, MONDAY, TUESDAY, WEDNESDAY, THURSDAY, FRIDAY, SATURDAY]
VALID_DAYS = tuple(day.name for day in DAYS)

DEFAULT_START_DAY = MONDAY


def validate(value):
    """Parse input value to a day or raise an error if the value is not a name of a day"""

    if isinstance(value, Day):
        return value

    text = value.name if isinstance(value, enum.Enum) else str(value)
    name = text.strip().lower()
    for day in DAYS:
        if name == day.name:
            return day
    raise InvalidDayError(value, VALID_DAYS)


def from_date(date):
    """Convert input date to a day"""

    return DAYS[date.isoweekday() % 7]
