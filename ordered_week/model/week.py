"""Details the seven consecutive days of a week"""

import collections
import datetime
import logging

import ordered_week.model.datetime
import ordered_week.model.day
from ordered_week.model.datetime import InvalidDateError
from ordered_week.model.day import InvalidDayError


class Week:
    """Details the seven consecutive days of a week which contains a reference date

    The week begins on the start day. If neither the start day nor the settings are given,
    the week begins on Monday. An invalid start day falls back to the default start day
    unless the week is created in the strict mode."""

    LENGTH = 7

    def __init__(self, reference_date=None, start_day=None, settings=None, strict=False):
        self.__start_day = Week.__resolve_start_day(start_day, settings, strict)

        if reference_date is None:
            date = datetime.date.today()
        else:
            date = ordered_week.model.datetime.to_date(reference_date)
        self.__days = Week.__build_days(date, self.__start_day)

    def __eq__(self, other):
        return isinstance(other, Week) and self.__start_day == other.start_day and self.__days == other.days

    def __hash__(self):
        return hash((self.__start_day, self.__days))

    def __iter__(self):
        return iter(self.__days)

    def __len__(self):
        return len(self.__days)

    def __contains__(self, date):
        return date in self.__days

    def __getitem__(self, index):
        return self.__days[index]

    def __str__(self):
        return '[{0}]'.format(', '.join(date.isoformat() for date in self.__days))

    def __repr__(self):
        return self.__str__()

    def to_list(self):
        """Get days of the week as a list"""

        return list(self.__days)

    def to_range(self):
        """Get the first and the last day of the week"""

        return self.start_date, self.end_date

    def to_ordered_dict(self):
        """Get dates of the week keyed by the days from Sunday to Saturday"""

        return collections.OrderedDict((day, self.day(day)) for day in ordered_week.model.day.DAYS)

    def day(self, name):
        """Get the date of the day of the week"""

        day = ordered_week.model.day.validate(name)
        return self.__days[(day.index - self.__start_day.index) % Week.LENGTH]

    @property
    def start_day(self):
        """Get a property"""

        return self.__start_day

    @property
    def days(self):
        """Get a property"""

        return self.__days

    @property
    def start_date(self):
        """Get the first day of the week"""

        return self.__days[0]

    @property
    def end_date(self):
        """Get the last day of the week"""

        return self.__days[-1]

    @property
    def sunday(self):
        """Get the Sunday of the week"""

        return self.day(ordered_week.model.day.SUNDAY)

    @property
    def monday(self):
        """Get the Monday of the week"""

        return self.day(ordered_week.model.day.MONDAY)

    @property
    def tuesday(self):
        """Get the Tuesday of the week"""

        return self.day(ordered_week.model.day.TUESDAY)

    @property
    def wednesday(self):
        """Get the Wednesday of the week"""

        return self.day(ordered_week.model.day.WEDNESDAY)

    @property
    def thursday(self):
        """Get the Thursday of the week"""

        return self.day(ordered_week.model.day.THURSDAY)

    @property
    def friday(self):
        """Get the Friday of the week"""

        return self.day(ordered_week.model.day.FRIDAY)

    @property
    def saturday(self):
        """Get the Saturday of the week"""

        return self.day(ordered_week.model.day.SATURDAY)

    @staticmethod
    def __resolve_start_day(start_day, settings, strict):
        default_start_day = settings.start_day if settings is not None else ordered_week.model.day.DEFAULT_START_DAY
        if start_day is None:
            return default_start_day

        try:
            return ordered_week.model.day.validate(start_day)
        except InvalidDayError as ex:
            if strict:
                raise
            logging.warning("Ignoring start day '%s' due to error '%s'. Using '%s' instead.",
                            start_day, ex, default_start_day)
            return default_start_day

    @staticmethod
    def __build_days(date, start_day):
        time_step = datetime.timedelta(days=1)

        try:
            current_date = date
            for _ in range(Week.LENGTH - 1):
                if start_day.matches(current_date):
                    break
                current_date -= time_step
            if not start_day.matches(current_date):
                raise InvalidDateError(date)
            return tuple(current_date + offset * time_step for offset in range(Week.LENGTH))
        except OverflowError as ex:
            raise InvalidDateError(date) from ex
